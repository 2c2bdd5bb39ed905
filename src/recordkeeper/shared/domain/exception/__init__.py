from .exceptions import (
    ArithmeticOverflowException,
    DomainException,
    DuplicateResourceException,
    InvalidValueException,
    PersistenceException,
    RecordFormatException,
    ResourceNotFoundException,
    StorageIOException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "DuplicateResourceException",
    "InvalidValueException",
    "ArithmeticOverflowException",
    "PersistenceException",
    "StorageIOException",
    "RecordFormatException",
]
