from .entity import Entity
from .exception import (
    ArithmeticOverflowException,
    DomainException,
    DuplicateResourceException,
    InvalidValueException,
    PersistenceException,
    RecordFormatException,
    ResourceNotFoundException,
    StorageIOException,
)
from .repository import KeyedRepository, Repository
from .value_object import MAX_QUANTITY, CalendarDate, Quantity, RecordName

__all__ = [
    "Entity",
    "Repository",
    "KeyedRepository",
    "DomainException",
    "ResourceNotFoundException",
    "DuplicateResourceException",
    "InvalidValueException",
    "ArithmeticOverflowException",
    "PersistenceException",
    "StorageIOException",
    "RecordFormatException",
    "CalendarDate",
    "Quantity",
    "MAX_QUANTITY",
    "RecordName",
]
