from .exceptions import (
    InvalidScoreFormatException,
    MissingFieldException,
    RecordParseException,
)

__all__ = [
    "RecordParseException",
    "MissingFieldException",
    "InvalidScoreFormatException",
]
