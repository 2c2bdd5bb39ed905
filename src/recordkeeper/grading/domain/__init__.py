from .entity import Student
from .exception import (
    InvalidScoreFormatException,
    MissingFieldException,
    RecordParseException,
)

__all__ = [
    "Student",
    "RecordParseException",
    "MissingFieldException",
    "InvalidScoreFormatException",
]
