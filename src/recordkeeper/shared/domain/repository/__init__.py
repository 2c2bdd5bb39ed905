from .keyed_repository import KeyedRepository
from .repository import Repository

__all__ = ["Repository", "KeyedRepository"]
