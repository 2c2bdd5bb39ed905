from .json_file_persistence import JsonFilePersistenceAdapter

__all__ = ["JsonFilePersistenceAdapter"]
