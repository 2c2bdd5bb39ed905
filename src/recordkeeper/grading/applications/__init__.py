from .import_students import ImportStudentsService

__all__ = ["ImportStudentsService"]
