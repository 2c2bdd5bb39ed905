from .student_file_reader import StudentFileReader

__all__ = ["StudentFileReader"]
