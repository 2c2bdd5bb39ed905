from .entity import Patient, Prescription
from .enum import Gender

__all__ = ["Patient", "Prescription", "Gender"]
