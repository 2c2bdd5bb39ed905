from .patient import Patient
from .prescription import Prescription

__all__ = ["Patient", "Prescription"]
