from .prescription_lookup import PrescriptionService

__all__ = ["PrescriptionService"]
