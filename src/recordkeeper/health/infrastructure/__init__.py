from .json_health_persistence import JsonPatientPersistence, JsonPrescriptionPersistence

__all__ = ["JsonPatientPersistence", "JsonPrescriptionPersistence"]
