from enum import Enum


class Gender(str, Enum):
    """患者の性別"""

    FEMALE = "Female"
    MALE = "Male"
    OTHER = "Other"
