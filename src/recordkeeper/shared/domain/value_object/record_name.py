from dataclasses import dataclass

from recordkeeper.shared.domain.exception import InvalidValueException

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class RecordName:
    """レコード名（品名・患者名・薬剤名など）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value.strip()) == 0:
            raise InvalidValueException("Name cannot be empty")
        if len(self.value) > MAX_NAME_LENGTH:
            raise InvalidValueException(
                f"Name is too long (max {MAX_NAME_LENGTH} characters)"
            )

    def __str__(self) -> str:
        return self.value
