from recordkeeper.health.domain.enum import Gender
from recordkeeper.shared.domain import Entity, InvalidValueException, RecordName

MAX_AGE = 150


class Patient(Entity[int]):
    """患者エンティティ"""

    def __init__(self, id: int, name: RecordName, age: int, gender: Gender) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidValueException(f"Id must be an integer: {id!r}")
        super().__init__(id)
        if isinstance(age, bool) or not isinstance(age, int) or not 0 <= age <= MAX_AGE:
            raise InvalidValueException(f"Age must be between 0 and {MAX_AGE}: {age!r}")
        try:
            self._gender = Gender(gender)
        except ValueError as e:
            raise InvalidValueException(f"Invalid gender: {gender!r}") from e
        self._name = name
        self._age = age

    @property
    def name(self) -> RecordName:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def gender(self) -> Gender:
        return self._gender

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": str(self._name),
            "age": self._age,
            "gender": self._gender.value,
        }
