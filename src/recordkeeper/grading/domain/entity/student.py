from recordkeeper.shared.domain import Entity, InvalidValueException, RecordName


class Student(Entity[int]):
    """学生の成績エンティティ"""

    def __init__(self, id: int, full_name: RecordName, score: int) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidValueException(f"Id must be an integer: {id!r}")
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidValueException(f"Score must be an integer: {score!r}")
        if score < 0:
            raise InvalidValueException("Score cannot be negative")
        super().__init__(id)
        self._full_name = full_name
        self._score = score

    @property
    def full_name(self) -> RecordName:
        return self._full_name

    @property
    def score(self) -> int:
        return self._score

    def to_dict(self) -> dict:
        return {"id": self.id, "full_name": str(self._full_name), "score": self._score}
