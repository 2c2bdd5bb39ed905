from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from recordkeeper.shared.domain.exception import InvalidValueException


@dataclass(frozen=True)
class CalendarDate:
    """暦日(ISO 8601 の YYYY-MM-DD 形式)"""

    value: date

    def __post_init__(self) -> None:
        # datetime は date のサブクラスなので時刻部分を落とす
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        elif not isinstance(self.value, date):
            raise InvalidValueException(f"Invalid calendar date: {self.value!r}")

    @classmethod
    def from_string(cls, s: str) -> CalendarDate:
        """ISO 8601 形式の文字列から生成"""
        try:
            d = date.fromisoformat(s)
        except (TypeError, ValueError) as e:
            raise InvalidValueException(f"Invalid ISO 8601 date: {s}") from e
        return cls(value=d)

    def __str__(self) -> str:
        return self.value.isoformat()

    def is_before(self, other: CalendarDate) -> bool:
        """他の日付より前かどうか"""
        return self.value < other.value

    def add_months(self, months: int) -> CalendarDate:
        """months か月後の日付を返す（月末を超える日は月末に丸める）"""
        index = self.value.year * 12 + self.value.month - 1 + months
        year, month = divmod(index, 12)
        day = min(self.value.day, calendar.monthrange(year, month + 1)[1])
        return CalendarDate(date(year, month + 1, day))
