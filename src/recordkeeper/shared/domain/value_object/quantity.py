from dataclasses import dataclass

from recordkeeper.shared.domain.exception import (
    ArithmeticOverflowException,
    InvalidValueException,
)

# 32bit 符号付き整数の上限
MAX_QUANTITY = 2**31 - 1


@dataclass(frozen=True)
class Quantity:
    """在庫数量

    Value Object として不変性を保証。
    0 以上 MAX_QUANTITY 以下の整数のみを許容する。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValueException(f"Quantity must be an integer: {self.value!r}")
        if self.value < 0:
            raise InvalidValueException("Quantity cannot be negative")
        if self.value > MAX_QUANTITY:
            raise InvalidValueException(
                f"Quantity cannot exceed {MAX_QUANTITY}: {self.value}"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def add(self, amount: int) -> "Quantity":
        """数量を加算する

        加算結果が MAX_QUANTITY を超える場合は ArithmeticOverflowException。
        自身は変更されない。
        """
        if amount < 0:
            raise InvalidValueException("Increment cannot be negative")
        total = self.value + amount
        if total > MAX_QUANTITY:
            raise ArithmeticOverflowException(
                f"Quantity overflow: {self.value} + {amount} exceeds {MAX_QUANTITY}"
            )
        return Quantity(total)
