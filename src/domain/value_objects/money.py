"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    Decimal,
    Inexact,
    InvalidOperation,
    Overflow,
    Rounded,
    localcontext,
)

_CENT = Decimal("0.01")


class InvalidAmountError(ValueError):
    """不正な金額エラー."""

    pass


class MoneyPrecisionError(ArithmeticError):
    """金額計算で精度が失われるエラー."""

    pass


def _to_decimal(value: object) -> Decimal:
    """入力値を Decimal に変換する（float は受け付けない）."""
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidAmountError(f"Money value must be int, str or Decimal, got {type(value).__name__}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(f"Invalid money value: {value!r}") from None
    raise InvalidAmountError(f"Money value must be int, str or Decimal, got {type(value).__name__}")


@dataclass(frozen=True)
class Money:
    """金額を表現する値オブジェクト（小数点以下2桁の固定小数点）."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        amount = _to_decimal(self.value)
        if not amount.is_finite():
            raise InvalidAmountError("Money value must be finite")
        if amount < 0:
            raise InvalidAmountError("Money value cannot be negative")
        try:
            quantized = amount.quantize(_CENT)
        except InvalidOperation:
            raise InvalidAmountError(f"Money value out of range: {amount}") from None
        if quantized != amount:
            raise InvalidAmountError(f"Money value cannot have more than 2 decimal places: {amount}")
        # "-0" を 0.00 にそろえる
        object.__setattr__(self, "value", quantized.copy_abs())

    @classmethod
    def of(cls, value: int | str | Decimal) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す.

        丸めやオーバーフローが発生する場合は MoneyPrecisionError を送出する。
        """
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            ctx.traps[Rounded] = True
            ctx.traps[Overflow] = True
            try:
                result = self.value + other.value
            except (Inexact, Rounded, Overflow) as e:
                raise MoneyPrecisionError(
                    f"Adding {other.value} to {self.value} would lose precision"
                ) from e
        return Money(result)

    def subtract(self, other: Money) -> Money:
        """金額を減算して新しいMoneyを返す."""
        result = self.value - other.value
        if result < 0:
            raise InvalidAmountError("Subtraction would result in negative value")
        return Money(result)

    def is_zero(self) -> bool:
        """ゼロかどうか."""
        return self.value == 0

    def is_greater_than(self, other: Money) -> bool:
        """この金額が他の金額より大きいか判定."""
        return self.value > other.value

    def is_less_than_or_equal(self, other: Money) -> bool:
        """この金額が他の金額以下か判定."""
        return self.value <= other.value

    def to_plain_string(self) -> str:
        """API 送受信用の文字列（例: "350.00"）."""
        return format(self.value, "f")

    def format(self) -> str:
        """表示用フォーマット（例: "$1,234.50"）."""
        return f"${self.value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
