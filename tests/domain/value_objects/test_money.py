"""Moneyのテスト."""
from decimal import Decimal

import pytest

from src.domain.entities import TransactionLeaf
from src.domain.value_objects import InvalidAmountError, Money, MoneyPrecisionError


class TestMoney:
    """Moneyの単体テスト."""

    def test_整数で生成できる(self) -> None:
        """整数を指定してMoneyを生成できることを確認."""
        money = Money(1000)
        assert money.value == Decimal("1000.00")

    def test_文字列で生成できる(self) -> None:
        money = Money.of("12.5")
        assert money.value == Decimal("12.50")
        assert money.to_plain_string() == "12.50"

    def test_Decimalで生成できる(self) -> None:
        money = Money.of(Decimal("0.01"))
        assert money.value == Decimal("0.01")

    def test_ゼロで生成できる(self) -> None:
        assert Money(0).value == 0
        assert Money.zero().is_zero()

    def test_負の金額で生成するとエラー(self) -> None:
        """負の金額を指定するとInvalidAmountErrorが発生することを確認."""
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Money(-100)

    def test_InvalidAmountErrorはValueErrorである(self) -> None:
        with pytest.raises(ValueError):
            Money.of("-0.01")

    def test_floatは受け付けない(self) -> None:
        """浮動小数点は丸め誤差の原因になるため拒否することを確認."""
        with pytest.raises(InvalidAmountError, match="must be int, str or Decimal"):
            Money.of(0.1)  # type: ignore[arg-type]

    def test_boolは受け付けない(self) -> None:
        with pytest.raises(InvalidAmountError):
            Money.of(True)  # type: ignore[arg-type]

    def test_小数点以下3桁以上はエラー(self) -> None:
        with pytest.raises(InvalidAmountError, match="2 decimal places"):
            Money.of("1.005")

    def test_末尾ゼロの3桁は許容される(self) -> None:
        assert Money.of("1.500").value == Decimal("1.50")

    def test_数値でない文字列はエラー(self) -> None:
        with pytest.raises(InvalidAmountError, match="Invalid money value"):
            Money.of("abc")

    def test_無限大とNaNはエラー(self) -> None:
        with pytest.raises(InvalidAmountError, match="finite"):
            Money.of("Infinity")
        with pytest.raises(InvalidAmountError, match="finite"):
            Money.of(Decimal("NaN"))

    def test_addで正確に加算できる(self) -> None:
        """0.1 + 0.2 が正確に 0.30 になることを確認."""
        result = Money.of("0.10").add(Money.of("0.20"))
        assert result.value == Decimal("0.30")

    def test_addで精度を超えるとエラー(self) -> None:
        """28桁を超える加算は丸めずに例外になることを確認."""
        big = Money.of(Decimal("9" * 26 + ".99"))
        with pytest.raises(MoneyPrecisionError):
            big.add(Money.of("0.01"))

    def test_28桁ちょうどの加算は正確に計算される(self) -> None:
        result = Money.of(Decimal("9" * 26)).add(Money.of("0.01"))
        assert result.value == Decimal("9" * 26 + ".01")

    def test_マイナスゼロは0に正規化される(self) -> None:
        money = Money.of("-0")
        assert money == Money.zero()
        assert money.to_plain_string() == "0.00"
        assert money.format() == "$0.00"
        assert TransactionLeaf(Money.of("-0.00")).total().to_plain_string() == "0.00"

    def test_subtractで減算できる(self) -> None:
        result = Money(1000).subtract(Money(300))
        assert result.value == Decimal("700")

    def test_subtractで結果が負になるとエラー(self) -> None:
        with pytest.raises(InvalidAmountError, match="negative"):
            Money(100).subtract(Money(300))

    def test_比較(self) -> None:
        assert Money(200).is_greater_than(Money(100))
        assert not Money(100).is_greater_than(Money(100))
        assert Money(100).is_less_than_or_equal(Money(100))

    def test_同じ金額は等価(self) -> None:
        assert Money(100) == Money.of("100.00")
        assert hash(Money(100)) == hash(Money.of("100.00"))

    def test_表示用フォーマット(self) -> None:
        assert Money.of("1234.5").format() == "$1,234.50"
        assert str(Money(0)) == "$0.00"

    def test_不変オブジェクトである(self) -> None:
        money = Money(100)
        with pytest.raises(AttributeError):
            money.value = Decimal("1")  # type: ignore[misc]
