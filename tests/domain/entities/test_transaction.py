"""Transactionエンティティのテスト."""
from datetime import date

import pytest

from src.domain.entities import Transaction
from src.domain.enums import TransactionType
from src.domain.identifiers import TransactionId, UserId
from src.domain.value_objects import InvalidAmountError, Money


class TestTransaction:
    """Transactionの単体テスト."""

    def test_収入を作成できる(self) -> None:
        t = Transaction.create_income(UserId("user-1"), Money(1000), "salary", date(2026, 1, 25))
        assert t.is_income()
        assert not t.is_expense()
        assert t.transaction_type == TransactionType.INCOME
        assert not t.is_micro
        assert t.daily_limit is None

    def test_支出を作成できる(self) -> None:
        t = Transaction.create_expense(
            UserId("user-1"), Money.of("12.50"), " food ", date(2026, 1, 2), description="lunch"
        )
        assert t.is_expense()
        assert t.category == "food"
        assert t.description == "lunch"

    def test_少額支出は適用された上限を保持する(self) -> None:
        t = Transaction.create_micro_expense(
            UserId("user-1"), Money.of("3.00"), "coffee", date(2026, 1, 2), daily_limit=Money(100)
        )
        assert t.is_micro
        assert t.is_expense()
        assert t.daily_limit == Money(100)

    def test_金額ゼロはエラー(self) -> None:
        with pytest.raises(InvalidAmountError, match="must be positive"):
            Transaction.create_expense(UserId("user-1"), Money.zero(), "food", date(2026, 1, 2))

    def test_カテゴリが空はエラー(self) -> None:
        with pytest.raises(ValueError, match="Category cannot be empty"):
            Transaction.create_expense(UserId("user-1"), Money(1), "  ", date(2026, 1, 2))

    def test_収入の少額取引はエラー(self) -> None:
        with pytest.raises(ValueError, match="must be expenses"):
            Transaction(
                transaction_id=TransactionId.generate(),
                user_id=UserId("user-1"),
                transaction_type=TransactionType.INCOME,
                amount=Money(1),
                category="gift",
                occurred_on=date(2026, 1, 2),
                is_micro=True,
                daily_limit=Money(100),
            )

    def test_上限なしの少額支出はエラー(self) -> None:
        with pytest.raises(ValueError, match="daily limit"):
            Transaction(
                transaction_id=TransactionId.generate(),
                user_id=UserId("user-1"),
                transaction_type=TransactionType.EXPENSE,
                amount=Money(1),
                category="coffee",
                occurred_on=date(2026, 1, 2),
                is_micro=True,
            )

    def test_取引IDは毎回生成される(self) -> None:
        a = Transaction.create_expense(UserId("user-1"), Money(1), "food", date(2026, 1, 2))
        b = Transaction.create_expense(UserId("user-1"), Money(1), "food", date(2026, 1, 2))
        assert a.transaction_id != b.transaction_id
