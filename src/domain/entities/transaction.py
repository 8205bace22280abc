"""取引エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from ..enums import TransactionType
from ..identifiers import TransactionId, UserId
from ..value_objects import InvalidAmountError, Money


@dataclass
class Transaction:
    """収入・支出の記録."""

    transaction_id: TransactionId
    user_id: UserId
    transaction_type: TransactionType
    amount: Money
    category: str
    occurred_on: date
    description: str = ""
    is_micro: bool = False
    daily_limit: Money | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.amount.is_zero():
            raise InvalidAmountError("Transaction amount must be positive")
        if not self.category or not self.category.strip():
            raise ValueError("Category cannot be empty")
        if self.is_micro:
            if self.transaction_type != TransactionType.EXPENSE:
                raise ValueError("Micro transactions must be expenses")
            if self.daily_limit is None:
                raise ValueError("Micro expenses must record the daily limit")

    @classmethod
    def create_income(
        cls,
        user_id: UserId,
        amount: Money,
        category: str,
        occurred_on: date,
        description: str = "",
    ) -> Transaction:
        """収入を作成する."""
        return cls(
            transaction_id=TransactionId.generate(),
            user_id=user_id,
            transaction_type=TransactionType.INCOME,
            amount=amount,
            category=category.strip(),
            occurred_on=occurred_on,
            description=description,
        )

    @classmethod
    def create_expense(
        cls,
        user_id: UserId,
        amount: Money,
        category: str,
        occurred_on: date,
        description: str = "",
    ) -> Transaction:
        """支出を作成する."""
        return cls(
            transaction_id=TransactionId.generate(),
            user_id=user_id,
            transaction_type=TransactionType.EXPENSE,
            amount=amount,
            category=category.strip(),
            occurred_on=occurred_on,
            description=description,
        )

    @classmethod
    def create_micro_expense(
        cls,
        user_id: UserId,
        amount: Money,
        category: str,
        occurred_on: date,
        daily_limit: Money,
        description: str = "",
    ) -> Transaction:
        """適用された日次上限とともに少額支出を作成する."""
        return cls(
            transaction_id=TransactionId.generate(),
            user_id=user_id,
            transaction_type=TransactionType.EXPENSE,
            amount=amount,
            category=category.strip(),
            occurred_on=occurred_on,
            description=description,
            is_micro=True,
            daily_limit=daily_limit,
        )

    def is_expense(self) -> bool:
        """支出かどうか."""
        return self.transaction_type == TransactionType.EXPENSE

    def is_income(self) -> bool:
        """収入かどうか."""
        return self.transaction_type == TransactionType.INCOME
