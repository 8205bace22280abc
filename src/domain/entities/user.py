"""ユーザーエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import UserId
from ..value_objects import DisplayName, Email, InvalidAmountError, Money


@dataclass
class User:
    """ユーザーエンティティ."""

    user_id: UserId
    email: Email
    display_name: DisplayName
    daily_micro_limit: Money | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def set_daily_micro_limit(self, amount: Money) -> None:
        """少額支出の日次上限を設定する."""
        if amount.is_zero():
            raise InvalidAmountError("Daily micro limit must be positive")
        self.daily_micro_limit = amount
        self.updated_at = datetime.now(timezone.utc)

    def clear_daily_micro_limit(self) -> None:
        """少額支出の日次上限を解除する."""
        self.daily_micro_limit = None
        self.updated_at = datetime.now(timezone.utc)
