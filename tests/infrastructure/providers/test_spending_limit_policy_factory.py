"""SpendingLimitPolicy ファクトリのテスト."""
from unittest.mock import patch

import pytest

from src.domain.value_objects import InvalidAmountError, Money
from src.infrastructure.providers import (
    FixedSpendingLimitPolicy,
    UserConfiguredSpendingLimitPolicy,
)
from src.infrastructure.providers.spending_limit_policy_factory import (
    create_spending_limit_policy,
)
from src.infrastructure.repositories import InMemoryUserRepository


class TestCreateSpendingLimitPolicy:

    def test_環境変数未設定で固定100を返す(self):
        """デフォルトはFixedSpendingLimitPolicy."""
        with patch.dict("os.environ", {}, clear=True):
            policy = create_spending_limit_policy(InMemoryUserRepository())
        assert isinstance(policy, FixedSpendingLimitPolicy)
        assert policy.limit == Money.of("100.00")

    def test_上限額を環境変数で指定できる(self):
        with patch.dict("os.environ", {"MICRO_EXPENSE_DAILY_LIMIT": "25.50"}, clear=True):
            policy = create_spending_limit_policy(InMemoryUserRepository())
        assert policy.limit_for("user-1") == Money.of("25.50")

    def test_環境変数userでユーザー設定ポリシーを返す(self):
        with patch.dict("os.environ", {"SPENDING_LIMIT_POLICY": "user"}, clear=True):
            policy = create_spending_limit_policy(InMemoryUserRepository())
        assert isinstance(policy, UserConfiguredSpendingLimitPolicy)
        assert policy.limit_for("nobody") == Money(100)

    def test_不明な値は固定にフォールバック(self):
        with patch.dict("os.environ", {"SPENDING_LIMIT_POLICY": "weekly"}, clear=True):
            policy = create_spending_limit_policy(InMemoryUserRepository())
        assert isinstance(policy, FixedSpendingLimitPolicy)

    def test_不正な上限額はエラー(self):
        with patch.dict("os.environ", {"MICRO_EXPENSE_DAILY_LIMIT": "abc"}, clear=True):
            with pytest.raises(InvalidAmountError):
                create_spending_limit_policy(InMemoryUserRepository())
