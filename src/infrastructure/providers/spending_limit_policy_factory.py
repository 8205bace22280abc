"""SpendingLimitPolicy ファクトリ."""
import logging
import os

from src.domain.ports import SpendingLimitPolicy, UserRepository
from src.domain.value_objects import Money

logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = "100.00"


def create_spending_limit_policy(user_repository: UserRepository) -> SpendingLimitPolicy:
    """環境変数に基づいてSpendingLimitPolicyを生成する.

    SPENDING_LIMIT_POLICY:
        "fixed" → FixedSpendingLimitPolicy（デフォルト）
        "user"  → UserConfiguredSpendingLimitPolicy
    MICRO_EXPENSE_DAILY_LIMIT:
        固定上限額、またはユーザー未設定時の既定値（デフォルト 100.00）

    Raises:
        InvalidAmountError: MICRO_EXPENSE_DAILY_LIMIT が不正な場合
    """
    limit = Money.of(os.environ.get("MICRO_EXPENSE_DAILY_LIMIT") or DEFAULT_DAILY_LIMIT)

    policy_type = os.environ.get("SPENDING_LIMIT_POLICY")
    if policy_type == "user":
        from src.infrastructure.providers.user_configured_spending_limit_policy import (
            UserConfiguredSpendingLimitPolicy,
        )

        return UserConfiguredSpendingLimitPolicy(user_repository, default_limit=limit)

    if policy_type and policy_type != "fixed":
        logger.warning("Unknown SPENDING_LIMIT_POLICY=%s, falling back to fixed", policy_type)

    from src.infrastructure.providers.fixed_spending_limit_policy import (
        FixedSpendingLimitPolicy,
    )

    return FixedSpendingLimitPolicy(limit)
