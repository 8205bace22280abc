"""プロバイダー実装."""
from .fixed_spending_limit_policy import FixedSpendingLimitPolicy
from .user_configured_spending_limit_policy import UserConfiguredSpendingLimitPolicy

__all__ = ["FixedSpendingLimitPolicy", "UserConfiguredSpendingLimitPolicy"]
