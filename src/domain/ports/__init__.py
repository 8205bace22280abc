"""ポートモジュール."""
from .financial_advisor import FinancialAdvisor
from .spending_limit_policy import SpendingLimitPolicy
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "FinancialAdvisor",
    "SpendingLimitPolicy",
    "TransactionRepository",
    "UserRepository",
]
