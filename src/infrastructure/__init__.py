"""インフラストラクチャ層モジュール."""
# 外部 API クライアントは requests / anthropic に依存するため、
# 必要な時に src.infrastructure.clients から直接インポートする
from .clients import MockFinancialAdvisor
from .providers import FixedSpendingLimitPolicy, UserConfiguredSpendingLimitPolicy
from .repositories import InMemoryTransactionRepository, InMemoryUserRepository

__all__ = [
    "FixedSpendingLimitPolicy",
    "InMemoryTransactionRepository",
    "InMemoryUserRepository",
    "MockFinancialAdvisor",
    "UserConfiguredSpendingLimitPolicy",
]
