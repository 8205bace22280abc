"""リポジトリ実装モジュール."""
from .in_memory_transaction_repository import InMemoryTransactionRepository
from .in_memory_user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryTransactionRepository",
    "InMemoryUserRepository",
]
