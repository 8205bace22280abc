"""列挙型モジュール."""
from .transaction_type import TransactionType

__all__ = [
    "TransactionType",
]
