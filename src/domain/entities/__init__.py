"""エンティティモジュール."""
from .transaction import Transaction
from .transaction_node import TransactionGroup, TransactionLeaf, TransactionNode
from .user import User

__all__ = [
    "Transaction",
    "TransactionGroup",
    "TransactionLeaf",
    "TransactionNode",
    "User",
]
