"""取引種別の列挙型."""
from enum import Enum


class TransactionType(str, Enum):
    """取引種別."""

    INCOME = "income"
    EXPENSE = "expense"
