"""識別子モジュール."""
from .transaction_id import TransactionId
from .user_id import InvalidUserIdError, UserId

__all__ = [
    "InvalidUserIdError",
    "TransactionId",
    "UserId",
]
