"""ドメイン層モジュール."""
from .entities import Transaction, TransactionGroup, TransactionLeaf, TransactionNode, User
from .enums import TransactionType
from .identifiers import InvalidUserIdError, TransactionId, UserId
from .ports import (
    FinancialAdvisor,
    SpendingLimitPolicy,
    TransactionRepository,
    UserRepository,
)
from .services import PeriodRollupBuilder
from .value_objects import (
    DisplayName,
    Email,
    FinanceSummary,
    InvalidAmountError,
    Money,
    MoneyPrecisionError,
)

__all__ = [
    # Identifiers
    "InvalidUserIdError",
    "TransactionId",
    "UserId",
    # Enums
    "TransactionType",
    # Value Objects
    "DisplayName",
    "Email",
    "FinanceSummary",
    "InvalidAmountError",
    "Money",
    "MoneyPrecisionError",
    # Entities
    "Transaction",
    "TransactionGroup",
    "TransactionLeaf",
    "TransactionNode",
    "User",
    # Ports
    "FinancialAdvisor",
    "SpendingLimitPolicy",
    "TransactionRepository",
    "UserRepository",
    # Services
    "PeriodRollupBuilder",
]
