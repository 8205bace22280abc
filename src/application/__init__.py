"""アプリケーション層モジュール."""
from .use_cases import (
    GetFinanceSummaryUseCase,
    GetFinancialAdviceUseCase,
    GetSpendingRollupUseCase,
    GetTransactionsUseCase,
    GetUserProfileUseCase,
    RecordMicroExpenseUseCase,
    RecordTransactionUseCase,
    RegisterUserUseCase,
    SeedDefaultUserUseCase,
    SetDailyMicroLimitUseCase,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    # Finance Use Cases
    "RecordTransactionUseCase",
    "RecordMicroExpenseUseCase",
    "GetTransactionsUseCase",
    "GetSpendingRollupUseCase",
    "GetFinanceSummaryUseCase",
    "GetFinancialAdviceUseCase",
    # User Use Cases
    "RegisterUserUseCase",
    "GetUserProfileUseCase",
    "SetDailyMicroLimitUseCase",
    "SeedDefaultUserUseCase",
    # Errors
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
