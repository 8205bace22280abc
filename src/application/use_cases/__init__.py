"""ユースケースモジュール."""
from .errors import UserNotFoundError
from .get_finance_summary import GetFinanceSummaryUseCase
from .get_financial_advice import GetFinancialAdviceResult, GetFinancialAdviceUseCase
from .get_spending_rollup import GetSpendingRollupUseCase
from .get_transactions import GetTransactionsUseCase
from .get_user_profile import GetUserProfileUseCase
from .record_micro_expense import RecordMicroExpenseResult, RecordMicroExpenseUseCase
from .record_transaction import RecordTransactionResult, RecordTransactionUseCase
from .register_user import RegisterUserResult, RegisterUserUseCase, UserAlreadyExistsError
from .seed_default_user import SeedDefaultUserUseCase, should_seed_default_user
from .set_daily_micro_limit import SetDailyMicroLimitUseCase

__all__ = [
    "GetFinanceSummaryUseCase",
    "GetFinancialAdviceResult",
    "GetFinancialAdviceUseCase",
    "GetSpendingRollupUseCase",
    "GetTransactionsUseCase",
    "GetUserProfileUseCase",
    "RecordMicroExpenseResult",
    "RecordMicroExpenseUseCase",
    "RecordTransactionResult",
    "RecordTransactionUseCase",
    "RegisterUserResult",
    "RegisterUserUseCase",
    "SeedDefaultUserUseCase",
    "SetDailyMicroLimitUseCase",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "should_seed_default_user",
]
