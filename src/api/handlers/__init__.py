"""Lambdaハンドラーモジュール."""
from .advice import get_financial_advice_handler
from .auth_triggers import post_confirmation
from .finance import (
    finance_handler,
    get_finance_summary_handler,
    get_spending_rollup_handler,
    get_transactions_handler,
    record_micro_expense_handler,
    record_transaction_handler,
)
from .users import (
    get_user_profile_handler,
    register_user_handler,
    set_daily_micro_limit_handler,
    users_handler,
)

__all__ = [
    # Finance
    "finance_handler",
    "record_transaction_handler",
    "get_transactions_handler",
    "record_micro_expense_handler",
    "get_spending_rollup_handler",
    "get_finance_summary_handler",
    "get_financial_advice_handler",
    # Users
    "users_handler",
    "get_user_profile_handler",
    "register_user_handler",
    "set_daily_micro_limit_handler",
    # Auth triggers
    "post_confirmation",
]
