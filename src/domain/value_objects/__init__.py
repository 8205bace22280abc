"""値オブジェクトモジュール."""
from .display_name import DisplayName
from .email import Email
from .finance_summary import FinanceSummary
from .money import InvalidAmountError, Money, MoneyPrecisionError

__all__ = [
    "DisplayName",
    "Email",
    "FinanceSummary",
    "InvalidAmountError",
    "Money",
    "MoneyPrecisionError",
]
