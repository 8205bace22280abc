"""少額支出記録ユースケース."""
import logging
from dataclasses import dataclass
from datetime import date

from src.domain.entities import Transaction, TransactionGroup, TransactionLeaf
from src.domain.identifiers import UserId
from src.domain.ports import SpendingLimitPolicy, TransactionRepository
from src.domain.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordMicroExpenseResult:
    """少額支出記録結果."""

    transaction: Transaction
    daily_limit: Money
    daily_micro_total: Money
    exceeds_daily_limit: bool


class RecordMicroExpenseUseCase:
    """少額支出を記録するユースケース.

    ポリシーから日次上限を1回だけ取得し、支出と一緒に保存する。
    金額が上限以下かどうかの検証は行わず、超過は結果として知らせるだけ。
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        spending_limit_policy: SpendingLimitPolicy,
    ) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository
        self._spending_limit_policy = spending_limit_policy

    def execute(
        self,
        user_id: UserId,
        amount: Money,
        category: str,
        occurred_on: date,
        description: str = "",
    ) -> RecordMicroExpenseResult:
        """少額支出を記録する.

        Raises:
            InvalidUserIdError: ユーザーIDが空の場合
            InvalidAmountError: 金額がゼロの場合
        """
        daily_limit = self._spending_limit_policy.limit_for(user_id)

        transaction = Transaction.create_micro_expense(
            user_id=user_id,
            amount=amount,
            category=category,
            occurred_on=occurred_on,
            daily_limit=daily_limit,
            description=description,
        )
        self._transaction_repository.save(transaction)

        same_day = self._transaction_repository.find_by_user_id(
            user_id, from_date=occurred_on, to_date=occurred_on
        )
        daily = TransactionGroup(
            occurred_on.isoformat(),
            [TransactionLeaf(t.amount) for t in same_day if t.is_micro],
        )
        daily_total = daily.total()
        exceeds = daily_total.is_greater_than(daily_limit)

        logger.info(
            "Recorded micro expense user=%s amount=%s daily_total=%s limit=%s",
            user_id,
            amount.to_plain_string(),
            daily_total.to_plain_string(),
            daily_limit.to_plain_string(),
        )

        return RecordMicroExpenseResult(
            transaction=transaction,
            daily_limit=daily_limit,
            daily_micro_total=daily_total,
            exceeds_daily_limit=exceeds,
        )
