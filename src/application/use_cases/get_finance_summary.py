"""収支サマリー取得ユースケース."""
from datetime import date

from src.domain.identifiers import UserId
from src.domain.ports import TransactionRepository
from src.domain.value_objects import FinanceSummary


class GetFinanceSummaryUseCase:
    """収支サマリー取得ユースケース."""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository

    def execute(
        self,
        user_id: UserId,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> FinanceSummary:
        """期間内の収支サマリーを取得する."""
        if from_date is not None and to_date is not None and from_date > to_date:
            raise ValueError("from_date must be on or before to_date")
        transactions = self._transaction_repository.find_by_user_id(
            user_id, from_date=from_date, to_date=to_date
        )
        return FinanceSummary.from_transactions(transactions)
