"""取引一覧取得ユースケース."""
from datetime import date

from src.domain.entities import Transaction
from src.domain.identifiers import UserId
from src.domain.ports import TransactionRepository


class GetTransactionsUseCase:
    """取引一覧取得ユースケース."""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository

    def execute(
        self,
        user_id: UserId,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Transaction]:
        """期間内の取引を古い順に取得する."""
        if from_date is not None and to_date is not None and from_date > to_date:
            raise ValueError("from_date must be on or before to_date")
        return self._transaction_repository.find_by_user_id(
            user_id, from_date=from_date, to_date=to_date
        )
