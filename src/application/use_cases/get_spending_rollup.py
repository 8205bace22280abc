"""支出ロールアップ取得ユースケース."""
from datetime import date

from src.domain.entities import TransactionGroup
from src.domain.identifiers import UserId
from src.domain.ports import TransactionRepository
from src.domain.services import PeriodRollupBuilder


class GetSpendingRollupUseCase:
    """年間の支出ロールアップ（年→月→週→日）を取得するユースケース."""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository
        self._builder = PeriodRollupBuilder()

    def execute(self, user_id: UserId, year: int) -> TransactionGroup:
        """指定年のロールアップを構築する."""
        if year < 1 or year > 9999:
            raise ValueError(f"Invalid year: {year}")
        transactions = self._transaction_repository.find_by_user_id(
            user_id,
            from_date=date(year, 1, 1),
            to_date=date(year, 12, 31),
        )
        return self._builder.build_yearly(year, transactions)
