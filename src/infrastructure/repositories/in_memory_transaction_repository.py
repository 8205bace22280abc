"""取引リポジトリのインメモリ実装."""
from datetime import date

from src.domain.entities import Transaction
from src.domain.identifiers import TransactionId, UserId
from src.domain.ports import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """取引リポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._transactions: dict[str, Transaction] = {}

    def save(self, transaction: Transaction) -> None:
        """取引を保存する."""
        self._transactions[transaction.transaction_id.value] = transaction

    def find_by_id(self, transaction_id: TransactionId) -> Transaction | None:
        """取引IDで検索する."""
        return self._transactions.get(transaction_id.value)

    def find_by_user_id(
        self,
        user_id: UserId,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Transaction]:
        """ユーザーIDで検索する（日付フィルタ付き、古い順）."""
        results = [
            t for t in self._transactions.values()
            if t.user_id == user_id
        ]

        if from_date is not None:
            results = [t for t in results if t.occurred_on >= from_date]
        if to_date is not None:
            results = [t for t in results if t.occurred_on <= to_date]

        return sorted(results, key=lambda t: (t.occurred_on, t.created_at))
