"""取引リポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import date

from ..entities import Transaction
from ..identifiers import TransactionId, UserId


class TransactionRepository(ABC):
    """取引リポジトリのインターフェース."""

    @abstractmethod
    def save(self, transaction: Transaction) -> None:
        """取引を保存する."""
        pass

    @abstractmethod
    def find_by_id(self, transaction_id: TransactionId) -> Transaction | None:
        """取引IDで検索する."""
        pass

    @abstractmethod
    def find_by_user_id(
        self,
        user_id: UserId,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Transaction]:
        """ユーザーIDで検索する（日付は両端を含む、発生日の昇順）."""
        pass
