"""取引記録ユースケース."""
from dataclasses import dataclass
from datetime import date

from src.domain.entities import Transaction
from src.domain.enums import TransactionType
from src.domain.identifiers import UserId
from src.domain.ports import TransactionRepository
from src.domain.value_objects import Money


@dataclass(frozen=True)
class RecordTransactionResult:
    """取引記録結果."""

    transaction: Transaction


class RecordTransactionUseCase:
    """収入・支出を記録するユースケース."""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository

    def execute(
        self,
        user_id: UserId,
        transaction_type: TransactionType,
        amount: Money,
        category: str,
        occurred_on: date,
        description: str = "",
    ) -> RecordTransactionResult:
        """取引を記録する.

        Raises:
            InvalidAmountError: 金額がゼロの場合
            ValueError: カテゴリが空の場合
        """
        if transaction_type == TransactionType.INCOME:
            transaction = Transaction.create_income(
                user_id=user_id,
                amount=amount,
                category=category,
                occurred_on=occurred_on,
                description=description,
            )
        else:
            transaction = Transaction.create_expense(
                user_id=user_id,
                amount=amount,
                category=category,
                occurred_on=occurred_on,
                description=description,
            )

        self._transaction_repository.save(transaction)
        return RecordTransactionResult(transaction=transaction)
