"""収支サマリーの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from .money import Money

if TYPE_CHECKING:
    from ..entities.transaction import Transaction


@dataclass(frozen=True)
class FinanceSummary:
    """期間内の収支サマリー.

    balance は収入 - 支出で、負になりうるため Money ではなく Decimal で保持する。
    """

    total_income: Money
    total_expense: Money
    balance: Decimal
    transaction_count: int
    expense_by_category: dict[str, Money] = field(default_factory=dict)

    @classmethod
    def from_transactions(cls, transactions: list[Transaction]) -> FinanceSummary:
        """取引リストからサマリーを生成する."""
        # 循環インポート回避
        from ..entities.transaction_node import TransactionGroup, TransactionLeaf
        from ..services.period_rollup_builder import PeriodRollupBuilder

        incomes = TransactionGroup("income")
        expenses = TransactionGroup("expense")
        for t in transactions:
            target = expenses if t.is_expense() else incomes
            target.add(TransactionLeaf(t.amount, label=t.category))

        by_category = PeriodRollupBuilder().build_by_category(transactions)
        total_income = incomes.total()
        total_expense = expenses.total()

        return cls(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income.value - total_expense.value,
            transaction_count=len(transactions),
            expense_by_category={
                group.name: group.total() for group in by_category.groups()
            },
        )
