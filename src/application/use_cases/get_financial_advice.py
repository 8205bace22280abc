"""家計アドバイス取得ユースケース."""
from dataclasses import dataclass

from src.domain.identifiers import UserId
from src.domain.ports import FinancialAdvisor, TransactionRepository
from src.domain.value_objects import FinanceSummary


@dataclass(frozen=True)
class GetFinancialAdviceResult:
    """家計アドバイス取得結果."""

    recommendations: list[str]
    summary: FinanceSummary


class GetFinancialAdviceUseCase:
    """ユーザーの収支をもとに AI の推奨事項を取得するユースケース."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        advisor: FinancialAdvisor,
    ) -> None:
        """初期化."""
        self._transaction_repository = transaction_repository
        self._advisor = advisor

    def execute(self, user_id: UserId) -> GetFinancialAdviceResult:
        """推奨事項を取得する."""
        transactions = self._transaction_repository.find_by_user_id(user_id)
        summary = FinanceSummary.from_transactions(transactions)
        micro_count = sum(1 for t in transactions if t.is_micro)
        prompt = self.build_prompt(summary, micro_count)
        return GetFinancialAdviceResult(
            recommendations=self._advisor.advise(prompt),
            summary=summary,
        )

    @staticmethod
    def build_prompt(summary: FinanceSummary, micro_count: int = 0) -> str:
        """収支サマリーから AI へのプロンプトを組み立てる."""
        lines = [
            f"Ingresos totales: {summary.total_income.to_plain_string()}",
            f"Gastos totales: {summary.total_expense.to_plain_string()}",
            f"Balance: {summary.balance:.2f}",
            f"Número de movimientos: {summary.transaction_count}",
            f"Gastos pequeños registrados: {micro_count}",
        ]
        if summary.expense_by_category:
            lines.append("Gastos por categoría:")
            for category, amount in summary.expense_by_category.items():
                lines.append(f"- {category}: {amount.to_plain_string()}")
        else:
            lines.append("Sin gastos registrados.")
        lines.append("Genera recomendaciones para mejorar mis finanzas personales.")
        return "\n".join(lines)
