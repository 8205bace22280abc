"""モック家計アドバイザー."""
from src.domain.ports import FinancialAdvisor


class MockFinancialAdvisor(FinancialAdvisor):
    """モック家計アドバイザー（開発・デモ用）."""

    RECOMMENDATIONS = [
        "Registra cada gasto el mismo día en que lo realizas",
        "Define un tope diario para tus gastos pequeños y respétalo",
        "Revisa cada semana en qué categorías gastas más",
        "Destina un porcentaje fijo de tus ingresos al ahorro",
        "Evita compras impulsivas esperando 24 horas antes de decidir",
    ]

    def __init__(self) -> None:
        """初期化."""
        self.prompts: list[str] = []

    def advise(self, prompt: str) -> list[str]:
        """固定の推奨事項を返す."""
        self.prompts.append(prompt)
        return list(self.RECOMMENDATIONS)
