"""ポート（インターフェース）のテスト."""
import pytest

from src.domain.identifiers import UserId
from src.domain.ports import (
    FinancialAdvisor,
    SpendingLimitPolicy,
    TransactionRepository,
    UserRepository,
)
from src.domain.value_objects import Money


class TestPorts:
    """ポートが抽象クラスであることのテスト."""

    @pytest.mark.parametrize(
        "port",
        [SpendingLimitPolicy, UserRepository, TransactionRepository, FinancialAdvisor],
    )
    def test_直接インスタンス化できない(self, port) -> None:
        with pytest.raises(TypeError):
            port()

    def test_limit_forを実装すればインスタンス化できる(self) -> None:
        class TenPolicy(SpendingLimitPolicy):
            def limit_for(self, user_id: UserId | str) -> Money:
                return Money(10)

        assert TenPolicy().limit_for("user-1") == Money(10)

    def test_adviseを実装すればインスタンス化できる(self) -> None:
        class EchoAdvisor(FinancialAdvisor):
            def advise(self, prompt: str) -> list[str]:
                return [prompt]

        assert EchoAdvisor().advise("hola") == ["hola"]
