"""家計アドバイザーインターフェース."""
from abc import ABC, abstractmethod


class FinancialAdvisor(ABC):
    """家計に関する推奨事項を生成するアドバイザー.

    通信エラーは例外にせず、状況を説明する1行を返す。
    """

    @abstractmethod
    def advise(self, prompt: str) -> list[str]:
        """推奨事項のリストを生成する."""
        pass
