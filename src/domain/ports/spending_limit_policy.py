"""少額支出の日次上限ポリシーインターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import UserId
from ..value_objects import Money


class SpendingLimitPolicy(ABC):
    """ユーザーごとの少額支出の日次上限を決めるポリシー.

    実装はコンストラクタで差し替える。空のユーザーIDは InvalidUserIdError とする。
    """

    @abstractmethod
    def limit_for(self, user_id: UserId | str) -> Money:
        """ユーザーに適用する日次上限額を取得する."""
        pass
