"""固定額の日次上限ポリシー."""
from src.domain.identifiers import UserId
from src.domain.ports import SpendingLimitPolicy
from src.domain.value_objects import Money


class FixedSpendingLimitPolicy(SpendingLimitPolicy):
    """全ユーザーに同じ日次上限を返すポリシー."""

    def __init__(self, limit: Money) -> None:
        """初期化."""
        self._limit = limit

    @property
    def limit(self) -> Money:
        """設定された上限額."""
        return self._limit

    def limit_for(self, user_id: UserId | str) -> Money:
        """ユーザーIDに関係なく設定額を返す."""
        UserId.coerce(user_id)
        return self._limit
