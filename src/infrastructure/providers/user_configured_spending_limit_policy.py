"""ユーザー設定に基づく日次上限ポリシー."""
import logging

from src.domain.identifiers import UserId
from src.domain.ports import SpendingLimitPolicy, UserRepository
from src.domain.value_objects import Money

logger = logging.getLogger(__name__)


class UserConfiguredSpendingLimitPolicy(SpendingLimitPolicy):
    """ユーザーが設定した日次上限を返すポリシー.

    ユーザーが存在しない、または未設定の場合は default_limit を返す。
    """

    def __init__(self, user_repository: UserRepository, default_limit: Money) -> None:
        """初期化."""
        self._user_repository = user_repository
        self._default_limit = default_limit

    def limit_for(self, user_id: UserId | str) -> Money:
        """ユーザーの日次上限を取得する."""
        uid = UserId.coerce(user_id)
        user = self._user_repository.find_by_id(uid)
        if user is None:
            logger.info("User %s not found, using default daily limit", uid)
            return self._default_limit
        if user.daily_micro_limit is None:
            return self._default_limit
        return user.daily_micro_limit
