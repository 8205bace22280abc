"""少額支出の日次上限設定ユースケース."""
from src.domain.entities import User
from src.domain.identifiers import UserId
from src.domain.ports import UserRepository
from src.domain.value_objects import Money

from .errors import UserNotFoundError


class SetDailyMicroLimitUseCase:
    """ユーザーの少額支出の日次上限を設定・解除するユースケース."""

    def __init__(self, user_repository: UserRepository) -> None:
        """初期化."""
        self._user_repository = user_repository

    def execute(self, user_id: UserId, amount: Money | None) -> User:
        """日次上限を設定する（None で解除）.

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
            InvalidAmountError: 金額がゼロの場合
        """
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if amount is None:
            user.clear_daily_micro_limit()
        else:
            user.set_daily_micro_limit(amount)

        self._user_repository.save(user)
        return user
