"""ユーザープロフィール取得ユースケース."""
from src.domain.entities import User
from src.domain.identifiers import UserId
from src.domain.ports import UserRepository

from .errors import UserNotFoundError


class GetUserProfileUseCase:
    """ユーザープロフィール取得ユースケース."""

    def __init__(self, user_repository: UserRepository) -> None:
        """初期化."""
        self._user_repository = user_repository

    def execute(self, user_id: UserId) -> User:
        """プロフィールを取得する.

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
        """
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
