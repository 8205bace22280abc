"""ユースケース共通のエラー."""
from src.domain.identifiers import UserId


class UserNotFoundError(Exception):
    """ユーザーが見つからないエラー."""

    def __init__(self, user_id: UserId) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")
