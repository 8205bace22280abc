"""ユーザーストアのインメモリ実装."""
from src.domain.entities import User
from src.domain.identifiers import UserId
from src.domain.ports import UserRepository
from src.domain.value_objects import Email


class InMemoryUserRepository(UserRepository):
    """ユーザーIDとメールアドレスの2つの索引を持つインメモリストア."""

    def __init__(self) -> None:
        """初期化."""
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}

    def save(self, user: User) -> None:
        """ユーザーを保存する（メールアドレスが変わった場合は索引を張り替える）."""
        previous = self._users.get(user.user_id.value)
        if previous is not None:
            self._ids_by_email.pop(previous.email.value, None)
        self._users[user.user_id.value] = user
        self._ids_by_email[user.email.value] = user.user_id.value

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する."""
        return self._users.get(user_id.value)

    def find_by_email(self, email: Email) -> User | None:
        """メールアドレスで検索する（Email は小文字に正規化済み）."""
        user_id = self._ids_by_email.get(email.value)
        return self._users.get(user_id) if user_id is not None else None

    def delete(self, user_id: UserId) -> None:
        """ユーザーを削除する."""
        user = self._users.pop(user_id.value, None)
        if user is not None:
            self._ids_by_email.pop(user.email.value, None)
