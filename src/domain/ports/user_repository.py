"""ユーザーストアのインターフェース."""
from abc import ABC, abstractmethod

from ..entities import User
from ..identifiers import UserId
from ..value_objects import Email


class UserRepository(ABC):
    """ユーザーストア.

    メールアドレスは Email で正規化済みのため、検索は値の一致で行う。
    """

    @abstractmethod
    def save(self, user: User) -> None:
        """ユーザーを登録・更新する（同じ user_id は上書き）."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで取得する（存在しなければ None）."""
        pass

    @abstractmethod
    def find_by_email(self, email: Email) -> User | None:
        """メールアドレスで取得する（存在しなければ None）."""
        pass

    @abstractmethod
    def delete(self, user_id: UserId) -> None:
        """ユーザーを削除する（存在しなければ何もしない）."""
        pass
