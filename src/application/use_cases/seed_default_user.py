"""デフォルトユーザー投入ユースケース."""
import logging
import os

from src.domain.entities import User
from src.domain.identifiers import UserId
from src.domain.ports import UserRepository
from src.domain.value_objects import DisplayName, Email

logger = logging.getLogger(__name__)

DEFAULT_USER_EMAIL = "demo@demo.com"
DEFAULT_USER_NAME = "Demo"


def should_seed_default_user() -> bool:
    """デフォルトユーザーを投入するか判定する.

    外部認証（SUPABASE_URL と SUPABASE_ANON_KEY の両方）が設定されている場合は投入しない。
    """
    url = os.environ.get("SUPABASE_URL", "")
    anon_key = os.environ.get("SUPABASE_ANON_KEY", "")
    return not (url.strip() and anon_key.strip())


class SeedDefaultUserUseCase:
    """ローカル開発用のデフォルトユーザーを投入するユースケース."""

    def __init__(self, user_repository: UserRepository) -> None:
        """初期化."""
        self._user_repository = user_repository

    def execute(
        self,
        email: str | None = None,
        display_name: str | None = None,
    ) -> bool:
        """同じメールアドレス・IDのユーザーがいなければ作成する.

        DEFAULT_USER_ID が設定されていればそれをユーザーIDに使う（認証基盤の sub と合わせる用）。

        Returns:
            作成した場合 True
        """
        email_vo = Email(email or os.environ.get("DEFAULT_USER_EMAIL") or DEFAULT_USER_EMAIL)
        name_vo = DisplayName(
            display_name or os.environ.get("DEFAULT_USER_NAME") or DEFAULT_USER_NAME
        )

        if self._user_repository.find_by_email(email_vo) is not None:
            return False

        configured_id = os.environ.get("DEFAULT_USER_ID", "").strip()
        user_id = UserId(configured_id) if configured_id else UserId.generate()
        if self._user_repository.find_by_id(user_id) is not None:
            return False

        user = User(user_id=user_id, email=email_vo, display_name=name_vo)
        self._user_repository.save(user)
        logger.info("Seeded default user %s", email_vo)
        return True
