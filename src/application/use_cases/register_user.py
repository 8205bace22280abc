"""ユーザー登録ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.entities import User
from src.domain.identifiers import UserId
from src.domain.ports import UserRepository
from src.domain.value_objects import DisplayName, Email

logger = logging.getLogger(__name__)


class UserAlreadyExistsError(Exception):
    """ユーザーが既に存在するエラー."""

    pass


@dataclass(frozen=True)
class RegisterUserResult:
    """ユーザー登録結果."""

    user: User


class RegisterUserUseCase:
    """認証済みユーザーを認証基盤の ID（sub）で登録するユースケース.

    登録後は GET /users/me や日次上限の設定、ユーザー設定ポリシーから参照できる。
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """初期化."""
        self._user_repository = user_repository

    def execute(
        self,
        user_id: UserId | str,
        email: str,
        display_name: str | None = None,
    ) -> RegisterUserResult:
        """ユーザーを登録する.

        Args:
            user_id: 認証基盤のユーザーID（sub）
            email: メールアドレス
            display_name: 表示名（省略時はメールアドレスのローカル部）

        Raises:
            InvalidUserIdError: ユーザーIDが空の場合
            UserAlreadyExistsError: 同一ID、または同一メールアドレスのユーザーが存在する場合
            ValueError: メールアドレス・表示名が不正な場合
        """
        uid = UserId.coerce(user_id)
        if self._user_repository.find_by_id(uid) is not None:
            raise UserAlreadyExistsError(f"User already exists: {uid}")

        email_vo = Email(email)
        if self._user_repository.find_by_email(email_vo) is not None:
            raise UserAlreadyExistsError(f"Email already registered: {email_vo}")

        name_vo = DisplayName(display_name or email_vo.value.split("@", 1)[0])

        user = User(user_id=uid, email=email_vo, display_name=name_vo)
        self._user_repository.save(user)
        logger.info("Registered user %s", uid)
        return RegisterUserResult(user=user)
