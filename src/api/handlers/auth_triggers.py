"""認証基盤のトリガーハンドラー."""
import logging
from typing import Any

from src.api.dependencies import Dependencies
from src.application.use_cases.register_user import RegisterUserUseCase, UserAlreadyExistsError

logger = logging.getLogger(__name__)


def post_confirmation(event: dict, context: Any) -> dict:
    """Cognito Post Confirmation トリガー.

    サインアップ確認時に sub をユーザーIDとしてユーザーを登録する。
    登録済みの場合は何もしない。イベントはそのまま返す。
    """
    user_attributes = event.get("request", {}).get("userAttributes", {})
    user_id = user_attributes.get("sub", "")
    email = user_attributes.get("email", "")
    display_name = user_attributes.get("name") or None

    use_case = RegisterUserUseCase(Dependencies.get_user_repository())
    try:
        use_case.execute(user_id, email, display_name)
        logger.info("User registered: %s", user_id)
    except UserAlreadyExistsError:
        logger.info("User already exists: %s (idempotent)", user_id)
    except ValueError as exc:
        # サインアップ自体は止めない
        logger.warning("Skipped registering user %s: %s", user_id, exc)

    return event
