"""ユーザーAPI ハンドラー."""
import logging
from typing import Any

from src.api.auth import AuthenticationError, require_authenticated_user_id
from src.api.dependencies import Dependencies
from src.api.request import get_body, parse_money
from src.api.response import (
    bad_request_response,
    conflict_response,
    internal_error_response,
    not_found_response,
    success_response,
    unauthorized_response,
)
from src.application.use_cases.errors import UserNotFoundError
from src.application.use_cases.get_user_profile import GetUserProfileUseCase
from src.application.use_cases.register_user import RegisterUserUseCase, UserAlreadyExistsError
from src.application.use_cases.set_daily_micro_limit import SetDailyMicroLimitUseCase

from .serializers import serialize_user

logger = logging.getLogger(__name__)


def users_handler(event: dict, context: Any) -> dict:
    """ユーザーAPIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    if resource == "/users/me" and method == "GET":
        return get_user_profile_handler(event, context)
    if resource == "/users/me" and method == "POST":
        return register_user_handler(event, context)
    if resource == "/users/me/micro-limit" and method == "PUT":
        return set_daily_micro_limit_handler(event, context)

    return bad_request_response("Unknown route", event=event)


def get_user_profile_handler(event: dict, context: Any) -> dict:
    """プロフィールを取得する.

    GET /users/me
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    use_case = GetUserProfileUseCase(Dependencies.get_user_repository())
    try:
        user = use_case.execute(user_id)
    except UserNotFoundError:
        return not_found_response("User", event=event)
    except Exception:
        logger.exception("Failed to get user profile")
        return internal_error_response(event=event)

    return success_response(serialize_user(user), event=event)


def register_user_handler(event: dict, context: Any) -> dict:
    """認証済みユーザーを登録する.

    POST /users/me

    Request Body:
        email: メールアドレス
        display_name: 表示名（任意）
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    email = body.get("email")
    if not isinstance(email, str):
        return bad_request_response("email is required", event=event)
    display_name = body.get("display_name")
    if display_name is not None and not isinstance(display_name, str):
        return bad_request_response("display_name must be a string", event=event)

    use_case = RegisterUserUseCase(Dependencies.get_user_repository())
    try:
        result = use_case.execute(user_id, email, display_name)
    except UserAlreadyExistsError as e:
        return conflict_response(str(e), event=event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to register user")
        return internal_error_response(event=event)

    return success_response(serialize_user(result.user), status_code=201, event=event)


def set_daily_micro_limit_handler(event: dict, context: Any) -> dict:
    """少額支出の日次上限を設定する.

    PUT /users/me/micro-limit

    Request Body:
        amount: 日次上限額（null で解除）
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        body = get_body(event)
        if "amount" not in body:
            return bad_request_response("amount is required", event=event)
        amount = None if body["amount"] is None else parse_money(body["amount"])
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = SetDailyMicroLimitUseCase(Dependencies.get_user_repository())
    try:
        user = use_case.execute(user_id, amount)
    except UserNotFoundError:
        return not_found_response("User", event=event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to set daily micro limit")
        return internal_error_response(event=event)

    return success_response(serialize_user(user), event=event)
