"""家計アドバイスAPI ハンドラー."""
import logging
from typing import Any

from src.api.auth import AuthenticationError, require_authenticated_user_id
from src.api.dependencies import Dependencies
from src.api.response import internal_error_response, success_response, unauthorized_response
from src.application.use_cases.get_financial_advice import GetFinancialAdviceUseCase

from .serializers import serialize_summary

logger = logging.getLogger(__name__)


def get_financial_advice_handler(event: dict, context: Any) -> dict:
    """AI による家計の推奨事項を取得する.

    GET /finance/advice
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        use_case = GetFinancialAdviceUseCase(
            Dependencies.get_transaction_repository(),
            Dependencies.get_financial_advisor(),
        )
        result = use_case.execute(user_id)
    except Exception:
        logger.exception("Failed to get financial advice")
        return internal_error_response(event=event)

    return success_response(
        {
            "recommendations": result.recommendations,
            "summary": serialize_summary(result.summary),
        },
        event=event,
    )
