"""家計API ハンドラー."""
import logging
from datetime import date
from typing import Any

from src.api.auth import AuthenticationError, require_authenticated_user_id
from src.api.dependencies import Dependencies
from src.api.request import (
    get_body,
    get_query_parameter,
    parse_date,
    parse_money,
    parse_optional_date,
)
from src.api.response import (
    bad_request_response,
    internal_error_response,
    success_response,
    unauthorized_response,
)
from src.application.use_cases.get_finance_summary import GetFinanceSummaryUseCase
from src.application.use_cases.get_spending_rollup import GetSpendingRollupUseCase
from src.application.use_cases.get_transactions import GetTransactionsUseCase
from src.application.use_cases.record_micro_expense import RecordMicroExpenseUseCase
from src.application.use_cases.record_transaction import RecordTransactionUseCase
from src.domain.enums import TransactionType

from .serializers import serialize_node, serialize_summary, serialize_transaction

logger = logging.getLogger(__name__)


def finance_handler(event: dict, context: Any) -> dict:
    """家計APIルーティングハンドラー.

    リクエストのresourceとhttpMethodに基づいて適切なハンドラーに振り分ける。
    """
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    if resource == "/finance/transactions" and method == "POST":
        return record_transaction_handler(event, context)
    if resource == "/finance/transactions" and method == "GET":
        return get_transactions_handler(event, context)
    if resource == "/finance/micro-expenses" and method == "POST":
        return record_micro_expense_handler(event, context)
    if resource == "/finance/rollup" and method == "GET":
        return get_spending_rollup_handler(event, context)
    if resource == "/finance/summary" and method == "GET":
        return get_finance_summary_handler(event, context)
    if resource == "/finance/advice" and method == "GET":
        from .advice import get_financial_advice_handler

        return get_financial_advice_handler(event, context)

    return bad_request_response("Unknown route", event=event)


def record_transaction_handler(event: dict, context: Any) -> dict:
    """収入・支出を記録する.

    POST /finance/transactions

    Request Body:
        transaction_type: "income" | "expense"
        amount: 金額（"12.50" 形式の文字列または数値）
        category: カテゴリ
        occurred_on: 発生日（YYYY-MM-DD）
        description: メモ（任意）
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        body = get_body(event)
        type_value = body.get("transaction_type")
        if type_value not in ("income", "expense"):
            return bad_request_response("transaction_type must be 'income' or 'expense'", event=event)
        amount = parse_money(body.get("amount"))
        occurred_on = parse_date(body.get("occurred_on"), "occurred_on")
        category = body.get("category")
        if not isinstance(category, str):
            return bad_request_response("category is required", event=event)
        description = body.get("description") or ""
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = RecordTransactionUseCase(Dependencies.get_transaction_repository())
    try:
        result = use_case.execute(
            user_id=user_id,
            transaction_type=TransactionType(type_value),
            amount=amount,
            category=category,
            occurred_on=occurred_on,
            description=str(description),
        )
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to record transaction")
        return internal_error_response(event=event)

    return success_response(serialize_transaction(result.transaction), status_code=201, event=event)


def get_transactions_handler(event: dict, context: Any) -> dict:
    """取引一覧を取得する.

    GET /finance/transactions?from={YYYY-MM-DD}&to={YYYY-MM-DD}
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        from_date = parse_optional_date(get_query_parameter(event, "from"), "from")
        to_date = parse_optional_date(get_query_parameter(event, "to"), "to")
        use_case = GetTransactionsUseCase(Dependencies.get_transaction_repository())
        transactions = use_case.execute(user_id, from_date=from_date, to_date=to_date)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to get transactions")
        return internal_error_response(event=event)

    return success_response(
        {"transactions": [serialize_transaction(t) for t in transactions]},
        event=event,
    )


def record_micro_expense_handler(event: dict, context: Any) -> dict:
    """少額支出を記録する.

    POST /finance/micro-expenses

    Request Body:
        amount: 金額
        category: カテゴリ
        occurred_on: 発生日（YYYY-MM-DD、省略時は当日）
        description: メモ（任意）
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        body = get_body(event)
        amount = parse_money(body.get("amount"))
        occurred_on = parse_optional_date(body.get("occurred_on"), "occurred_on") or date.today()
        category = body.get("category")
        if not isinstance(category, str):
            return bad_request_response("category is required", event=event)
        description = body.get("description") or ""
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        use_case = RecordMicroExpenseUseCase(
            Dependencies.get_transaction_repository(),
            Dependencies.get_spending_limit_policy(),
        )
        result = use_case.execute(
            user_id=user_id,
            amount=amount,
            category=category,
            occurred_on=occurred_on,
            description=str(description),
        )
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to record micro expense")
        return internal_error_response(event=event)

    return success_response(
        {
            "transaction": serialize_transaction(result.transaction),
            "daily_limit": result.daily_limit.to_plain_string(),
            "daily_micro_total": result.daily_micro_total.to_plain_string(),
            "exceeds_daily_limit": result.exceeds_daily_limit,
        },
        status_code=201,
        event=event,
    )


def get_spending_rollup_handler(event: dict, context: Any) -> dict:
    """年間の支出ロールアップを取得する.

    GET /finance/rollup?year={YYYY}
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    year_str = get_query_parameter(event, "year")
    if year_str is None:
        year = date.today().year
    else:
        try:
            year = int(year_str)
        except ValueError:
            return bad_request_response("year must be an integer", event=event)

    try:
        use_case = GetSpendingRollupUseCase(Dependencies.get_transaction_repository())
        rollup = use_case.execute(user_id, year)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to build spending rollup")
        return internal_error_response(event=event)

    return success_response(serialize_node(rollup), event=event)


def get_finance_summary_handler(event: dict, context: Any) -> dict:
    """収支サマリーを取得する.

    GET /finance/summary?from={YYYY-MM-DD}&to={YYYY-MM-DD}
    """
    try:
        user_id = require_authenticated_user_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    try:
        from_date = parse_optional_date(get_query_parameter(event, "from"), "from")
        to_date = parse_optional_date(get_query_parameter(event, "to"), "to")
        use_case = GetFinanceSummaryUseCase(Dependencies.get_transaction_repository())
        summary = use_case.execute(user_id, from_date=from_date, to_date=to_date)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    except Exception:
        logger.exception("Failed to get finance summary")
        return internal_error_response(event=event)

    return success_response(serialize_summary(summary), event=event)
