"""API リクエストユーティリティ."""
import json
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.value_objects import Money


def get_query_parameter(event: dict, name: str, default: str | None = None) -> str | None:
    """クエリパラメータを取得する."""
    query_params = event.get("queryStringParameters") or {}
    return query_params.get(name, default)


def get_body(event: dict) -> dict[str, Any]:
    """リクエストボディを取得する.

    Args:
        event: Lambda イベント

    Returns:
        パースされたボディ（空の場合は空辞書）

    Raises:
        ValueError: JSONパースに失敗した場合、またはオブジェクトでない場合
    """
    body = event.get("body")
    if not body:
        return {}

    try:
        # 小数はfloatにせずDecimalで受け取る
        parsed = json.loads(body, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON body: {e}")
    if not isinstance(parsed, dict):
        raise ValueError("JSON body must be an object")
    return parsed


def parse_money(value: Any, field_name: str = "amount") -> Money:
    """リクエスト値を Money に変換する（文字列・整数・JSONの小数）.

    Raises:
        ValueError: 変換できない場合
    """
    if value is None:
        raise ValueError(f"{field_name} is required")
    if isinstance(value, bool) or not isinstance(value, (int, str, Decimal)):
        raise ValueError(f"{field_name} must be a decimal string or integer")
    return Money.of(value)


def parse_date(value: Any, field_name: str) -> date:
    """YYYY-MM-DD 形式の日付を変換する.

    Raises:
        ValueError: 形式が不正な場合
    """
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a YYYY-MM-DD string")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date format for {field_name}: {value!r} (expected YYYY-MM-DD)") from None


def parse_optional_date(value: Any, field_name: str) -> date | None:
    """日付が指定されていれば変換する."""
    if value is None or value == "":
        return None
    return parse_date(value, field_name)
