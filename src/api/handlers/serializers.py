"""レスポンス用のシリアライザー."""
from typing import Any

from src.domain.entities import Transaction, TransactionGroup, TransactionNode, User
from src.domain.value_objects import FinanceSummary


def serialize_transaction(transaction: Transaction) -> dict[str, Any]:
    """取引を辞書に変換する."""
    return {
        "transaction_id": str(transaction.transaction_id),
        "transaction_type": transaction.transaction_type.value,
        "amount": transaction.amount.to_plain_string(),
        "category": transaction.category,
        "occurred_on": transaction.occurred_on.isoformat(),
        "description": transaction.description,
        "is_micro": transaction.is_micro,
        "daily_limit": (
            transaction.daily_limit.to_plain_string() if transaction.daily_limit else None
        ),
        "created_at": transaction.created_at.isoformat(),
    }


def serialize_node(node: TransactionNode) -> dict[str, Any]:
    """集計ツリーを再帰的に辞書に変換する."""
    if isinstance(node, TransactionGroup):
        return {
            "name": node.name,
            "total": node.total().to_plain_string(),
            "children": [serialize_node(child) for child in node.children],
        }
    return {
        "label": getattr(node, "label", ""),
        "amount": node.total().to_plain_string(),
    }


def serialize_summary(summary: FinanceSummary) -> dict[str, Any]:
    """収支サマリーを辞書に変換する."""
    return {
        "total_income": summary.total_income.to_plain_string(),
        "total_expense": summary.total_expense.to_plain_string(),
        "balance": f"{summary.balance:.2f}",
        "transaction_count": summary.transaction_count,
        "expense_by_category": {
            category: amount.to_plain_string()
            for category, amount in summary.expense_by_category.items()
        },
    }


def serialize_user(user: User) -> dict[str, Any]:
    """ユーザーを辞書に変換する."""
    return {
        "user_id": str(user.user_id),
        "email": str(user.email),
        "display_name": str(user.display_name),
        "daily_micro_limit": (
            user.daily_micro_limit.to_plain_string() if user.daily_micro_limit else None
        ),
    }
