"""FinancialAdvisor ファクトリ."""
import logging
import os

from src.domain.ports import FinancialAdvisor

logger = logging.getLogger(__name__)


def create_financial_advisor() -> FinancialAdvisor:
    """環境変数に基づいてFinancialAdvisorを生成する.

    AI_PROVIDER:
        "mock"      → MockFinancialAdvisor（ローカル開発・テスト用）
        "anthropic" → ClaudeFinancialAdvisor
        "http"      → HttpChatFinancialAdvisor
        未設定       → HttpChatFinancialAdvisor（デフォルト）
    """
    provider = os.environ.get("AI_PROVIDER")
    if provider == "mock":
        from src.infrastructure.clients.mock_financial_advisor import MockFinancialAdvisor

        return MockFinancialAdvisor()

    if provider == "anthropic":
        from src.infrastructure.clients.claude_financial_advisor import (
            ClaudeFinancialAdvisor,
        )

        return ClaudeFinancialAdvisor()

    if provider and provider != "http":
        logger.warning("Unknown AI_PROVIDER=%s, falling back to http", provider)

    from src.infrastructure.clients.http_chat_financial_advisor import (
        HttpChatFinancialAdvisor,
    )

    return HttpChatFinancialAdvisor()
