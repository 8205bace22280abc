"""クライアント実装."""
# ClaudeFinancialAdvisor は anthropic に、HttpChatFinancialAdvisor は requests に
# 依存するため、必要な時に直接インポートする
from .mock_financial_advisor import MockFinancialAdvisor

__all__ = ["MockFinancialAdvisor"]
