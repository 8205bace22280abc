"""Claude API を使用した家計アドバイザー."""
import logging
import os

import anthropic

from src.domain.ports import FinancialAdvisor

from .recommendation_parser import ERROR_MESSAGE, SYSTEM_PROMPT, parse_recommendations

logger = logging.getLogger(__name__)


class ClaudeFinancialAdvisor(FinancialAdvisor):
    """Claude API を使用したアドバイザー."""

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        """初期化."""
        api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable is not set")
        self._client = anthropic.Anthropic(api_key=api_key)
        self._model = model or os.environ.get("ANTHROPIC_MODEL", "claude-haiku-4-5-20250514")

    def advise(self, prompt: str) -> list[str]:
        """推奨事項を生成する."""
        try:
            logger.info("AI request provider=anthropic model=%s", self._model)
            response = self._client.messages.create(
                model=self._model,
                max_tokens=1000,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.2,
            )
        except anthropic.APIError as e:
            logger.error(f"AI request failed: {e}")
            return [ERROR_MESSAGE]

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return parse_recommendations(text)
