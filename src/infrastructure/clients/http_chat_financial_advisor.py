"""チャット補完 API（OpenAI 互換）を使った家計アドバイザー."""
import logging
import os

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.domain.ports import FinancialAdvisor

from .recommendation_parser import (
    ERROR_MESSAGE,
    NO_RESPONSE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    SYSTEM_PROMPT,
    parse_recommendations,
)

logger = logging.getLogger(__name__)


class HttpChatFinancialAdvisor(FinancialAdvisor):
    """AI_API_URL のチャット補完エンドポイントに問い合わせるアドバイザー."""

    DEFAULT_MODEL = "deepseek/deepseek-r1:free"
    CONNECT_TIMEOUT = 10
    READ_TIMEOUT = 30
    TEMPERATURE = 0.2

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        referer: str | None = None,
        title: str | None = None,
    ) -> None:
        """初期化（引数が優先、未指定は環境変数）."""
        self._api_url = api_url if api_url is not None else os.environ.get("AI_API_URL", "")
        self._api_key = api_key if api_key is not None else os.environ.get("AI_API_KEY", "")
        self._model = model if model is not None else os.environ.get("AI_MODEL", "")
        self._referer = referer if referer is not None else os.environ.get("AI_REFERER", "")
        self._title = title if title is not None else os.environ.get("AI_TITLE", "")
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """リトライ機能付きの HTTP セッションを作成する."""
        session = requests.Session()
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    @property
    def model(self) -> str:
        """使用するモデル名（未設定ならデフォルト）."""
        return self._model.strip() or self.DEFAULT_MODEL

    def is_configured(self) -> bool:
        """API URL が設定されているか."""
        return bool(self._api_url and self._api_url.strip())

    def advise(self, prompt: str) -> list[str]:
        """推奨事項を生成する."""
        if not self.is_configured():
            return [NOT_CONFIGURED_MESSAGE]

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.TEMPERATURE,
        }

        try:
            logger.info("AI request url=%s model=%s", self._api_url, self.model)
            response = self._session.post(
                self._api_url,
                json=payload,
                headers=self._build_headers(),
                timeout=(self.CONNECT_TIMEOUT, self.READ_TIMEOUT),
            )
            logger.info("AI response status=%s", response.status_code)
        except requests.RequestException as e:
            logger.error(f"AI request failed: {e}")
            return [ERROR_MESSAGE]

        if not 200 <= response.status_code < 300:
            logger.warning("AI non-2xx status=%s", response.status_code)
            return [NO_RESPONSE_MESSAGE]

        return parse_recommendations(self._extract_content(response))

    def _build_headers(self) -> dict[str, str]:
        """リクエストヘッダーを組み立てる."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._referer.strip():
            headers["Referer"] = self._referer
        if self._title.strip():
            headers["X-Title"] = self._title
        if self._api_key.strip():
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    @staticmethod
    def _extract_content(response: requests.Response) -> str | None:
        """choices[0].message.content を取り出す（形式不正なら None）."""
        try:
            data = response.json()
        except ValueError:
            logger.warning("AI response body is not JSON")
            return None

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            return None
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else None
