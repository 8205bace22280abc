"""メールアドレスを表現する値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """メールアドレス（前後の空白を除き小文字に正規化して保持）."""

    value: str

    def __post_init__(self) -> None:
        """正規化とバリデーション."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Email cannot be empty")
        normalized = self.value.strip().lower()
        if not _EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
