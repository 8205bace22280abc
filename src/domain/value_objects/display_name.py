"""表示名を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

MAX_DISPLAY_NAME_LENGTH = 50


@dataclass(frozen=True)
class DisplayName:
    """表示名（連続する空白は1つにまとめる）."""

    value: str

    def __post_init__(self) -> None:
        """正規化とバリデーション."""
        collapsed = " ".join(self.value.split()) if isinstance(self.value, str) else ""
        if not collapsed:
            raise ValueError("DisplayName cannot be empty")
        if len(collapsed) > MAX_DISPLAY_NAME_LENGTH:
            raise ValueError(f"DisplayName must be at most {MAX_DISPLAY_NAME_LENGTH} characters")
        object.__setattr__(self, "value", collapsed)

    def __str__(self) -> str:
        return self.value
