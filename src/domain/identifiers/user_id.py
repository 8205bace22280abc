"""ユーザー識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


class InvalidUserIdError(ValueError):
    """不正なユーザーIDエラー."""

    pass


@dataclass(frozen=True)
class UserId:
    """ユーザーの一意識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise InvalidUserIdError(f"UserId must be a string, got {type(self.value).__name__}")
        if not self.value.strip():
            raise InvalidUserIdError("UserId cannot be empty")

    @classmethod
    def generate(cls) -> UserId:
        """新しいUserIdを生成する."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def coerce(cls, value: UserId | str | None) -> UserId:
        """呼び出し境界でユーザーIDを検証して UserId に変換する."""
        if isinstance(value, UserId):
            return value
        if value is None:
            raise InvalidUserIdError("UserId cannot be None")
        return cls(value)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
