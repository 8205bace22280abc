"""認証ユーティリティのテスト."""
import pytest

from src.api.auth import (
    AuthenticationError,
    get_authenticated_user_id,
    require_authenticated_user_id,
)
from src.domain.identifiers import UserId


def _event_with_sub(sub) -> dict:
    return {"requestContext": {"authorizer": {"claims": {"sub": sub}}}}


class TestGetAuthenticatedUserId:

    def test_subからユーザーIDを取得する(self):
        assert get_authenticated_user_id(_event_with_sub("user-1")) == UserId("user-1")

    def test_claimsがなければNone(self):
        assert get_authenticated_user_id({}) is None

    def test_空のsubはNone(self):
        assert get_authenticated_user_id(_event_with_sub("  ")) is None

    def test_想定外の構造はNone(self):
        assert get_authenticated_user_id({"requestContext": "broken"}) is None


class TestRequireAuthenticatedUserId:

    def test_未認証ならエラー(self):
        with pytest.raises(AuthenticationError):
            require_authenticated_user_id({})
