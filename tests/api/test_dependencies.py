"""依存性注入コンテナのテスト."""
from unittest.mock import patch

import pytest

from src.api.dependencies import Dependencies
from src.domain.value_objects import Email
from src.infrastructure.clients import MockFinancialAdvisor
from src.infrastructure.providers import (
    FixedSpendingLimitPolicy,
    UserConfiguredSpendingLimitPolicy,
)


@pytest.fixture(autouse=True)
def _reset_dependencies():
    Dependencies.reset()
    yield
    Dependencies.reset()


class TestDependencies:

    def test_初回取得時にデフォルトユーザーを投入する(self):
        with patch.dict("os.environ", {}, clear=True):
            repo = Dependencies.get_user_repository()
        assert repo.find_by_email(Email("demo@demo.com")) is not None
        assert Dependencies.get_user_repository() is repo

    def test_外部認証設定時は投入しない(self):
        env = {"SUPABASE_URL": "https://x.supabase.co", "SUPABASE_ANON_KEY": "anon"}
        with patch.dict("os.environ", env, clear=True):
            repo = Dependencies.get_user_repository()
        assert repo.find_by_email(Email("demo@demo.com")) is None

    def test_既定の日次上限ポリシーは固定(self):
        with patch.dict("os.environ", {}, clear=True):
            policy = Dependencies.get_spending_limit_policy()
        assert isinstance(policy, FixedSpendingLimitPolicy)
        assert Dependencies.get_spending_limit_policy() is policy

    def test_ユーザー設定ポリシーはユーザーリポジトリを共有する(self):
        with patch.dict("os.environ", {"SPENDING_LIMIT_POLICY": "user"}, clear=True):
            policy = Dependencies.get_spending_limit_policy()
        assert isinstance(policy, UserConfiguredSpendingLimitPolicy)
        assert policy._user_repository is Dependencies.get_user_repository()

    def test_アドバイザーを環境変数で選択できる(self):
        with patch.dict("os.environ", {"AI_PROVIDER": "mock"}, clear=True):
            assert isinstance(Dependencies.get_financial_advisor(), MockFinancialAdvisor)

    def test_resetで破棄される(self):
        advisor = MockFinancialAdvisor()
        Dependencies.set_financial_advisor(advisor)
        assert Dependencies.get_financial_advisor() is advisor
        Dependencies.reset()
        assert Dependencies._financial_advisor is None
