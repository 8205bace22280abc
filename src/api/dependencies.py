"""依存性注入コンテナ."""
import logging

from src.domain.ports import (
    FinancialAdvisor,
    SpendingLimitPolicy,
    TransactionRepository,
    UserRepository,
)
from src.infrastructure import InMemoryTransactionRepository, InMemoryUserRepository

logger = logging.getLogger(__name__)


class Dependencies:
    """依存性を管理するコンテナ（Lambda ハンドラーの組み立て起点）.

    ドメイン・ユースケースはここで生成した実装をコンストラクタで受け取る。
    ストアはすべてインメモリ実装。
    """

    _user_repository: UserRepository | None = None
    _transaction_repository: TransactionRepository | None = None
    _spending_limit_policy: SpendingLimitPolicy | None = None
    _financial_advisor: FinancialAdvisor | None = None

    @classmethod
    def get_user_repository(cls) -> UserRepository:
        """ユーザーリポジトリを取得する（初回生成時にデフォルトユーザーを投入）."""
        if cls._user_repository is None:
            from src.application.use_cases.seed_default_user import (
                SeedDefaultUserUseCase,
                should_seed_default_user,
            )

            repository = InMemoryUserRepository()
            if should_seed_default_user():
                SeedDefaultUserUseCase(repository).execute()
            cls._user_repository = repository
        return cls._user_repository

    @classmethod
    def set_user_repository(cls, repository: UserRepository) -> None:
        """ユーザーリポジトリを設定する（テスト用）."""
        cls._user_repository = repository

    @classmethod
    def get_transaction_repository(cls) -> TransactionRepository:
        """取引リポジトリを取得する."""
        if cls._transaction_repository is None:
            cls._transaction_repository = InMemoryTransactionRepository()
        return cls._transaction_repository

    @classmethod
    def set_transaction_repository(cls, repository: TransactionRepository) -> None:
        """取引リポジトリを設定する（テスト用）."""
        cls._transaction_repository = repository

    @classmethod
    def get_spending_limit_policy(cls) -> SpendingLimitPolicy:
        """少額支出の日次上限ポリシーを取得する."""
        if cls._spending_limit_policy is None:
            from src.infrastructure.providers.spending_limit_policy_factory import (
                create_spending_limit_policy,
            )

            cls._spending_limit_policy = create_spending_limit_policy(cls.get_user_repository())
            logger.info("Using spending limit policy %s", type(cls._spending_limit_policy).__name__)
        return cls._spending_limit_policy

    @classmethod
    def set_spending_limit_policy(cls, policy: SpendingLimitPolicy) -> None:
        """少額支出の日次上限ポリシーを設定する（テスト用）."""
        cls._spending_limit_policy = policy

    @classmethod
    def get_financial_advisor(cls) -> FinancialAdvisor:
        """家計アドバイザーを取得する."""
        if cls._financial_advisor is None:
            from src.infrastructure.clients.financial_advisor_factory import (
                create_financial_advisor,
            )

            cls._financial_advisor = create_financial_advisor()
        return cls._financial_advisor

    @classmethod
    def set_financial_advisor(cls, advisor: FinancialAdvisor) -> None:
        """家計アドバイザーを設定する（テスト用）."""
        cls._financial_advisor = advisor

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._user_repository = None
        cls._transaction_repository = None
        cls._spending_limit_policy = None
        cls._financial_advisor = None
