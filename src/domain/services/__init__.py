"""ドメインサービスモジュール."""
from .period_rollup_builder import PeriodRollupBuilder

__all__ = [
    "PeriodRollupBuilder",
]
