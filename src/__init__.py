"""家計管理バックエンドのパッケージ."""
from . import domain

# infrastructure は requests / anthropic に依存するため、
# 必要な場所で明示的にインポートする
# from . import infrastructure

__all__ = ["domain"]
