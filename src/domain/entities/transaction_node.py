"""取引集計ツリー（コンポジット）.

日次の明細を週・月・年のグループへまとめ、どの階層でも同じ total() で
合計を取得できるようにする。合計は毎回ツリーを走査して再計算する。
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from decimal import Decimal

from ..value_objects import Money


class TransactionNode(ABC):
    """集計ツリーのノード.

    ノードは高々1つのグループにしか属さない。
    """

    _parent: TransactionGroup | None = None

    @property
    def parent(self) -> TransactionGroup | None:
        """所属するグループ（ルートなら None）."""
        return self._parent

    @abstractmethod
    def total(self) -> Money:
        """ノード配下の合計金額を返す."""
        pass


class TransactionLeaf(TransactionNode):
    """1件の取引金額を保持する葉ノード."""

    def __init__(self, amount: Money | int | str | Decimal, label: str = "") -> None:
        """初期化.

        Raises:
            InvalidAmountError: 金額が負、または不正な場合
        """
        self._amount = amount if isinstance(amount, Money) else Money.of(amount)
        self._label = label

    @property
    def amount(self) -> Money:
        """金額."""
        return self._amount

    @property
    def label(self) -> str:
        """ラベル（カテゴリ名など）."""
        return self._label

    def total(self) -> Money:
        """保持している金額をそのまま返す."""
        return self._amount

    def __repr__(self) -> str:
        return f"TransactionLeaf({self._amount.to_plain_string()!r}, label={self._label!r})"


class TransactionGroup(TransactionNode):
    """子ノード（葉・グループ）をまとめるグループノード."""

    def __init__(self, name: str = "", children: Iterable[TransactionNode] = ()) -> None:
        """初期化."""
        self._name = name
        self._children: list[TransactionNode] = []
        for child in children:
            self.add(child)

    @property
    def name(self) -> str:
        """グループ名（期間やカテゴリ）."""
        return self._name

    @property
    def children(self) -> tuple[TransactionNode, ...]:
        """子ノード（追加順）."""
        return tuple(self._children)

    def add(self, child: TransactionNode) -> TransactionGroup:
        """子ノードを末尾に追加し、自身を返す.

        Raises:
            TypeError: TransactionNode 以外を追加した場合
            ValueError: 追加により循環が発生する場合、または既に別のグループに属している場合
        """
        if not isinstance(child, TransactionNode):
            raise TypeError(f"child must be a TransactionNode, got {type(child).__name__}")
        if isinstance(child, TransactionGroup) and self._has_ancestor(child):
            raise ValueError("Adding this node would create a cycle")
        if child._parent is not None:
            raise ValueError(f"Node already belongs to group {child._parent.name!r}")
        child._parent = self
        self._children.append(child)
        return self

    def total(self) -> Money:
        """子ノードの合計を再帰的に計算する（空なら0）."""
        result = Money.zero()
        for child in self._children:
            result = result.add(child.total())
        return result

    def groups(self) -> tuple[TransactionGroup, ...]:
        """直下の子グループのみを返す."""
        return tuple(c for c in self._children if isinstance(c, TransactionGroup))

    def leaves(self) -> Iterator[TransactionLeaf]:
        """配下の全ての葉ノードを深さ優先で返す."""
        for child in self._children:
            if isinstance(child, TransactionGroup):
                yield from child.leaves()
            else:
                yield child

    def _has_ancestor(self, node: TransactionGroup) -> bool:
        """node が自身または祖先か判定."""
        current: TransactionGroup | None = self
        while current is not None:
            if current is node:
                return True
            current = current._parent
        return False

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"TransactionGroup({self._name!r}, children={len(self._children)})"
