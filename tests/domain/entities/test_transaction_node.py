"""取引集計ツリー（TransactionLeaf / TransactionGroup）のテスト."""
from decimal import Decimal

import pytest

from src.domain.entities import TransactionGroup, TransactionLeaf, TransactionNode
from src.domain.value_objects import InvalidAmountError, Money


class TestTransactionLeaf:
    """TransactionLeafの単体テスト."""

    def test_保持している金額を返す(self) -> None:
        leaf = TransactionLeaf(Money.of("12.34"), label="cafe")
        assert leaf.total() == Money.of("12.34")
        assert leaf.label == "cafe"

    def test_整数や文字列からも生成できる(self) -> None:
        assert TransactionLeaf(100).total().value == Decimal("100.00")
        assert TransactionLeaf("0.50").total().value == Decimal("0.50")

    def test_負の金額で生成するとエラー(self) -> None:
        with pytest.raises(InvalidAmountError):
            TransactionLeaf(-1)

    def test_TransactionNodeである(self) -> None:
        assert isinstance(TransactionLeaf(1), TransactionNode)


class TestTransactionGroup:
    """TransactionGroupの単体テスト."""

    def test_子がないグループの合計はゼロ(self) -> None:
        assert TransactionGroup("empty").total() == Money.zero()

    def test_子の合計を返す(self) -> None:
        group = TransactionGroup("day", [TransactionLeaf(100), TransactionLeaf("0.25")])
        assert group.total() == Money.of("100.25")

    def test_addは自身を返しチェーンできる(self) -> None:
        group = TransactionGroup("week")
        returned = group.add(TransactionLeaf(1)).add(TransactionLeaf(2))
        assert returned is group
        assert group.total() == Money(3)

    def test_追加順が保持される(self) -> None:
        a, b, c = TransactionLeaf(1, "a"), TransactionLeaf(2, "b"), TransactionLeaf(3, "c")
        group = TransactionGroup("g").add(a).add(b).add(c)
        assert group.children == (a, b, c)
        assert len(group) == 3

    def test_月次と年次のネスト(self) -> None:
        """月300.00、年350.00 になることを確認."""
        monthly = TransactionGroup("monthly", [TransactionLeaf(100), TransactionLeaf(200)])
        annual = TransactionGroup("annual").add(monthly).add(TransactionLeaf(50))
        assert annual.total().value == Decimal("350.00")
        assert monthly.total().value == Decimal("300.00")

    def test_グルーピングに関係なく合計は同じ(self) -> None:
        """[a1,a2][a3] と [a1][a2,a3] の合計が等しいことを確認."""
        amounts = ["10.10", "20.20", "30.30"]
        left = TransactionGroup("left", [
            TransactionGroup("x", [TransactionLeaf(amounts[0]), TransactionLeaf(amounts[1])]),
            TransactionGroup("y", [TransactionLeaf(amounts[2])]),
        ])
        right = TransactionGroup("right", [
            TransactionGroup("x", [TransactionLeaf(amounts[0])]),
            TransactionGroup("y", [TransactionLeaf(amounts[1]), TransactionLeaf(amounts[2])]),
        ])
        flat = TransactionGroup("flat", [TransactionLeaf(a) for a in amounts])
        expected = Money.of(sum((Decimal(a) for a in amounts), Decimal("0")))
        assert left.total() == right.total() == flat.total() == expected

    def test_浮動小数点の誤差が発生しない(self) -> None:
        group = TransactionGroup("g", [TransactionLeaf("0.10") for _ in range(10)])
        assert group.total().value == Decimal("1.00")

    def test_追加しても合計は減らない(self) -> None:
        group = TransactionGroup("g")
        previous = group.total()
        for amount in ["5", "0", "0.01", "100"]:
            group.add(TransactionLeaf(amount))
            current = group.total()
            assert previous.is_less_than_or_equal(current)
            previous = current

    def test_totalを繰り返し呼んでも同じ値を返す(self) -> None:
        group = TransactionGroup("g", [TransactionLeaf(1), TransactionGroup("h", [TransactionLeaf(2)])])
        first = group.total()
        second = group.total()
        assert first == second == Money(3)
        assert len(group) == 2

    def test_追加後は再計算される(self) -> None:
        inner = TransactionGroup("inner", [TransactionLeaf(1)])
        outer = TransactionGroup("outer", [inner])
        assert outer.total() == Money(1)
        inner.add(TransactionLeaf(2))
        assert outer.total() == Money(3)

    def test_自身を追加するとエラー(self) -> None:
        group = TransactionGroup("g")
        with pytest.raises(ValueError, match="cycle"):
            group.add(group)

    def test_祖先を追加するとエラー(self) -> None:
        child = TransactionGroup("child")
        parent = TransactionGroup("parent", [child])
        with pytest.raises(ValueError, match="cycle"):
            child.add(parent)

    def test_TransactionNode以外を追加するとエラー(self) -> None:
        with pytest.raises(TypeError, match="TransactionNode"):
            TransactionGroup("g").add(100)  # type: ignore[arg-type]

    def test_groupsは直下のグループのみ返す(self) -> None:
        sub = TransactionGroup("sub")
        group = TransactionGroup("g", [TransactionLeaf(1), sub])
        assert group.groups() == (sub,)

    def test_leavesは配下の全ての葉を返す(self) -> None:
        a, b = TransactionLeaf(1, "a"), TransactionLeaf(2, "b")
        group = TransactionGroup("g", [a, TransactionGroup("sub", [b])])
        assert list(group.leaves()) == [a, b]

    def test_同じ葉を2回追加するとエラー(self) -> None:
        """同じ金額が二重に数えられないことを確認."""
        leaf = TransactionLeaf(100)
        group = TransactionGroup("g").add(leaf)
        with pytest.raises(ValueError, match="already belongs"):
            group.add(leaf)
        assert group.total() == Money(100)

    def test_別のグループに属するノードは追加できない(self) -> None:
        shared = TransactionGroup("shared", [TransactionLeaf(100)])
        first = TransactionGroup("first", [shared])
        second = TransactionGroup("second")
        with pytest.raises(ValueError, match="already belongs"):
            second.add(shared)
        root = TransactionGroup("root", [first, second])
        assert root.total() == Money(100)

    def test_追加すると親が設定される(self) -> None:
        leaf = TransactionLeaf(1)
        group = TransactionGroup("g").add(leaf)
        assert leaf.parent is group
        assert group.parent is None

    def test_深いツリーでも循環を検出できる(self) -> None:
        root = TransactionGroup("root")
        current = root
        for i in range(200):
            child = TransactionGroup(f"level-{i}")
            current.add(child)
            current = child
        with pytest.raises(ValueError, match="cycle"):
            current.add(root)
