"""期間別ロールアップ構築サービス."""
from __future__ import annotations

from datetime import date

from ..entities.transaction import Transaction
from ..entities.transaction_node import TransactionGroup, TransactionLeaf


class PeriodRollupBuilder:
    """支出の記録から集計ツリーを組み立てるドメインサービス."""

    def build_yearly(self, year: int, transactions: list[Transaction]) -> TransactionGroup:
        """年→月→週→日→明細 のロールアップを構築する.

        週は月の中の ISO 週で区切るため、月をまたぐ週は両方の月に分かれる。
        支出のない期間のグループは作らない。
        """
        yearly = TransactionGroup(str(year))
        months: dict[int, TransactionGroup] = {}
        weeks: dict[tuple[int, int], TransactionGroup] = {}
        days: dict[date, TransactionGroup] = {}

        expenses = [t for t in transactions if t.is_expense() and t.occurred_on.year == year]
        for t in sorted(expenses, key=lambda t: (t.occurred_on, t.created_at)):
            d = t.occurred_on

            monthly = months.get(d.month)
            if monthly is None:
                monthly = TransactionGroup(f"{year}-{d.month:02d}")
                months[d.month] = monthly
                yearly.add(monthly)

            iso_week = d.isocalendar()[1]
            weekly = weeks.get((d.month, iso_week))
            if weekly is None:
                weekly = TransactionGroup(f"{year}-{d.month:02d}-W{iso_week:02d}")
                weeks[(d.month, iso_week)] = weekly
                monthly.add(weekly)

            daily = days.get(d)
            if daily is None:
                daily = TransactionGroup(d.isoformat())
                days[d] = daily
                weekly.add(daily)

            daily.add(TransactionLeaf(t.amount, label=t.category))

        return yearly

    def build_by_category(self, transactions: list[Transaction]) -> TransactionGroup:
        """カテゴリ別（名前順）の支出グループを構築する."""
        by_category: dict[str, TransactionGroup] = {}
        for t in transactions:
            if not t.is_expense():
                continue
            group = by_category.setdefault(t.category, TransactionGroup(t.category))
            group.add(TransactionLeaf(t.amount, label=t.description or t.category))

        root = TransactionGroup("categories")
        for name in sorted(by_category):
            root.add(by_category[name])
        return root
