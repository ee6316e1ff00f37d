"""Tests for day-by-day realized P&L."""

from datetime import date, datetime, timedelta
from typing import Optional

from tradestats.analytics import daily_performance
from tradestats.models import Trade


def make_trade(exit_date: Optional[datetime], pnl: Optional[float]) -> Trade:
    return Trade(
        symbol="GOOG",
        direction="SHORT",
        entry_price=170.0,
        entry_quantity=40,
        entry_date=(exit_date or datetime(2024, 7, 1, 9, 30)) - timedelta(hours=1),
        exit_date=exit_date,
        status="CLOSED" if pnl is not None else "OPEN",
        realized_profit_loss=pnl,
    )


class TestDailyPerformance:
    def test_running_totals_follow_exit_order(self):
        trades = [
            make_trade(datetime(2024, 7, 2, 15, 0), -40.0),
            make_trade(datetime(2024, 7, 1, 11, 0), 100.0),
            make_trade(datetime(2024, 7, 2, 10, 0), 25.0),
            make_trade(datetime(2024, 7, 1, 14, 0), -10.0),
        ]

        days = daily_performance(trades)

        assert [day.date for day in days] == [date(2024, 7, 1), date(2024, 7, 2)]
        first, second = days
        assert (first.profit, first.cumulative, first.wins, first.daily_trades) == (90, 90, 1, 2)
        assert first.total_trades == 2
        assert (second.profit, second.cumulative, second.wins) == (-15, 75, 1)
        assert second.total_trades == 4

    def test_skips_open_and_unexited_trades(self):
        closed_without_exit = Trade(
            symbol="GOOG",
            direction="LONG",
            entry_price=170.0,
            entry_quantity=40,
            entry_date=datetime(2024, 7, 1, 9, 30),
            status="CLOSED",
            realized_profit_loss=50.0,
        )
        trades = [
            make_trade(None, None),
            closed_without_exit,
            make_trade(datetime(2024, 7, 3, 12, 0), 5.0),
        ]

        days = daily_performance(trades)

        assert len(days) == 1
        assert days[0].cumulative == 5.0

    def test_empty(self):
        assert daily_performance([]) == []
