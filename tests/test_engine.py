"""Tests for the memoized analytics facade."""

from datetime import datetime, timedelta

from tradestats.config import AnalyticsConfig
from tradestats.engine import TradeAnalytics
from tradestats.models import Trade

START = datetime(2024, 3, 4, 9, 30)


def store_records(pnls: list[float]) -> list[dict]:
    """Closed trade records, one per day, in chronological order."""
    records = []
    for day, pnl in enumerate(pnls):
        entry = START + timedelta(days=day)
        records.append(
            {
                "symbol": "SPY",
                "direction": "LONG",
                "entryPrice": 510.0,
                "entryQuantity": 10,
                "entryDate": entry.isoformat(),
                "exitDate": (entry + timedelta(minutes=15)).isoformat(),
                "status": "CLOSED",
                "realizedProfitLoss": pnl,
                "shares": 10,
            }
        )
    return records


class TestTradeAnalytics:
    def test_accepts_store_records(self):
        analytics = TradeAnalytics(store_records([100, -50]))

        assert all(isinstance(trade, Trade) for trade in analytics.trades)
        assert analytics.stats.total_trades == 2
        assert analytics.stats.win_rate == 50.0

    def test_raw_stats_take_priority(self):
        analytics = TradeAnalytics(
            store_records([100, -50]),
            raw_stats={"totalTrades": 40, "winningTrades": 30, "losingTrades": 10},
        )

        assert analytics.stats.total_trades == 40
        assert analytics.stats.win_rate == 75.0

    def test_drawdown_and_streak_use_entry_order(self):
        records = store_records([100, -50, -30, 80])
        analytics = TradeAnalytics(
            reversed(records), config=AnalyticsConfig(starting_capital=1000)
        )

        assert analytics.drawdown.max_drawdown == 80
        assert analytics.drawdown.max_consecutive_losses == 2
        assert analytics.streak == 1

    def test_distribution_uses_configured_width(self):
        analytics = TradeAnalytics(
            store_records([-10, 40, 60, -60]), config=AnalyticsConfig(bin_width=100)
        )

        assert [(b.bin_lower_bound, b.count) for b in analytics.distribution] == [
            (-100, 2),
            (0, 2),
        ]

    def test_views_are_computed_once(self):
        analytics = TradeAnalytics(store_records([10, 20, 30, 40, 50]))

        assert analytics.insights is analytics.insights
        assert analytics.drawdown is analytics.drawdown
        assert analytics.distribution is analytics.distribution

    def test_snapshot_is_independent_of_caller_list(self):
        records = store_records([10, 20])
        analytics = TradeAnalytics(records)

        records.append(store_records([99])[0])

        assert len(analytics.trades) == 2

    def test_insights_report_chronological_streak(self):
        analytics = TradeAnalytics(reversed(store_records([-5, 10, 20, 30, 40])))

        assert any("4-trade winning streak" in i.message for i in analytics.insights)

    def test_monthly_and_directions(self):
        analytics = TradeAnalytics(store_records([10, -5]))

        assert [m.month for m in analytics.monthly] == ["2024-03"]
        assert analytics.directions == {"LONG": 2}

    def test_empty_snapshot(self):
        analytics = TradeAnalytics([])

        assert analytics.insights == []
        assert analytics.distribution == []
        assert analytics.streak == 0
        assert analytics.drawdown.current_equity == AnalyticsConfig().starting_capital

    def test_mixed_timezone_awareness(self):
        records = store_records([10, 5])
        records[0]["entryDate"] = "2024-03-04T09:30:00Z"
        records[0]["exitDate"] = "2024-03-04T09:45:00Z"

        analytics = TradeAnalytics(reversed(records))

        assert [trade.realized_profit_loss for trade in analytics.chronological] == [10, 5]
        assert analytics.streak == 2
        assert analytics.drawdown.max_drawdown == 0
        assert len(analytics.daily) == 2
        assert analytics.insights

    def test_open_legacy_record_does_not_fail_snapshot(self):
        records = store_records([25])
        records.append(
            {
                "symbol": "SPY",
                "type": "LONG",
                "entryPrice": 512.0,
                "entryQuantity": 10,
                "entryDate": "2024-03-06T10:00:00",
                "status": "OPEN",
                "profitLoss": {"realized": 0},
            }
        )

        analytics = TradeAnalytics(records)

        assert analytics.trades[1].realized_profit_loss is None
        assert analytics.stats.total_trades == 1

    def test_psychology_and_daily_views(self):
        records = store_records([40, -20])
        records[0]["mentalState"] = {"focus": 8, "emotion": "Calm"}
        records[1]["mentalState"] = {"focus": 4, "emotion": "Fearful"}
        records[1]["mistakes"] = ["FOMO", "Chasing"]

        analytics = TradeAnalytics(records)

        assert list(analytics.emotions) == ["Calm", "Fearful"]
        assert analytics.focus_levels == {4: 1, 8: 1}
        assert analytics.mistakes == {"Chasing": 1, "FOMO": 1}
        assert [day.cumulative for day in analytics.daily] == [40, 20]
