"""Qualitative trading insights.

Each pass looks at one aspect of the trade history (entry timing, position
sizing, win rate, hold times, weekday performance, winning streak) and emits
at most one ``Insight``. Passes run in a fixed order so the output is
reproducible for a given input.
"""

import logging
import math
from collections.abc import Sequence
from typing import Callable, Optional

from tradestats.analytics.streak import current_streak
from tradestats.models import Insight, Stats, Trade

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

POSITION_SIZE_DEVIATION_LIMIT = 0.5
LOW_WIN_RATE = 50.0
HIGH_WIN_RATE = 65.0
LOSER_HOLD_TIME_FACTOR = 1.5
STREAK_THRESHOLD = 3


def _bucket_pnl(
    trades: Sequence[Trade], key: Callable[[Trade], int]
) -> dict[int, dict[str, float]]:
    """Group trades with a realized P&L into win/loss/total buckets."""
    buckets: dict[int, dict[str, float]] = {}
    for trade in trades:
        pnl = trade.realized_profit_loss
        if pnl is None:
            continue
        bucket = buckets.setdefault(key(trade), {"wins": 0, "losses": 0, "total_pl": 0.0})
        if pnl > 0:
            bucket["wins"] += 1
        else:
            bucket["losses"] += 1
        bucket["total_pl"] += pnl
    return buckets


def _weekday(trade: Trade) -> int:
    # datetime.weekday() is Monday=0; shift to Sunday=0
    return (trade.entry_date.weekday() + 1) % 7


def _rank_buckets(buckets: dict[int, dict[str, float]], key_name: str) -> list[dict]:
    """Win rate and average P&L per bucket, best average first."""
    rows = []
    for key in sorted(buckets):
        bucket = buckets[key]
        count = bucket["wins"] + bucket["losses"]
        if count == 0:
            continue
        rows.append(
            {
                key_name: key,
                "win_rate": bucket["wins"] / count * 100,
                "avg_pl": bucket["total_pl"] / count,
            }
        )
    # sorted() is stable, so equal averages keep ascending key order
    return sorted(rows, key=lambda row: row["avg_pl"], reverse=True)


def hourly_performance(trades: Sequence[Trade]) -> list[dict]:
    """Win rate and average P&L per entry hour, best hour first."""
    return _rank_buckets(_bucket_pnl(trades, lambda trade: trade.entry_date.hour), "hour")


def weekday_performance(trades: Sequence[Trade]) -> list[dict]:
    """Win rate and average P&L per entry weekday (Sunday=0), best day first."""
    return _rank_buckets(_bucket_pnl(trades, _weekday), "day")


def _best_hour_insight(trades: Sequence[Trade]) -> Optional[Insight]:
    ranked = hourly_performance(trades)
    if not ranked or ranked[0]["avg_pl"] <= 0:
        return None
    best = ranked[0]
    return Insight(
        category="timing",
        severity="positive",
        message=(
            f"Your most profitable trading hour is {best['hour']}:00 "
            f"with an average P/L of ${best['avg_pl']:.2f}"
        ),
    )


def _position_size_insight(trades: Sequence[Trade]) -> Optional[Insight]:
    sizes = [trade.position_size for trade in trades]
    if not sizes:
        return None
    mean = sum(sizes) / len(sizes)
    stdev = math.sqrt(sum((size - mean) ** 2 for size in sizes) / len(sizes))
    if stdev <= mean * POSITION_SIZE_DEVIATION_LIMIT:
        return None
    return Insight(
        category="risk",
        severity="warning",
        message=(
            "Your position sizing varies significantly. Consider standardizing "
            "your position sizes for more consistent results"
        ),
    )


def _win_rate_insight(stats: Optional[Stats]) -> Optional[Insight]:
    if stats is None:
        return None
    if stats.win_rate < LOW_WIN_RATE:
        return Insight(
            category="performance",
            severity="negative",
            message="Consider reviewing your entry criteria as your win rate is below 50%",
        )
    if stats.win_rate > HIGH_WIN_RATE:
        return Insight(
            category="performance",
            severity="positive",
            message=(
                "Strong win rate above 65%. Focus on increasing position size "
                "on high-conviction setups"
            ),
        )
    return None


def _hold_time_insight(trades: Sequence[Trade]) -> Optional[Insight]:
    winners: list[float] = []
    losers: list[float] = []
    for trade in trades:
        minutes = trade.hold_minutes
        pnl = trade.realized_profit_loss
        if minutes is None or pnl is None:
            continue
        (winners if pnl > 0 else losers).append(minutes)

    if not winners or not losers:
        return None

    avg_winner = sum(winners) / len(winners)
    avg_loser = sum(losers) / len(losers)
    if avg_loser <= avg_winner * LOSER_HOLD_TIME_FACTOR:
        return None
    return Insight(
        category="timing",
        severity="warning",
        message=(
            "You tend to hold losing trades longer than winning trades. "
            "Consider implementing stricter stop-loss rules"
        ),
    )


def _best_weekday_insight(trades: Sequence[Trade]) -> Optional[Insight]:
    ranked = weekday_performance(trades)
    if not ranked:
        return None
    day, avg_pl = ranked[0]["day"], ranked[0]["avg_pl"]
    return Insight(
        category="timing",
        severity="info",
        message=(
            f"Your most profitable trading day is {WEEKDAY_NAMES[day]} "
            f"with avg P/L of ${avg_pl:.2f}"
        ),
    )


def _streak_insight(trades: Sequence[Trade]) -> Optional[Insight]:
    streak = current_streak(trades)
    if streak <= STREAK_THRESHOLD:
        return None
    return Insight(
        category="performance",
        severity="positive",
        message=(
            f"You're on a {streak}-trade winning streak! "
            "Keep following your successful strategy"
        ),
    )


def generate_insights(trades: Sequence[Trade], stats: Optional[Stats]) -> list[Insight]:
    """Produce qualitative insights for a trade history.

    Args:
        trades: Trades in any order. The streak pass counts the trailing
            run of winners in the order given.
        stats: Canonical stats for the same history, or None to skip the
            win rate commentary.

    Returns:
        Insights in a fixed order: best hour, position sizing, win rate,
        hold times, best weekday, streak. Empty for an empty trade list.
    """
    if not trades:
        return []

    candidates = [
        _best_hour_insight(trades),
        _position_size_insight(trades),
        _win_rate_insight(stats),
        _hold_time_insight(trades),
        _best_weekday_insight(trades),
        _streak_insight(trades),
    ]
    insights = [insight for insight in candidates if insight is not None]

    logger.debug("Generated %d insights from %d trades", len(insights), len(trades))
    return insights
