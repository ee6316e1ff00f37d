"""Winning streak analysis."""

from collections.abc import Iterable

from tradestats.models import Trade


def current_streak(trades: Iterable[Trade]) -> int:
    """Count the trailing run of profitable trades in the given order.

    The trades are not sorted: the run ends at the last trade supplied.
    Pass trades newest-last for the chronological current streak. A trade
    without a realized P&L breaks the run.
    """
    streak = 0
    for trade in trades:
        pnl = trade.realized_profit_loss
        if pnl is not None and pnl > 0:
            streak += 1
        else:
            streak = 0
    return streak
