"""Month-by-month realized performance."""

from collections.abc import Iterable

from tradestats.models import MonthlyPerformance, Trade


def monthly_performance(trades: Iterable[Trade]) -> list[MonthlyPerformance]:
    """Group closed trades by entry month.

    Returns:
        One entry per month with a closed trade, sorted by month. Win rate
        is rounded to one decimal.
    """
    months: dict[str, dict] = {}

    for trade in trades:
        pnl = trade.realized_profit_loss
        if not trade.is_closed or pnl is None:
            continue

        key = f"{trade.entry_date.year}-{trade.entry_date.month:02d}"
        month = months.setdefault(key, {"profit": 0.0, "trades": 0, "winning_trades": 0})
        month["profit"] += pnl
        month["trades"] += 1
        if pnl > 0:
            month["winning_trades"] += 1

    return [
        MonthlyPerformance(
            month=key,
            profit=month["profit"],
            trades=month["trades"],
            winning_trades=month["winning_trades"],
            win_rate=round(month["winning_trades"] / month["trades"] * 100, 1),
        )
        for key, month in sorted(months.items())
    ]
