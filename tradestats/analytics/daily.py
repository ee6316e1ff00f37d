"""Day-by-day realized P&L with a running total."""

from collections.abc import Iterable

from tradestats.models import DailyPerformance, Trade
from tradestats.models.trade import as_utc


def daily_performance(trades: Iterable[Trade]) -> list[DailyPerformance]:
    """Group closed trades by exit day, accumulating P&L in exit order.

    Trades without an exit date or a realized P&L are skipped. The day is
    the calendar date of the exit timestamp as supplied.

    Returns:
        One entry per exit day, oldest first.
    """
    closed = [
        trade
        for trade in trades
        if trade.is_closed
        and trade.exit_date is not None
        and trade.realized_profit_loss is not None
    ]
    closed.sort(key=lambda trade: as_utc(trade.exit_date))

    days: dict = {}
    running_total = 0.0
    running_trades = 0
    for trade in closed:
        pnl = trade.realized_profit_loss
        running_total += pnl
        running_trades += 1

        day = days.setdefault(
            trade.exit_date.date(), {"profit": 0.0, "wins": 0, "daily_trades": 0}
        )
        day["profit"] += pnl
        day["wins"] += 1 if pnl > 0 else 0
        day["daily_trades"] += 1
        day["cumulative"] = running_total
        day["total_trades"] = running_trades

    return [
        DailyPerformance(date=exit_day, **values)
        for exit_day, values in sorted(days.items())
    ]
