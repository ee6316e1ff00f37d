"""Equity curve and drawdown tracking."""

import logging
from collections.abc import Iterable

from tradestats.models import DrawdownSummary, Trade

logger = logging.getLogger(__name__)


def track_drawdown(trades: Iterable[Trade], starting_capital: float) -> DrawdownSummary:
    """Walk trades in order, tracking equity, peak and drawdown.

    Only closed trades with a realized P&L move the equity curve. A losing
    trade extends the current run of consecutive losses; any other closed
    trade ends it.

    Args:
        trades: Trades in chronological order.
        starting_capital: Equity before the first trade.

    Returns:
        DrawdownSummary for the whole sequence.
    """
    equity = starting_capital
    peak_equity = starting_capital
    max_drawdown = 0.0
    consecutive_losses = 0
    max_consecutive_losses = 0
    biggest_loss = 0.0
    processed = 0

    for trade in trades:
        pnl = trade.realized_profit_loss
        if not trade.is_closed or pnl is None:
            continue
        processed += 1

        equity += pnl
        peak_equity = max(peak_equity, equity)
        max_drawdown = max(max_drawdown, peak_equity - equity)

        if pnl < 0:
            consecutive_losses += 1
            biggest_loss = min(biggest_loss, pnl)
        else:
            consecutive_losses = 0
        max_consecutive_losses = max(max_consecutive_losses, consecutive_losses)

    logger.debug(
        "Tracked drawdown over %d closed trades: max drawdown %.2f", processed, max_drawdown
    )

    return DrawdownSummary(
        max_drawdown=max_drawdown,
        peak_equity=peak_equity,
        current_equity=equity,
        current_drawdown=peak_equity - equity,
        max_consecutive_losses=max_consecutive_losses,
        biggest_loss=biggest_loss,
    )
