"""Profit/loss distribution of closed trades."""

from collections import Counter
from collections.abc import Iterable
from decimal import ROUND_FLOOR, Decimal

from tradestats.models import DistributionBin, Trade

DEFAULT_BIN_WIDTH = 50.0


def _bin_lower_bound(pnl: float, bin_width: float) -> float:
    # Decimal keeps exact boundaries such as 0.3 / 0.1 in their own bin
    width = Decimal(str(bin_width))
    steps = (Decimal(str(pnl)) / width).to_integral_value(rounding=ROUND_FLOOR)
    return float(steps * width)


def bin_profit_loss(
    trades: Iterable[Trade], bin_width: float = DEFAULT_BIN_WIDTH
) -> list[DistributionBin]:
    """Bucket realized P&L of closed trades into fixed-width bins.

    Bins are floored toward negative infinity, so a P&L of -10 with a
    width of 50 lands in the -50 bin rather than the 0 bin.

    Args:
        trades: Trades to bucket. Open trades and closed trades without a
            realized P&L are ignored.
        bin_width: Width of each bin in currency units.

    Returns:
        Bins sorted ascending by lower bound. Empty when no trade qualifies.
    """
    if bin_width <= 0:
        raise ValueError(f"bin_width must be positive, got {bin_width}")

    counts: Counter[float] = Counter()
    for trade in trades:
        pnl = trade.realized_profit_loss
        if not trade.is_closed or pnl is None:
            continue
        counts[_bin_lower_bound(pnl, bin_width)] += 1

    return [
        DistributionBin(bin_lower_bound=bound, count=count, is_profit=bound >= 0)
        for bound, count in sorted(counts.items())
    ]


def direction_distribution(trades: Iterable[Trade]) -> dict[str, int]:
    """Count trades per direction (LONG first, then SHORT)."""
    counts = Counter(trade.direction for trade in trades)
    return {
        direction: counts[direction]
        for direction in ("LONG", "SHORT")
        if counts[direction]
    }
