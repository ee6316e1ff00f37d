"""Aggregate trade statistics.

Stats may arrive partially pre-computed from the trade store, using either
camelCase or snake_case keys and more than one name for the same concept.
``normalize_stats`` reconciles such a mapping into the canonical ``Stats``
shape; ``compute_stats`` derives the same aggregate from a trade list.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from tradestats.models import Stats, Trade

logger = logging.getLogger(__name__)

StatsLike = Union[Stats, Mapping[str, Any]]

# Canonical field -> accepted source keys, in lookup order.
FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    "total_trades": ("totalTrades", "total_trades"),
    "profitable_trades": (
        "winningTrades",
        "profitableTrades",
        "winning_trades",
        "profitable_trades",
    ),
    "losing_trades": ("losingTrades", "losing_trades"),
    "total_profit": ("totalProfit", "total_profit"),
    "win_rate": ("winRate", "win_rate"),
    "win_loss_ratio": ("winLossRatio", "win_loss_ratio"),
}


def _lookup(stats: Mapping[str, Any], field: str) -> Optional[Any]:
    """Return the first non-None value supplied under any synonym of ``field``."""
    for key in FIELD_SYNONYMS[field]:
        value = stats.get(key)
        if value is not None:
            return value
    return None


def _as_mapping(stats: StatsLike) -> Mapping[str, Any]:
    if isinstance(stats, Stats):
        return stats.model_dump()
    return stats


def normalize_stats(stats: Optional[StatsLike]) -> Optional[Stats]:
    """Reconcile a possibly partial stats mapping into a complete ``Stats``.

    Args:
        stats: Mapping (or ``Stats``) with any subset of the canonical fields.

    Returns:
        A new ``Stats`` with every field populated, or None when ``stats``
        is None. The input is never mutated.
    """
    if stats is None:
        return None

    source = _as_mapping(stats)

    profitable = int(_lookup(source, "profitable_trades") or 0)
    total = int(_lookup(source, "total_trades") or 0)

    losing = _lookup(source, "losing_trades")
    losing = int(losing) if losing is not None else max(total - profitable, 0)

    total = max(total, profitable + losing)
    total_profit = float(_lookup(source, "total_profit") or 0.0)

    win_rate = _lookup(source, "win_rate")
    if win_rate is None:
        win_rate = profitable / total * 100 if total > 0 else 0.0
    win_rate = min(max(float(win_rate), 0.0), 100.0)

    win_loss_ratio = _lookup(source, "win_loss_ratio")
    if win_loss_ratio is None:
        win_loss_ratio = profitable / losing if losing > 0 else profitable

    return Stats(
        total_trades=total,
        profitable_trades=profitable,
        losing_trades=losing,
        total_profit=total_profit,
        win_rate=win_rate,
        win_loss_ratio=float(win_loss_ratio),
    )


def compute_stats(trades: Iterable[Trade]) -> Stats:
    """Derive the stats aggregate from closed trades with a realized P&L.

    Breakeven trades count towards the total but are neither profitable
    nor losing.
    """
    total = 0
    profitable = 0
    losing = 0
    total_profit = 0.0

    for trade in trades:
        pnl = trade.realized_profit_loss
        if not trade.is_closed or pnl is None:
            continue
        total += 1
        total_profit += pnl
        if pnl > 0:
            profitable += 1
        elif pnl < 0:
            losing += 1

    logger.debug("Computed stats over %d closed trades", total)

    return normalize_stats(
        {
            "total_trades": total,
            "profitable_trades": profitable,
            "losing_trades": losing,
            "total_profit": total_profit,
        }
    )


def merge_stats(*sources: Optional[StatsLike]) -> Optional[Stats]:
    """Overlay several partial stats sources and normalize the result.

    Later sources take priority; a None value never overrides a value
    supplied by an earlier source.

    Returns:
        Normalized ``Stats``, or None when every source is None.
    """
    present = [source for source in sources if source is not None]
    if not present:
        return None

    merged: dict[str, Any] = {}
    for source in present:
        mapping = _as_mapping(source)
        for field in FIELD_SYNONYMS:
            value = _lookup(mapping, field)
            if value is not None:
                merged[field] = value

    return normalize_stats(merged)
