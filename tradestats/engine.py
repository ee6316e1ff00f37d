"""Memoized analytics over one snapshot of trades.

A ``TradeAnalytics`` instance owns an immutable snapshot of the caller's
trade list and computes each view at most once. Build a new instance when
the trade list changes.
"""

import logging
from collections.abc import Iterable, Mapping
from functools import cached_property
from typing import Any, Optional, Union

from tradestats.analytics import (
    bin_profit_loss,
    compute_stats,
    current_streak,
    daily_performance,
    direction_distribution,
    emotion_performance,
    focus_distribution,
    generate_insights,
    mistake_frequency,
    monthly_performance,
    normalize_stats,
    track_drawdown,
)
from tradestats.analytics.stats import StatsLike
from tradestats.config import AnalyticsConfig
from tradestats.models import (
    DailyPerformance,
    DistributionBin,
    DrawdownSummary,
    EmotionPerformance,
    Insight,
    MonthlyPerformance,
    Stats,
    Trade,
)
from tradestats.models.trade import as_utc

logger = logging.getLogger(__name__)

TradeLike = Union[Trade, Mapping[str, Any]]


class TradeAnalytics:
    """All analytics views for a single trade snapshot."""

    def __init__(
        self,
        trades: Iterable[TradeLike],
        raw_stats: Optional[StatsLike] = None,
        config: Optional[AnalyticsConfig] = None,
    ):
        """Snapshot the trades.

        Args:
            trades: Trade records, as ``Trade`` objects or store mappings.
            raw_stats: Pre-computed (possibly partial) stats from the store.
                When omitted, stats are derived from the trades.
            config: Starting capital and bin width. Defaults apply when None.
        """
        self.trades: tuple[Trade, ...] = tuple(
            trade if isinstance(trade, Trade) else Trade.model_validate(trade)
            for trade in trades
        )
        self.raw_stats = raw_stats
        self.config = config if config is not None else AnalyticsConfig()
        logger.debug("Snapshot of %d trades", len(self.trades))

    @cached_property
    def chronological(self) -> tuple[Trade, ...]:
        """Trades ordered oldest entry first."""
        return tuple(sorted(self.trades, key=lambda trade: as_utc(trade.entry_date)))

    @cached_property
    def stats(self) -> Stats:
        if self.raw_stats is not None:
            return normalize_stats(self.raw_stats)
        return compute_stats(self.trades)

    @cached_property
    def insights(self) -> list[Insight]:
        return generate_insights(self.chronological, self.stats)

    @cached_property
    def distribution(self) -> list[DistributionBin]:
        return bin_profit_loss(self.trades, self.config.bin_width)

    @cached_property
    def directions(self) -> dict[str, int]:
        return direction_distribution(self.trades)

    @cached_property
    def streak(self) -> int:
        """Current winning streak, counted from the most recent trade."""
        return current_streak(self.chronological)

    @cached_property
    def drawdown(self) -> DrawdownSummary:
        return track_drawdown(self.chronological, self.config.starting_capital)

    @cached_property
    def monthly(self) -> list[MonthlyPerformance]:
        return monthly_performance(self.trades)

    @cached_property
    def daily(self) -> list[DailyPerformance]:
        return daily_performance(self.trades)

    @cached_property
    def emotions(self) -> dict[str, EmotionPerformance]:
        return emotion_performance(self.trades)

    @cached_property
    def focus_levels(self) -> dict[int, int]:
        return focus_distribution(self.trades)

    @cached_property
    def mistakes(self) -> dict[str, int]:
        return mistake_frequency(self.trades)
