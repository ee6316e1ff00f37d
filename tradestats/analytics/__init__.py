"""Trade performance analytics."""

from tradestats.analytics.distribution import (
    DEFAULT_BIN_WIDTH,
    bin_profit_loss,
    direction_distribution,
)
from tradestats.analytics.daily import daily_performance
from tradestats.analytics.drawdown import track_drawdown
from tradestats.analytics.insights import (
    generate_insights,
    hourly_performance,
    weekday_performance,
)
from tradestats.analytics.monthly import monthly_performance
from tradestats.analytics.psychology import (
    emotion_performance,
    focus_distribution,
    mistake_frequency,
)
from tradestats.analytics.stats import compute_stats, merge_stats, normalize_stats
from tradestats.analytics.streak import current_streak

__all__ = [
    "DEFAULT_BIN_WIDTH",
    "bin_profit_loss",
    "direction_distribution",
    "track_drawdown",
    "generate_insights",
    "hourly_performance",
    "weekday_performance",
    "monthly_performance",
    "daily_performance",
    "emotion_performance",
    "focus_distribution",
    "mistake_frequency",
    "compute_stats",
    "merge_stats",
    "normalize_stats",
    "current_streak",
]
