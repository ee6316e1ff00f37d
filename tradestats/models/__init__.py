"""Data models for tradestats."""

from tradestats.models.trade import KNOWN_MISTAKES, MentalState, Trade
from tradestats.models.stats import Stats
from tradestats.models.insight import Insight
from tradestats.models.distribution import DistributionBin
from tradestats.models.drawdown import DrawdownSummary
from tradestats.models.monthly import MonthlyPerformance
from tradestats.models.daily import DailyPerformance
from tradestats.models.psychology import EmotionPerformance

__all__ = [
    "KNOWN_MISTAKES",
    "MentalState",
    "Trade",
    "Stats",
    "Insight",
    "DistributionBin",
    "DrawdownSummary",
    "MonthlyPerformance",
    "DailyPerformance",
    "EmotionPerformance",
]
