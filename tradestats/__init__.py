"""tradestats - trade performance analytics for a trading journal."""

__version__ = "0.1.0"
