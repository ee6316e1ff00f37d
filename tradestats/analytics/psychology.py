"""Trading psychology: emotions, focus and mistakes.

Only trades that carry a mental state take part in the emotion and focus
views. Emotion performance additionally needs a realized P&L, so open
trades are left out of it.
"""

from collections import Counter
from collections.abc import Iterable

from tradestats.models import EmotionPerformance, Trade


def emotion_performance(trades: Iterable[Trade]) -> dict[str, EmotionPerformance]:
    """Count and realized P&L of closed trades per reported emotion.

    Returns:
        Mapping of emotion to its performance, most traded emotion first
        (ties by name).
    """
    totals: dict[str, list[float]] = {}
    for trade in trades:
        state = trade.mental_state
        pnl = trade.realized_profit_loss
        if state is None or state.emotion is None or pnl is None:
            continue
        totals.setdefault(state.emotion, []).append(pnl)

    ordered = sorted(totals.items(), key=lambda item: (-len(item[1]), item[0]))
    return {
        emotion: EmotionPerformance(
            emotion=emotion,
            count=len(pnls),
            profit=sum(pnls),
            avg_profit=sum(pnls) / len(pnls),
        )
        for emotion, pnls in ordered
    }


def focus_distribution(trades: Iterable[Trade]) -> dict[int, int]:
    """Number of trades per reported focus level, ascending by level."""
    counts = Counter(
        trade.mental_state.focus
        for trade in trades
        if trade.mental_state is not None and trade.mental_state.focus is not None
    )
    return dict(sorted(counts.items()))


def mistake_frequency(trades: Iterable[Trade]) -> dict[str, int]:
    """How often each mistake was recorded, most frequent first (ties by name)."""
    counts = Counter(mistake for trade in trades for mistake in trade.mistakes)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
