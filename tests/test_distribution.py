"""Tests for the P&L distribution and direction breakdown."""

import math
from datetime import datetime
from typing import Optional

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradestats.analytics import bin_profit_loss, direction_distribution
from tradestats.models import Trade


def make_trade(pnl: Optional[float], direction: str = "LONG") -> Trade:
    return Trade(
        symbol="QQQ",
        direction=direction,
        entry_price=430.0,
        entry_quantity=5,
        entry_date=datetime(2024, 2, 12, 11, 0),
        status="CLOSED" if pnl is not None else "OPEN",
        realized_profit_loss=pnl,
    )


class TestBinProfitLoss:
    def test_negative_values_floor_toward_negative_infinity(self):
        trades = [make_trade(pnl) for pnl in (-10, 40, 60, -60)]

        bins = bin_profit_loss(trades, bin_width=50)

        assert [(b.bin_lower_bound, b.count) for b in bins] == [
            (-100, 1),
            (-50, 1),
            (0, 1),
            (50, 1),
        ]
        assert [b.is_profit for b in bins] == [False, False, True, True]

    def test_counts_accumulate(self):
        trades = [make_trade(pnl) for pnl in (5, 10, 49.99, 50, -0.01)]

        bins = bin_profit_loss(trades)

        assert {b.bin_lower_bound: b.count for b in bins} == {-50: 1, 0: 3, 50: 1}

    def test_fractional_width_boundaries(self):
        trades = [make_trade(pnl) for pnl in (0.3, 0.1, -0.1, 0.25)]

        bins = bin_profit_loss(trades, bin_width=0.1)

        assert {b.bin_lower_bound: b.count for b in bins} == {
            -0.1: 1,
            0.1: 1,
            0.2: 1,
            0.3: 1,
        }

    def test_empty_input(self):
        assert bin_profit_loss([]) == []

    def test_open_trades_ignored(self):
        bins = bin_profit_loss([make_trade(None), make_trade(None), make_trade(75)])

        assert [(b.bin_lower_bound, b.count) for b in bins] == [(50, 1)]

    def test_closed_trade_without_pnl_ignored(self):
        trade = Trade(
            symbol="QQQ",
            direction="LONG",
            entry_price=430.0,
            entry_quantity=5,
            entry_date=datetime(2024, 2, 12, 11, 0),
            status="CLOSED",
        )

        assert bin_profit_loss([trade]) == []

    @pytest.mark.parametrize("width", [0, -50])
    def test_non_positive_width_rejected(self, width: float):
        with pytest.raises(ValueError):
            bin_profit_loss([make_trade(10)], bin_width=width)

    @given(
        pnls=st.lists(st.integers(min_value=-10000, max_value=10000), max_size=60),
        width=st.integers(min_value=1, max_value=500),
    )
    @settings(max_examples=100)
    def test_bins_partition_closed_trades(self, pnls: list[int], width: int):
        """
        *For any* set of closed trades, every trade lands in exactly one bin
        whose range contains its P&L, and bins are sorted ascending.
        """
        trades = [make_trade(pnl) for pnl in pnls]

        bins = bin_profit_loss(trades, bin_width=width)
        bounds = [b.bin_lower_bound for b in bins]

        assert sum(b.count for b in bins) == len(pnls)
        assert bounds == sorted(set(bounds))
        for pnl in pnls:
            bound = math.floor(pnl / width) * width
            assert bound <= pnl < bound + width
            assert bound in bounds

    @given(pnls=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=30))
    @settings(max_examples=50)
    def test_idempotent(self, pnls: list[int]):
        trades = [make_trade(pnl) for pnl in pnls]

        assert bin_profit_loss(trades) == bin_profit_loss(trades)


class TestDirectionDistribution:
    def test_counts_per_direction(self):
        trades = [
            make_trade(10, "SHORT"),
            make_trade(-5, "LONG"),
            make_trade(None, "LONG"),
        ]

        assert direction_distribution(trades) == {"LONG": 2, "SHORT": 1}
        assert list(direction_distribution(trades)) == ["LONG", "SHORT"]

    def test_missing_direction_omitted(self):
        assert direction_distribution([make_trade(10, "SHORT")]) == {"SHORT": 1}

    def test_empty(self):
        assert direction_distribution([]) == {}
