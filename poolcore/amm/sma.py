"""Weekly moving-average yield estimator.

The pool contract keeps a 7-slot ring of cumulative numerator/denominator
pairs, one per elapsed day since ``start_time``. The ratio ``a_i / c_i`` of
each slot tracks the value of one share token; its growth between adjacent
days estimates the daily yield paid to liquidity providers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from poolcore.constants import (
    SECONDS_PER_DAY,
    SMA_RATIO_NORMALIZER,
    SMA_RATIO_SCALE,
    SMA_SLOTS,
)
from poolcore.safe_int import S

DEFAULT_DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class WeeklyMovingAverage:
    """Snapshot of the on-chain 7-day share-value accumulator.

    Attributes:
        start_time: Unix seconds of slot 0; 0 means not yet initialized
        current_time: Unix seconds of the last accumulator update
        a: Numerator accumulators a0..a6
        c: Denominator accumulators c0..c6
    """

    start_time: int
    current_time: int
    a: tuple[int, ...] = (0,) * SMA_SLOTS
    c: tuple[int, ...] = (0,) * SMA_SLOTS

    def __post_init__(self) -> None:
        if len(self.a) != SMA_SLOTS or len(self.c) != SMA_SLOTS:
            raise ValueError(f"WeeklyMovingAverage needs {SMA_SLOTS} slots, got {len(self.a)}/{len(self.c)}")

    @classmethod
    def zero(cls) -> WeeklyMovingAverage:
        """An uninitialized accumulator."""
        return cls(start_time=0, current_time=0)

    @property
    def is_initialized(self) -> bool:
        return self.start_time > 0

    def slot_values(self) -> list[float] | None:
        """Share-value ratios of the slots reached so far, one per day.

        Slot ``i`` is reached once ``current_time >= start_time + i days``.
        Returns None if a reached slot has a zero denominator, since
        skipping it would merge two days of growth into one.
        """
        values: list[float] = []
        for i in range(SMA_SLOTS):
            if self.current_time < self.start_time + i * SECONDS_PER_DAY:
                continue
            ratio = (S(self.a[i]) * SMA_RATIO_SCALE).checked_div(self.c[i])
            if ratio is None:
                return None
            values.append(ratio.value / SMA_RATIO_NORMALIZER)
        return values

    def annualized_yield(self, days_per_year: int = DEFAULT_DAYS_PER_YEAR) -> float | None:
        """Annualized yield from day-over-day share-value growth.

        Each adjacent pair contributes ``sqrt(v[i] / v[i-1])`` floored at 1.0,
        so a down day counts as zero growth. The mean daily factor is
        compounded over ``days_per_year``.

        Returns:
            The yield as a fraction (0.05 = 5%), or None when uninitialized
            or fewer than two usable slots are available.
        """
        if not self.is_initialized:
            return None

        values = self.slot_values()
        if values is None or len(values) < 2:
            return None

        growth_total = 0.0
        for previous, current in zip(values, values[1:]):
            if previous <= 0.0:
                growth_total += 1.0
                continue
            growth_total += max(1.0, math.sqrt(current / previous))

        daily = growth_total / (len(values) - 1)
        return daily**days_per_year - 1.0
