"""Loyalty tier progress."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pos_order.models import LoyaltyTier


@dataclass(frozen=True)
class LoyaltyProgress:
    points: int
    next_tier: LoyaltyTier | None
    percent: float

    @property
    def points_to_next_tier(self) -> int:
        if self.next_tier is None:
            return 0
        return self.next_tier.threshold - self.points


def loyalty_progress(points: int, tiers: Iterable[LoyaltyTier]) -> LoyaltyProgress:
    """Progress toward the lowest tier whose threshold is above ``points``.

    A customer past every threshold sits at 100%.
    """
    points = max(0, points)
    next_tier = None
    for tier in sorted(tiers, key=lambda t: t.threshold):
        if tier.threshold > points:
            next_tier = tier
            break
    if next_tier is None:
        return LoyaltyProgress(points=points, next_tier=None, percent=100.0)
    percent = min(points * 100 / next_tier.threshold, 100.0)
    return LoyaltyProgress(points=points, next_tier=next_tier, percent=percent)
