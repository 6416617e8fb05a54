from collections.abc import Sequence
from enum import StrEnum

from scorebook.analysis.batting import batting_stats_from_pas
from scorebook.domain.plate_appearance import PlateAppearance

DEFAULT_WINDOW = 20
MIN_PA_FOR_TREND = 10
HOT_OPS = 0.90
COLD_OPS = 0.60


class Trend(StrEnum):
    HOT = "hot"
    COLD = "cold"
    NEUTRAL = "neutral"


def most_recent_first(pas: Sequence[PlateAppearance]) -> list[PlateAppearance]:
    """Order by ``created_at`` descending; untimed PAs sort last."""
    timed = [p for p in pas if p.created_at is not None]
    untimed = [p for p in pas if p.created_at is None]
    return sorted(timed, key=lambda p: p.created_at_utc, reverse=True) + untimed  # type: ignore[arg-type]


def trend_from_recent_pas(
    pas: Sequence[PlateAppearance],
    window: int = DEFAULT_WINDOW,
    *,
    min_pa: int = MIN_PA_FOR_TREND,
    hot_ops: float = HOT_OPS,
    cold_ops: float = COLD_OPS,
) -> Trend:
    """Classify a batter's recent form by OPS.

    ``pas`` must already be ordered most recent first.
    """
    recent = pas[:window]
    if len(recent) < min_pa:
        return Trend.NEUTRAL
    stats = batting_stats_from_pas(recent)
    if stats is None:
        return Trend.NEUTRAL
    if stats.ops >= hot_ops:
        return Trend.HOT
    if stats.ops <= cold_ops:
        return Trend.COLD
    return Trend.NEUTRAL
