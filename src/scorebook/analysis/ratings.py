"""Internal 1-5 skill ratings computed from plate appearance events."""

from collections.abc import Callable, Sequence

from scorebook.analysis.batting import round_half_up
from scorebook.domain.plate_appearance import (
    EXTRA_BASE_HITS,
    HITS,
    WALKS,
    ContactQuality,
    PAResult,
    PlateAppearance,
)
from scorebook.domain.ratings import DEFAULT_RATING, RATING_MAX, RATING_MIN, Ratings

DEFAULT_CHASE_RATE = 0.25

_QUALITY_CONTACT = frozenset({ContactQuality.MEDIUM, ContactQuality.HARD})


def clamp_rating(value: float) -> int:
    return max(RATING_MIN, min(RATING_MAX, round_half_up(value)))


def _rate(pas: Sequence[PlateAppearance], predicate: Callable[[PlateAppearance], bool]) -> float:
    return sum(1 for p in pas if predicate(p)) / len(pas)


def contact_reliability(pas: Sequence[PlateAppearance]) -> int:
    """More hits and medium/hard contact push up, strikeouts pull down."""
    if not pas:
        return DEFAULT_RATING
    hit_rate = _rate(pas, lambda p: PAResult.parse(p.result) in HITS)
    quality_rate = _rate(pas, lambda p: p.contact_quality in _QUALITY_CONTACT)
    so_rate = _rate(pas, lambda p: PAResult.parse(p.result) == PAResult.SO)
    return clamp_rating(1 + 4 * (hit_rate + 0.5 * quality_rate) - 2 * so_rate)


def damage_potential(pas: Sequence[PlateAppearance]) -> int:
    if not pas:
        return DEFAULT_RATING
    xbh_rate = _rate(pas, lambda p: PAResult.parse(p.result) in EXTRA_BASE_HITS)
    hard_rate = _rate(pas, lambda p: p.contact_quality == ContactQuality.HARD)
    return clamp_rating(1 + 4 * (2 * xbh_rate + hard_rate))


def decision_quality(pas: Sequence[PlateAppearance]) -> int:
    """Low chase rate and walks push up."""
    if not pas:
        return DEFAULT_RATING
    tagged = [p for p in pas if p.chase is not None]
    chase_rate = _rate(tagged, lambda p: p.chase is True) if tagged else DEFAULT_CHASE_RATE
    walk_rate = _rate(pas, lambda p: PAResult.parse(p.result) in WALKS)
    return clamp_rating(1 + 2 * (1 - chase_rate) + 4 * walk_rate)


def defense_trust(pas: Sequence[PlateAppearance]) -> int:
    # Needs defensive events, which plate appearances do not carry.
    return DEFAULT_RATING


def ratings_from_events(pas: Sequence[PlateAppearance]) -> Ratings:
    return Ratings(
        contact_reliability=contact_reliability(pas),
        damage_potential=damage_potential(pas),
        decision_quality=decision_quality(pas),
        defense_trust=defense_trust(pas),
    )
