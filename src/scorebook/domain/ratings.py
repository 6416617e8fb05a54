from dataclasses import dataclass
from enum import StrEnum

RATING_MIN = 1
RATING_MAX = 5
DEFAULT_RATING = 3


@dataclass(frozen=True)
class Ratings:
    contact_reliability: int = DEFAULT_RATING
    damage_potential: int = DEFAULT_RATING
    decision_quality: int = DEFAULT_RATING
    defense_trust: int = DEFAULT_RATING


class LineupRole(StrEnum):
    TABLE_SETTER = "Table-setter"
    DAMAGE = "Damage"
    PROTECTION = "Protection"
    BOTTOM = "Bottom"
    OTHER = "Other"


class GreenLightVerdict(StrEnum):
    YES = "yes"
    NO = "no"
    SITUATIONAL = "situational"


@dataclass(frozen=True)
class GreenLight:
    swing_3_0: GreenLightVerdict
    hit_and_run: GreenLightVerdict
    steal: GreenLightVerdict
    bunt: GreenLightVerdict


class SituationTone(StrEnum):
    AGGRESSIVE = "aggressive"
    NEUTRAL = "neutral"
    CONSERVATIVE = "conservative"


@dataclass(frozen=True)
class SituationResult:
    tone: SituationTone
    sentence: str
