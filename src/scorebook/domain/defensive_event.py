from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class DefensiveOutcome(StrEnum):
    SUCCESS = "success"
    FAIL = "fail"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class DefensiveEvent:
    game_id: str
    inning: int
    outs: int
    base_state: str
    decision_type: str
    outcome: DefensiveOutcome | None = None
    notes: str | None = None
    created_at: datetime | None = None
    id: str | None = None


class AlertType(StrEnum):
    DEFENSIVE = "defensive"
    SUBSTITUTION = "substitution"


@dataclass(frozen=True)
class CoachAlert:
    id: str
    type: AlertType
    title: str
    line: str
    icon: str
