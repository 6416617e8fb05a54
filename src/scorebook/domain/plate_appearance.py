import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

BASE_STATES: tuple[str, ...] = ("000", "100", "010", "001", "110", "101", "011", "111")
OUTS: tuple[int, ...] = (0, 1, 2)
EMPTY_BASES = "000"

_NON_BINARY = re.compile(r"[^01]")


class PAResult(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HR = "hr"
    OUT = "out"
    SO = "so"
    BB = "bb"
    IBB = "ibb"
    HBP = "hbp"
    SAC_FLY = "sac_fly"
    SAC_BUNT = "sac_bunt"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> "PAResult | None":
        """Map a stored result string to a member, folding legacy aliases.

        Returns None for anything unrecognized so the caller picks the default.
        """
        if isinstance(value, PAResult):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _RESULT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


# "sac" predates the sac_fly/sac_bunt split and was always scored as a fly.
_RESULT_ALIASES = {
    "sac": "sac_fly",
    "so_looking": "so",
}

HITS = frozenset({PAResult.SINGLE, PAResult.DOUBLE, PAResult.TRIPLE, PAResult.HR})
EXTRA_BASE_HITS = frozenset({PAResult.DOUBLE, PAResult.TRIPLE, PAResult.HR})
WALKS = frozenset({PAResult.BB, PAResult.IBB})


class InningHalf(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"


class Hand(StrEnum):
    LEFT = "L"
    RIGHT = "R"


class ContactQuality(StrEnum):
    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"


class HitDirection(StrEnum):
    PULLED = "pulled"
    UP_THE_MIDDLE = "up_the_middle"
    OPPOSITE_FIELD = "opposite_field"


def normalize_base_state(value: str | None) -> str:
    """Coerce to three 0/1 characters (1st, 2nd, 3rd)."""
    if not value:
        return EMPTY_BASES
    cleaned = _NON_BINARY.sub("0", str(value))
    return cleaned.rjust(3, "0")[:3]


def clamp_outs(value: int) -> int:
    return max(0, min(2, int(value)))


@dataclass(frozen=True)
class PlateAppearance:
    game_id: str
    batter_id: str
    inning: int
    outs: int
    base_state: str
    result: PAResult
    rbi: int = 0
    inning_half: InningHalf | None = None
    runs_scored_player_ids: tuple[str, ...] = ()
    stolen_bases: int = 0
    pitcher_hand: Hand | None = None
    contact_quality: ContactQuality | None = None
    chase: bool | None = None
    created_at: datetime | None = None
    id: str | None = None
    score_diff: int = 0
    count_balls: int | None = None
    count_strikes: int | None = None
    hit_direction: HitDirection | None = None
    pitches_seen: int | None = None
    notes: str | None = None

    @property
    def created_at_utc(self) -> datetime | None:
        """``created_at`` with naive values read as UTC."""
        ts = self.created_at
        if ts is None or ts.tzinfo is not None:
            return ts
        return ts.replace(tzinfo=UTC)

    @property
    def half_inning_key(self) -> tuple[str, int, InningHalf | None]:
        return (self.game_id, self.inning, self.inning_half)
