from datetime import datetime
from typing import Any

from scorebook.domain.defensive_event import DefensiveEvent, DefensiveOutcome
from scorebook.domain.plate_appearance import (
    ContactQuality,
    Hand,
    HitDirection,
    InningHalf,
    PAResult,
    PlateAppearance,
)

REQUIRED_PA_COLUMNS = ("game_id", "batter_id", "inning", "outs", "base_state", "result")

_TRUE = frozenset({"1", "true", "t", "yes", "y"})
_FALSE = frozenset({"0", "false", "f", "no", "n"})


def _to_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    return int(float(value))


def _to_optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(float(value))


def _to_optional_bool(value: Any) -> bool | None:
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _to_optional_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(str(value))


def _to_base_state(value: Any) -> str:
    # Spreadsheets drop leading zeros ("10" for "010"); keep the raw digits
    # and let normalization pad them.
    return str(value)


def _to_player_ids(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(part.strip() for part in str(value).split(";") if part.strip())


def row_to_plate_appearance(row: dict[str, Any]) -> PlateAppearance:
    """Map a normalized CSV row to a PlateAppearance.

    Raises ValueError on a missing required column or an unknown result.
    """
    missing = [c for c in REQUIRED_PA_COLUMNS if row.get(c) is None]
    if missing:
        raise ValueError(f"missing required columns: {', '.join(missing)}")

    result = PAResult.parse(row["result"])
    if result is None:
        raise ValueError(f"unknown result: {row['result']!r}")

    half = row.get("inning_half")
    hand = row.get("pitcher_hand")
    quality = row.get("contact_quality")
    direction = row.get("hit_direction")
    return PlateAppearance(
        id=row.get("id"),
        game_id=str(row["game_id"]),
        batter_id=str(row["batter_id"]),
        inning=_to_int(row["inning"]),
        outs=_to_int(row["outs"]),
        base_state=_to_base_state(row["base_state"]),
        result=result,
        rbi=_to_int(row.get("rbi")),
        inning_half=InningHalf(half.lower()) if half is not None else None,
        runs_scored_player_ids=_to_player_ids(row.get("runs_scored_player_ids")),
        stolen_bases=_to_int(row.get("stolen_bases")),
        pitcher_hand=Hand(hand.upper()) if hand is not None else None,
        contact_quality=ContactQuality(quality.lower()) if quality is not None else None,
        chase=_to_optional_bool(row.get("chase")),
        created_at=_to_optional_datetime(row.get("created_at")),
        score_diff=_to_int(row.get("score_diff")),
        count_balls=_to_optional_int(row.get("count_balls")),
        count_strikes=_to_optional_int(row.get("count_strikes")),
        hit_direction=HitDirection(direction.lower()) if direction is not None else None,
        pitches_seen=_to_optional_int(row.get("pitches_seen")),
        notes=row.get("notes"),
    )


def row_to_defensive_event(row: dict[str, Any]) -> DefensiveEvent:
    outcome = row.get("outcome")
    return DefensiveEvent(
        id=row.get("id"),
        game_id=str(row["game_id"]),
        inning=_to_int(row["inning"]),
        outs=_to_int(row["outs"]),
        base_state=_to_base_state(row["base_state"]),
        decision_type=str(row["decision_type"]),
        outcome=DefensiveOutcome(outcome.lower()) if outcome is not None else None,
        notes=row.get("notes"),
        created_at=_to_optional_datetime(row.get("created_at")),
    )
