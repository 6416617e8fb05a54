from datetime import datetime, timedelta

from scorebook.domain.plate_appearance import (
    ContactQuality,
    Hand,
    InningHalf,
    PAResult,
    PlateAppearance,
)

BASE_TIME = datetime(2025, 4, 1, 18, 0, 0)


def make_pa(
    result: PAResult | str = PAResult.OUT,
    *,
    game_id: str = "g1",
    batter_id: str = "b1",
    inning: int = 1,
    inning_half: InningHalf | None = InningHalf.TOP,
    outs: int = 0,
    base_state: str = "000",
    rbi: int = 0,
    minute: int | None = None,
    runs_scored_player_ids: tuple[str, ...] = (),
    stolen_bases: int = 0,
    pitcher_hand: Hand | None = None,
    contact_quality: ContactQuality | None = None,
    chase: bool | None = None,
) -> PlateAppearance:
    """Build a PlateAppearance with sensible defaults; ``minute`` sets created_at."""
    return PlateAppearance(
        game_id=game_id,
        batter_id=batter_id,
        inning=inning,
        inning_half=inning_half,
        outs=outs,
        base_state=base_state,
        result=_coerce(result),
        rbi=rbi,
        created_at=BASE_TIME + timedelta(minutes=minute) if minute is not None else None,
        runs_scored_player_ids=runs_scored_player_ids,
        stolen_bases=stolen_bases,
        pitcher_hand=pitcher_hand,
        contact_quality=contact_quality,
        chase=chase,
    )


def make_results(*results: PAResult | str, **kwargs: object) -> list[PlateAppearance]:
    return [make_pa(r, **kwargs) for r in results]  # type: ignore[arg-type]


def _coerce(result: PAResult | str) -> PAResult:
    parsed = PAResult.parse(result)
    if parsed is None:
        raise ValueError(f"unknown result {result!r}")
    return parsed
