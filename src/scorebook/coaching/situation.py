from dataclasses import dataclass

from scorebook.domain.plate_appearance import EMPTY_BASES, normalize_base_state
from scorebook.domain.ratings import Ratings, SituationResult, SituationTone

LATE_INNING = 7


@dataclass(frozen=True)
class SituationContext:
    inning: int
    outs: int
    base_state: str
    score_diff: int  # positive when we lead


def _runner_in_scoring_position(base_state: str) -> bool:
    return base_state[1] == "1" or base_state[2] == "1"


def situation_prompt(context: SituationContext, batter_ratings: Ratings) -> SituationResult:
    """One-sentence recommendation and tone for the current game situation."""
    bases = normalize_base_state(context.base_state)
    late_game = context.inning >= LATE_INNING
    runners_on = bases != EMPTY_BASES

    if late_game and context.score_diff < 0:
        return SituationResult(
            tone=SituationTone.AGGRESSIVE,
            sentence="Runner goes on contact; batter has green light 3-0 if decision quality is there.",
        )

    if late_game and context.score_diff > 0 and runners_on:
        return SituationResult(
            tone=SituationTone.CONSERVATIVE,
            sentence="Protect the lead; no steals or hit-and-run unless big opportunity.",
        )

    if context.outs == 2 and _runner_in_scoring_position(bases):
        tone = SituationTone.AGGRESSIVE if batter_ratings.contact_reliability >= 4 else SituationTone.NEUTRAL
        return SituationResult(
            tone=tone,
            sentence="Two outs, need a hit. Runner goes on contact with two strikes.",
        )

    return SituationResult(
        tone=SituationTone.NEUTRAL,
        sentence="Standard situation; play to your green-light matrix for this batter.",
    )
