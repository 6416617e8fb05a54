"""Base/out state machine for a single plate appearance.

Runner advancement is a simplified, rule-based approximation: no double
plays, no fielder's choice, and no extra base taken on errors.
"""

from scorebook.domain.plate_appearance import EMPTY_BASES, PAResult, clamp_outs, normalize_base_state
from scorebook.domain.run_expectancy import BaseOutState


def _add_out(outs: int) -> int:
    # outs == 3 is never represented here; callers detect the end of the half.
    return min(2, outs + 1)


def _force_advance(bases: str) -> str:
    """Batter to first, every runner up one base, runner on third scores."""
    return "1" + bases[0] + bases[1]


def transition(base_state: str, outs: int, result: PAResult | str | None) -> BaseOutState:
    """Return the base/out state after ``result``.

    Malformed base states and out counts are normalized first. Unrecognized
    results are treated like an ordinary out.
    """
    bases = normalize_base_state(base_state)
    outs = clamp_outs(outs)

    match PAResult.parse(result):
        case PAResult.HR:
            return BaseOutState(EMPTY_BASES, outs)
        case PAResult.TRIPLE:
            return BaseOutState("001", outs)
        case PAResult.DOUBLE:
            return BaseOutState("010", outs)
        case PAResult.SINGLE | PAResult.BB | PAResult.IBB | PAResult.HBP | PAResult.OTHER:
            return BaseOutState(_force_advance(bases), outs)
        case PAResult.SAC_FLY:
            return BaseOutState(bases[0] + bases[1] + "0", _add_out(outs))
        case PAResult.SAC_BUNT:
            third = "1" if "1" in (bases[1], bases[2]) else "0"
            return BaseOutState("1" + bases[0] + third, _add_out(outs))
        case PAResult.OUT | PAResult.SO | None:
            return BaseOutState(bases, _add_out(outs))


def base_state_after_result(base_state: str, result: PAResult | str | None) -> str:
    """Base occupancy after ``result``, for advancing a live game log."""
    return transition(base_state, 0, result).base_state
