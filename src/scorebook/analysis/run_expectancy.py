"""Run expectancy built from the team's own plate appearances.

The table holds, for every base/out state, the mean number of runs scored
from that point to the end of the half-inning. Each cell is a plain average
of observed continuations, not a solved Markov chain.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from scorebook.analysis.transitions import transition
from scorebook.domain.plate_appearance import PAResult, PlateAppearance, clamp_outs, normalize_base_state
from scorebook.domain.run_expectancy import RE_STATES, DecisionOption, REState, RETable

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=UTC)


def _timestamp(pa: PlateAppearance) -> datetime:
    ts = pa.created_at_utc
    return _EPOCH if ts is None else ts


def _state_of(pa: PlateAppearance) -> REState:
    return (normalize_base_state(pa.base_state), clamp_outs(pa.outs))


def group_half_innings(pas: Iterable[PlateAppearance]) -> list[list[PlateAppearance]]:
    """Split into half-innings, each stable-sorted by ``created_at``."""
    groups: dict[tuple, list[PlateAppearance]] = {}
    for pa in pas:
        groups.setdefault(pa.half_inning_key, []).append(pa)
    return [sorted(group, key=_timestamp) for group in groups.values()]


def build_re_table(pas: Iterable[PlateAppearance]) -> RETable:
    pas = list(pas)
    samples: dict[REState, list[int]] = {state: [] for state in RE_STATES}

    half_innings = group_half_innings(pas)
    for group in half_innings:
        remaining = sum(pa.rbi for pa in group)
        for pa in group:
            samples[_state_of(pa)].append(remaining)
            remaining -= pa.rbi

    logger.debug("Built RE table from %d half-innings", len(half_innings))
    values = {state: (sum(runs) / len(runs) if runs else None) for state, runs in samples.items()}
    return RETable(values=values, counts=build_re_counts(pas))


def build_re_counts(pas: Iterable[PlateAppearance]) -> dict[REState, int]:
    """Number of plate appearances observed in each base/out state."""
    counts = {state: 0 for state in RE_STATES}
    for pa in pas:
        counts[_state_of(pa)] += 1
    return counts


def expected_runs_remaining(table: RETable, base_state: str, outs: int) -> float:
    """Expected runs to the end of the half; unobserved states count as 0."""
    return table.expected_runs(base_state, outs)


def run_value_of_event(
    table: RETable,
    base_state: str,
    outs: int,
    result: PAResult | str,
    runs_on_play: int,
) -> float:
    """RE after minus RE before, plus the runs that scored on the play."""
    before = expected_runs_remaining(table, base_state, outs)
    after_state = transition(base_state, outs, result)
    after = expected_runs_remaining(table, after_state.base_state, after_state.outs)
    return after - before + runs_on_play


def run_impact(
    table: RETable,
    base_state: str,
    outs: int,
    event_a: DecisionOption,
    event_b: DecisionOption,
) -> float:
    """Run value of choosing ``event_a`` over ``event_b``; positive favors A."""
    value_a = run_value_of_event(table, base_state, outs, event_a.result, event_a.runs_on_play)
    value_b = run_value_of_event(table, base_state, outs, event_b.result, event_b.runs_on_play)
    return value_a - value_b


def compare_options(
    table: RETable,
    base_state: str,
    outs: int,
    options: Sequence[DecisionOption],
) -> list[tuple[DecisionOption, float]]:
    """Rank options by run value, best first."""
    valued = [(opt, run_value_of_event(table, base_state, outs, opt.result, opt.runs_on_play)) for opt in options]
    return sorted(valued, key=lambda pair: pair[1], reverse=True)
