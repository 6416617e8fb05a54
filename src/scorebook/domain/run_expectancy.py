from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

from scorebook.domain.plate_appearance import BASE_STATES, EMPTY_BASES, OUTS, PAResult, normalize_base_state

REState: TypeAlias = tuple[str, int]

RE_STATES: tuple[REState, ...] = tuple((base, outs) for base in BASE_STATES for outs in OUTS)


def re_key(base_state: str, outs: int) -> str:
    """Display label for a cell, e.g. ``"100_1"``."""
    return f"{base_state}_{outs}"


@dataclass(frozen=True)
class RETable:
    """Expected runs to the end of the half-inning for each base/out state.

    A cell value of None means no PA was observed in that state; it is not
    the same as an observed average of zero.
    """

    values: Mapping[REState, float | None]
    counts: Mapping[REState, int] = field(default_factory=dict)

    def get(self, base_state: str, outs: int) -> float | None:
        if outs >= 3:
            return 0.0
        return self.values.get((normalize_base_state(base_state), max(0, outs)))

    def expected_runs(self, base_state: str, outs: int) -> float:
        value = self.get(base_state, outs)
        return 0.0 if value is None else value

    def sample_count(self, base_state: str, outs: int) -> int:
        return self.counts.get((normalize_base_state(base_state), max(0, outs)), 0)

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in self.values.values())

    def as_dict(self) -> dict[str, float | None]:
        rendered = {re_key(base, outs): self.values.get((base, outs)) for base, outs in RE_STATES}
        rendered[re_key(EMPTY_BASES, 3)] = 0.0
        return rendered


@dataclass(frozen=True)
class BaseOutState:
    base_state: str
    outs: int


@dataclass(frozen=True)
class DecisionOption:
    result: PAResult
    runs_on_play: int = 0
