from dataclasses import dataclass


@dataclass(frozen=True)
class BattingStats:
    pa: int
    ab: int
    h: int
    singles: int
    doubles: int
    triples: int
    hr: int
    tb: int
    rbi: int
    r: int
    sb: int
    bb: int
    ibb: int
    hbp: int
    so: int
    sf: int
    sh: int
    avg: float
    obp: float
    slg: float
    ops: float
    ops_plus: int
    woba: float
    k_pct: float
    bb_pct: float

    @property
    def walks(self) -> int:
        return self.bb + self.ibb


@dataclass(frozen=True)
class BattingStatsWithSplits:
    overall: BattingStats
    vs_l: BattingStats | None = None
    vs_r: BattingStats | None = None
