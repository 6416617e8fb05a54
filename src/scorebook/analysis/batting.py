"""Traditional and advanced batting stats derived from plate appearance events."""

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from scorebook.domain.batting_stats import BattingStats, BattingStatsWithSplits
from scorebook.domain.plate_appearance import Hand, PAResult, PlateAppearance

logger = logging.getLogger(__name__)

DEFAULT_LEAGUE_OPS = 0.730


@dataclass(frozen=True)
class WobaWeights:
    """Linear weights for wOBA, fixed for a typical run environment."""

    bb: float = 0.69
    hbp: float = 0.72
    single: float = 0.89
    double: float = 1.27
    triple: float = 1.62
    hr: float = 2.10


DEFAULT_WOBA_WEIGHTS = WobaWeights()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _safe_rate(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator >= 1 else 0.0


def batting_stats_from_pas(
    pas: Sequence[PlateAppearance],
    league_ops: float = DEFAULT_LEAGUE_OPS,
    weights: WobaWeights = DEFAULT_WOBA_WEIGHTS,
    runs: int = 0,
) -> BattingStats | None:
    """Fold a batter's plate appearances into counting and rate stats.

    Returns None only when ``pas`` is empty. Runs scored are not derivable
    from the batter's own PAs, so the caller passes them in (see
    :func:`runs_scored`).
    """
    if not pas:
        return None

    counts = Counter(PAResult.parse(p.result) for p in pas)
    pa = len(pas)
    singles = counts[PAResult.SINGLE]
    doubles = counts[PAResult.DOUBLE]
    triples = counts[PAResult.TRIPLE]
    hr = counts[PAResult.HR]
    bb = counts[PAResult.BB]
    ibb = counts[PAResult.IBB]
    hbp = counts[PAResult.HBP]
    so = counts[PAResult.SO]
    sf = counts[PAResult.SAC_FLY]
    sh = counts[PAResult.SAC_BUNT]

    walks = bb + ibb
    ab = pa - walks - hbp - sf - sh
    h = singles + doubles + triples + hr
    tb = singles + 2 * doubles + 3 * triples + 4 * hr

    avg = _safe_rate(h, ab)
    slg = _safe_rate(tb, ab)
    obp = _safe_rate(h + walks + hbp, pa)
    ops = obp + slg
    ops_plus = round_half_up(100 * ops / league_ops) if league_ops > 0 else 100

    woba = _safe_rate(
        weights.bb * walks
        + weights.hbp * hbp
        + weights.single * singles
        + weights.double * doubles
        + weights.triple * triples
        + weights.hr * hr,
        ab + walks + hbp + sf,
    )

    logger.debug("Aggregated %d PAs (AB=%d, H=%d)", pa, ab, h)
    return BattingStats(
        pa=pa,
        ab=ab,
        h=h,
        singles=singles,
        doubles=doubles,
        triples=triples,
        hr=hr,
        tb=tb,
        rbi=sum(p.rbi for p in pas),
        r=runs,
        sb=sum(p.stolen_bases for p in pas),
        bb=bb,
        ibb=ibb,
        hbp=hbp,
        so=so,
        sf=sf,
        sh=sh,
        avg=avg,
        obp=obp,
        slg=slg,
        ops=ops,
        ops_plus=ops_plus,
        woba=woba,
        k_pct=_safe_rate(so, pa),
        bb_pct=_safe_rate(walks, pa),
    )


def runs_scored(player_id: str, pas: Iterable[PlateAppearance]) -> int:
    """Count how many times ``player_id`` crossed the plate across ``pas``.

    ``pas`` is normally the whole team's log: a runner scores on other
    batters' plate appearances.
    """
    return sum(p.runs_scored_player_ids.count(player_id) for p in pas)


def group_by_batter(pas: Iterable[PlateAppearance]) -> dict[str, list[PlateAppearance]]:
    grouped: dict[str, list[PlateAppearance]] = {}
    for p in pas:
        grouped.setdefault(p.batter_id, []).append(p)
    return grouped


def batting_stats_with_splits(
    player_id: str,
    batter_pas: Sequence[PlateAppearance],
    team_pas: Sequence[PlateAppearance] | None = None,
    league_ops: float = DEFAULT_LEAGUE_OPS,
    weights: WobaWeights = DEFAULT_WOBA_WEIGHTS,
) -> BattingStatsWithSplits | None:
    """Overall line plus vs-LHP / vs-RHP splits keyed on ``pitcher_hand``.

    Runs in each split count the plate appearances (by anyone) thrown by a
    pitcher of that hand on which the player scored.
    """
    run_source = team_pas if team_pas is not None else batter_pas
    overall = batting_stats_from_pas(batter_pas, league_ops, weights, runs=runs_scored(player_id, run_source))
    if overall is None:
        return None

    splits: dict[Hand, BattingStats | None] = {}
    for hand in Hand:
        hand_pas = [p for p in batter_pas if p.pitcher_hand == hand]
        hand_runs = runs_scored(player_id, (p for p in run_source if p.pitcher_hand == hand))
        splits[hand] = batting_stats_from_pas(hand_pas, league_ops, weights, runs=hand_runs)

    return BattingStatsWithSplits(overall=overall, vs_l=splits[Hand.LEFT], vs_r=splits[Hand.RIGHT])
