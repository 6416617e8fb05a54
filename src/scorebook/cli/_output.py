from rich.console import Console
from rich.table import Table

from scorebook.analysis.platoon import PlatoonPreference
from scorebook.analysis.trends import Trend
from scorebook.domain.batting_stats import BattingStats, BattingStatsWithSplits
from scorebook.domain.defensive_event import CoachAlert
from scorebook.domain.plate_appearance import BASE_STATES, OUTS
from scorebook.domain.ratings import GreenLight, LineupRole, Ratings, SituationResult
from scorebook.domain.run_expectancy import DecisionOption, RETable

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_BASE_LABELS = {
    "000": "Empty",
    "100": "1st",
    "010": "2nd",
    "001": "3rd",
    "110": "1st & 2nd",
    "101": "1st & 3rd",
    "011": "2nd & 3rd",
    "111": "Loaded",
}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt_rate(value: float) -> str:
    # Baseball convention: .345, not 0.345.
    text = f"{value:.3f}"
    return text[1:] if text.startswith("0.") else text


def print_re_table(table: RETable) -> None:
    if table.is_empty:
        console.print("No plate appearances; every state is undefined.")
    rt = Table(title="Run expectancy (runs to end of half-inning)", show_edge=False, pad_edge=False)
    rt.add_column("Bases")
    for outs in OUTS:
        rt.add_column(f"{outs} out", justify="right")
    for base in BASE_STATES:
        cells: list[str] = []
        for outs in OUTS:
            value = table.get(base, outs)
            n = table.sample_count(base, outs)
            cells.append("-" if value is None else f"{value:.2f} (n={n})")
        rt.add_row(f"{base} {_BASE_LABELS[base]}", *cells)
    console.print(rt)


def _stats_row(label: str, stats: BattingStats | None) -> list[str]:
    if stats is None:
        return [label, *["-"] * 12]
    return [
        label,
        str(stats.pa),
        str(stats.ab),
        str(stats.h),
        str(stats.hr),
        str(stats.rbi),
        str(stats.r),
        _fmt_rate(stats.avg),
        _fmt_rate(stats.obp),
        _fmt_rate(stats.slg),
        _fmt_rate(stats.ops),
        str(stats.ops_plus),
        _fmt_rate(stats.woba),
    ]


def print_batting_lines(
    lines: dict[str, BattingStatsWithSplits],
    platoon: dict[str, PlatoonPreference | None],
    trends: dict[str, Trend],
) -> None:
    if not lines:
        console.print("No batters found.")
        return
    bt = Table(show_edge=False, pad_edge=False)
    for col in ("Batter", "PA", "AB", "H", "HR", "RBI", "R", "AVG", "OBP", "SLG", "OPS", "OPS+", "wOBA"):
        bt.add_column(col, justify="left" if col == "Batter" else "right")
    bt.add_column("Platoon")
    bt.add_column("Trend")
    for batter_id, line in lines.items():
        pref = platoon.get(batter_id)
        trend = trends.get(batter_id, Trend.NEUTRAL)
        color = {Trend.HOT: "red", Trend.COLD: "blue"}.get(trend, "white")
        bt.add_row(*_stats_row(batter_id, line.overall), pref or "-", f"[{color}]{trend}[/{color}]")
        bt.add_row(*_stats_row("  vs L", line.vs_l), "", "")
        bt.add_row(*_stats_row("  vs R", line.vs_r), "", "")
    console.print(bt)


def print_ratings(
    ratings: dict[str, Ratings],
    roles: dict[str, LineupRole],
    green_lights: dict[str, GreenLight],
) -> None:
    if not ratings:
        console.print("No batters found.")
        return
    rt = Table(show_edge=False, pad_edge=False)
    for col in ("Batter", "Contact", "Damage", "Decision", "Defense", "Role", "3-0", "H&R", "Steal", "Bunt"):
        rt.add_column(col)
    for batter_id, r in ratings.items():
        gl = green_lights[batter_id]
        rt.add_row(
            batter_id,
            str(r.contact_reliability),
            str(r.damage_potential),
            str(r.decision_quality),
            str(r.defense_trust),
            roles[batter_id],
            gl.swing_3_0,
            gl.hit_and_run,
            gl.steal,
            gl.bunt,
        )
    console.print(rt)


def print_alerts(alerts: list[CoachAlert]) -> None:
    for alert in alerts:
        console.print(f"[bold yellow]{alert.title}:[/bold yellow] {alert.line}")


def print_run_values(
    base_state: str,
    outs: int,
    valued: list[tuple[DecisionOption, float]],
    impact: float | None,
    insufficient: bool,
) -> None:
    console.print(f"Base state [bold]{base_state}[/bold], {outs} out")
    for option, value in valued:
        color = "green" if value > 0 else "red"
        console.print(f"  {option.result} (+{option.runs_on_play} on play): [{color}]{value:+.3f}[/{color}] runs")
    if impact is not None:
        console.print(f"  Run impact (first option minus second): [bold]{impact:+.3f}[/bold]")
    if insufficient:
        console.print("[yellow]Insufficient data:[/yellow] one or more states have no observed PAs (counted as 0).")


def print_situation(result: SituationResult) -> None:
    console.print(f"[bold]{result.tone.upper()}[/bold] {result.sentence}")
