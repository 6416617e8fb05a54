from pathlib import Path
from typing import Annotated

import typer

from scorebook.analysis.batting import batting_stats_with_splits, group_by_batter
from scorebook.analysis.platoon import platoon_preference
from scorebook.analysis.ratings import ratings_from_events
from scorebook.analysis.run_expectancy import build_re_table, compare_options, run_impact
from scorebook.analysis.transitions import transition
from scorebook.analysis.trends import most_recent_first, trend_from_recent_pas
from scorebook.cli._logging import configure_logging
from scorebook.cli._output import (
    print_alerts,
    print_batting_lines,
    print_error,
    print_ratings,
    print_re_table,
    print_run_values,
    print_situation,
)
from scorebook.coaching import (
    SituationContext,
    defensive_alerts_from_events,
    green_light_for_ratings,
    lineup_role_from_ratings,
    situation_prompt,
)
from scorebook.config import AnalysisSettings, create_config, load_analysis_settings
from scorebook.domain.errors import Err, Ok
from scorebook.domain.plate_appearance import PAResult, PlateAppearance, clamp_outs, normalize_base_state
from scorebook.domain.ratings import Ratings
from scorebook.domain.run_expectancy import DecisionOption
from scorebook.ingest.loader import load_defensive_events, load_plate_appearances

app = typer.Typer(name="scorebook", help="Scorebook: team plate-appearance analytics")

_state: dict[str, Path | None] = {"config": None}

_PasArg = Annotated[Path, typer.Argument(help="CSV of plate appearances")]
_BatterOpt = Annotated[str | None, typer.Option("--batter", help="Only this batter id")]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    config_path: Annotated[Path | None, typer.Option("--config", help="YAML config file")] = None,
) -> None:
    """Scorebook: team plate-appearance analytics."""
    configure_logging(verbose=verbose)
    _state["config"] = config_path
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _settings() -> AnalysisSettings:
    path = _state["config"]
    cfg = create_config(yaml_path=str(path)) if path is not None else create_config()
    match load_analysis_settings(cfg):
        case Ok(settings):
            return settings
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


def _load_pas(path: Path) -> list[PlateAppearance]:
    match load_plate_appearances(path):
        case Ok(pas):
            return pas
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


def _batters(pas: list[PlateAppearance], batter: str | None) -> dict[str, list[PlateAppearance]]:
    grouped = group_by_batter(pas)
    if batter is None:
        return grouped
    if batter not in grouped:
        print_error(f"No plate appearances for batter '{batter}'")
        raise typer.Exit(code=1)
    return {batter: grouped[batter]}


def _parse_option(raw: str) -> DecisionOption:
    name, _, runs = raw.partition(":")
    result = PAResult.parse(name)
    if result is None:
        print_error(f"Unknown result '{name}'")
        raise typer.Exit(code=1)
    try:
        return DecisionOption(result=result, runs_on_play=int(runs) if runs else 0)
    except ValueError:
        print_error(f"Invalid runs on play in '{raw}'")
        raise typer.Exit(code=1) from None


@app.command("re-table")
def re_table(pas_csv: _PasArg) -> None:
    """Print the run-expectancy table built from every plate appearance."""
    print_re_table(build_re_table(_load_pas(pas_csv)))


@app.command()
def batting(pas_csv: _PasArg, batter: _BatterOpt = None) -> None:
    """Batting lines with platoon splits, preference and recent trend."""
    settings = _settings()
    pas = _load_pas(pas_csv)
    lines = {}
    platoon = {}
    trends = {}
    for batter_id, batter_pas in _batters(pas, batter).items():
        line = batting_stats_with_splits(
            batter_id, batter_pas, team_pas=pas, league_ops=settings.league_ops, weights=settings.woba_weights
        )
        if line is None:
            continue
        lines[batter_id] = line
        platoon[batter_id] = platoon_preference(
            line.vs_l, line.vs_r, min_pa=settings.platoon_min_pa, threshold=settings.platoon_threshold
        )
        trends[batter_id] = trend_from_recent_pas(
            most_recent_first(batter_pas),
            settings.trend_window,
            min_pa=settings.trend_min_pa,
            hot_ops=settings.hot_ops,
            cold_ops=settings.cold_ops,
        )
    print_batting_lines(lines, platoon, trends)


@app.command()
def ratings(
    pas_csv: _PasArg,
    batter: _BatterOpt = None,
    defense_csv: Annotated[Path | None, typer.Option("--defense", help="CSV of defensive events")] = None,
) -> None:
    """Skill ratings, lineup roles and the green-light matrix."""
    computed: dict[str, Ratings] = {}
    for batter_id, batter_pas in _batters(_load_pas(pas_csv), batter).items():
        computed[batter_id] = ratings_from_events(batter_pas)
    roles = {b: lineup_role_from_ratings(r) for b, r in computed.items()}
    green_lights = {b: green_light_for_ratings(r) for b, r in computed.items()}
    print_ratings(computed, roles, green_lights)

    if defense_csv is not None:
        match load_defensive_events(defense_csv):
            case Ok(events):
                print_alerts(defensive_alerts_from_events(events))
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@app.command("run-value")
def run_value(
    pas_csv: _PasArg,
    base: Annotated[str, typer.Option("--base", help="Base state before the play, e.g. 100")] = "000",
    outs: Annotated[int, typer.Option("--outs", help="Outs before the play")] = 0,
    option: Annotated[
        list[str] | None, typer.Option("--option", help="Result[:runs on play] to value (repeatable)")
    ] = None,
) -> None:
    """Run value of one or more events; two options also show the run impact."""
    if not option:
        print_error("Pass at least one --option, e.g. --option hr:2 --option sac_bunt")
        raise typer.Exit(code=1)
    base_state = normalize_base_state(base)
    outs = clamp_outs(outs)
    table = build_re_table(_load_pas(pas_csv))
    options = [_parse_option(raw) for raw in option]

    insufficient = table.get(base_state, outs) is None
    for opt in options:
        after = transition(base_state, outs, opt.result)
        insufficient = insufficient or table.get(after.base_state, after.outs) is None

    impact = run_impact(table, base_state, outs, options[0], options[1]) if len(options) == 2 else None
    print_run_values(base_state, outs, compare_options(table, base_state, outs, options), impact, insufficient)


@app.command()
def situation(
    pas_csv: _PasArg,
    batter: Annotated[str, typer.Option("--batter", help="Batter id")],
    inning: Annotated[int, typer.Option("--inning")] = 1,
    outs: Annotated[int, typer.Option("--outs")] = 0,
    base: Annotated[str, typer.Option("--base")] = "000",
    score_diff: Annotated[int, typer.Option("--score-diff", help="Our lead (negative when behind)")] = 0,
) -> None:
    """Coach prompt for the current situation and batter."""
    batter_pas = _batters(_load_pas(pas_csv), batter)[batter]
    context = SituationContext(inning=inning, outs=clamp_outs(outs), base_state=base, score_diff=score_diff)
    print_situation(situation_prompt(context, ratings_from_events(batter_pas)))
