import pytest

from scorebook.analysis.run_expectancy import (
    build_re_counts,
    build_re_table,
    compare_options,
    expected_runs_remaining,
    group_half_innings,
    run_impact,
    run_value_of_event,
)
from scorebook.domain.plate_appearance import InningHalf, PAResult
from scorebook.domain.run_expectancy import RE_STATES, DecisionOption, RETable
from tests.helpers import make_pa


def _inning_with_two_run_homer() -> list:
    return [
        make_pa(PAResult.SINGLE, base_state="000", outs=0, minute=0),
        make_pa(PAResult.HR, base_state="100", outs=0, rbi=2, minute=1),
        make_pa(PAResult.OUT, base_state="000", outs=0, minute=2),
        make_pa(PAResult.SO, base_state="000", outs=1, minute=3),
        make_pa(PAResult.OUT, base_state="000", outs=2, minute=4),
    ]


def _table(cells: dict[tuple[str, int], float]) -> RETable:
    values: dict[tuple[str, int], float | None] = {state: None for state in RE_STATES}
    values.update(cells)
    return RETable(values=values)


class TestBuildRETable:
    def test_empty_input_every_cell_undefined(self) -> None:
        table = build_re_table([])
        for base, outs in RE_STATES:
            assert table.get(base, outs) is None
        assert table.get("000", 3) == 0.0

    def test_mean_of_runs_to_end_of_half(self) -> None:
        table = build_re_table(_inning_with_two_run_homer())
        # 000_0 saw the leadoff single (2 runs followed) and the PA after the homer (0).
        assert table.get("000", 0) == pytest.approx(1.0)
        assert table.get("100", 0) == pytest.approx(2.0)
        assert table.get("000", 1) == 0.0
        assert table.get("000", 2) == 0.0
        assert table.get("111", 0) is None

    def test_sample_counts(self) -> None:
        table = build_re_table(_inning_with_two_run_homer())
        assert table.sample_count("000", 0) == 2
        assert table.sample_count("100", 0) == 1
        assert table.sample_count("010", 1) == 0

    def test_orders_by_created_at_within_half(self) -> None:
        pas = _inning_with_two_run_homer()
        assert build_re_table(list(reversed(pas))) == build_re_table(pas)

    def test_half_innings_kept_separate(self) -> None:
        top = _inning_with_two_run_homer()
        bottom = [
            make_pa(PAResult.HR, inning_half=InningHalf.BOTTOM, base_state="000", outs=0, rbi=1, minute=10),
            make_pa(PAResult.OUT, inning_half=InningHalf.BOTTOM, base_state="000", outs=0, minute=11),
        ]
        table = build_re_table(top + bottom)
        # 000_0 samples: 2, 0 (top) and 1, 0 (bottom).
        assert table.get("000", 0) == pytest.approx(0.75)

    def test_games_kept_separate(self) -> None:
        g1 = [make_pa(PAResult.HR, game_id="g1", base_state="000", outs=0, rbi=1, minute=0)]
        g2 = [make_pa(PAResult.OUT, game_id="g2", base_state="000", outs=0, minute=0)]
        assert build_re_table(g1 + g2).get("000", 0) == pytest.approx(0.5)

    def test_outs_clamped_and_base_normalized(self) -> None:
        pas = [make_pa(PAResult.OUT, base_state="1x", outs=3, rbi=0, minute=0)]
        table = build_re_table(pas)
        assert table.get("010", 2) == 0.0
        assert table.sample_count("010", 2) == 1

    def test_idempotent(self) -> None:
        pas = _inning_with_two_run_homer()
        assert build_re_table(pas) == build_re_table(pas)

    def test_timestamp_ties_keep_input_order(self) -> None:
        single = make_pa(PAResult.SINGLE, base_state="000", outs=0, rbi=0, minute=0)
        homer = make_pa(PAResult.HR, base_state="100", outs=0, rbi=2, minute=0)
        assert build_re_table([single, homer]).get("000", 0) == pytest.approx(2.0)
        assert build_re_table([homer, single]).get("000", 0) == pytest.approx(0.0)

    def test_untimed_pas_keep_input_order(self) -> None:
        pas = [
            make_pa(PAResult.SINGLE, base_state="000", outs=0),
            make_pa(PAResult.HR, base_state="100", outs=0, rbi=2),
        ]
        assert build_re_table(pas).get("100", 0) == pytest.approx(2.0)


class TestGroupHalfInnings:
    def test_groups_by_game_inning_and_half(self) -> None:
        pas = [
            make_pa(inning=1, inning_half=InningHalf.TOP),
            make_pa(inning=1, inning_half=InningHalf.BOTTOM),
            make_pa(inning=2, inning_half=InningHalf.TOP),
            make_pa(inning=1, inning_half=InningHalf.TOP),
        ]
        assert [len(g) for g in group_half_innings(pas)] == [2, 1, 1]


class TestBuildRECounts:
    def test_counts_every_pa(self) -> None:
        counts = build_re_counts(_inning_with_two_run_homer())
        assert counts[("000", 0)] == 2
        assert counts[("100", 0)] == 1
        assert sum(counts.values()) == 5
        assert len(counts) == 24

    def test_table_counts_match(self) -> None:
        pas = _inning_with_two_run_homer()
        table = build_re_table(iter(pas))
        assert dict(table.counts) == build_re_counts(pas)


class TestRunValue:
    def test_two_run_homer(self) -> None:
        table = _table({("100", 0): 0.90, ("000", 0): 0.50})
        assert run_value_of_event(table, "100", 0, PAResult.HR, 2) == pytest.approx(1.60)

    def test_undefined_cells_count_as_zero(self) -> None:
        table = _table({})
        assert run_value_of_event(table, "100", 0, PAResult.SINGLE, 0) == 0.0

    def test_third_out_state_is_zero(self) -> None:
        table = _table({("000", 2): 0.10})
        # Out cap keeps this at 2 outs, so the after state is still 000_2.
        assert run_value_of_event(table, "000", 2, PAResult.OUT, 0) == pytest.approx(0.0)

    def test_expected_runs_remaining(self) -> None:
        table = _table({("011", 1): 1.4})
        assert expected_runs_remaining(table, "011", 1) == 1.4
        assert expected_runs_remaining(table, "011", 3) == 0.0
        assert expected_runs_remaining(table, "111", 1) == 0.0


class TestRunImpact:
    def test_bunt_vs_out(self) -> None:
        table = _table({("100", 0): 0.90, ("110", 1): 0.95, ("100", 1): 0.50})
        bunt = DecisionOption(PAResult.SAC_BUNT)
        out = DecisionOption(PAResult.OUT)
        assert run_impact(table, "100", 0, bunt, out) == pytest.approx(0.45)
        assert run_impact(table, "100", 0, out, bunt) == pytest.approx(-0.45)

    def test_same_option_is_zero(self) -> None:
        table = _table({("100", 0): 0.90})
        opt = DecisionOption(PAResult.SINGLE)
        assert run_impact(table, "100", 0, opt, opt) == 0.0


class TestCompareOptions:
    def test_ranked_best_first(self) -> None:
        table = _table({("100", 0): 0.90, ("000", 0): 0.50, ("100", 1): 0.50})
        hr = DecisionOption(PAResult.HR, 2)
        out = DecisionOption(PAResult.OUT)
        ranked = compare_options(table, "100", 0, [out, hr])
        assert [opt for opt, _ in ranked] == [hr, out]
        assert ranked[0][1] == pytest.approx(1.60)
