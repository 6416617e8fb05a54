import dataclasses

import pytest

from scorebook.analysis.batting import batting_stats_from_pas
from scorebook.analysis.platoon import PlatoonPreference, platoon_preference
from scorebook.domain.batting_stats import BattingStats
from scorebook.domain.plate_appearance import PAResult
from tests.helpers import make_results


def _stats(pa: int, woba: float) -> BattingStats:
    base = batting_stats_from_pas(make_results(*[PAResult.OUT] * pa))
    assert base is not None
    return dataclasses.replace(base, woba=woba)


class TestPlatoonPreference:
    def test_better_vs_right(self) -> None:
        assert platoon_preference(_stats(20, 0.250), _stats(20, 0.400)) == PlatoonPreference.VS_RHP

    def test_better_vs_left(self) -> None:
        assert platoon_preference(_stats(20, 0.420), _stats(20, 0.300)) == PlatoonPreference.VS_LHP

    def test_small_difference_is_none(self) -> None:
        assert platoon_preference(_stats(20, 0.320), _stats(20, 0.340)) is None

    @pytest.mark.parametrize(("pa_l", "pa_r"), [(10, 30), (30, 10), (14, 15)])
    def test_sample_gate(self, pa_l: int, pa_r: int) -> None:
        assert platoon_preference(_stats(pa_l, 0.200), _stats(pa_r, 0.500)) is None

    def test_gate_is_inclusive(self) -> None:
        assert platoon_preference(_stats(15, 0.200), _stats(15, 0.500)) == PlatoonPreference.VS_RHP

    def test_missing_split_is_none(self) -> None:
        assert platoon_preference(None, _stats(30, 0.500)) is None
        assert platoon_preference(_stats(30, 0.500), None) is None

    def test_threshold_is_inclusive(self) -> None:
        result = platoon_preference(_stats(20, 0.25), _stats(20, 0.5), threshold=0.25)
        assert result == PlatoonPreference.VS_RHP

    def test_custom_min_pa(self) -> None:
        assert platoon_preference(_stats(5, 0.2), _stats(5, 0.5), min_pa=5) == PlatoonPreference.VS_RHP

    def test_wire_values(self) -> None:
        assert PlatoonPreference.VS_LHP == "vsLHP"
        assert PlatoonPreference.VS_RHP == "vsRHP"
