from enum import StrEnum

from scorebook.domain.batting_stats import BattingStats

MIN_PA_PER_SPLIT = 15
WOBA_DIFF_THRESHOLD = 0.05


class PlatoonPreference(StrEnum):
    VS_LHP = "vsLHP"
    VS_RHP = "vsRHP"


def platoon_preference(
    vs_l: BattingStats | None,
    vs_r: BattingStats | None,
    min_pa: int = MIN_PA_PER_SPLIT,
    threshold: float = WOBA_DIFF_THRESHOLD,
) -> PlatoonPreference | None:
    """Which pitcher hand the batter is clearly better against, by wOBA.

    None covers both "not enough PAs in a split" and "no meaningful edge".
    """
    if vs_l is None or vs_r is None:
        return None
    if vs_l.pa < min_pa or vs_r.pa < min_pa:
        return None
    diff = vs_r.woba - vs_l.woba
    if diff >= threshold:
        return PlatoonPreference.VS_RHP
    if diff <= -threshold:
        return PlatoonPreference.VS_LHP
    return None
