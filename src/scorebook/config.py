from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from scorebook.analysis.batting import DEFAULT_LEAGUE_OPS, WobaWeights
from scorebook.analysis.platoon import MIN_PA_PER_SPLIT, WOBA_DIFF_THRESHOLD
from scorebook.analysis.trends import COLD_OPS, DEFAULT_WINDOW, HOT_OPS, MIN_PA_FOR_TREND
from scorebook.domain.errors import ConfigError, Err, Ok, Result

_DEFAULT_WEIGHTS = WobaWeights()

_DEFAULTS: dict[str, object] = {
    "analysis": {
        "league_ops": DEFAULT_LEAGUE_OPS,
        "woba": {
            "bb": _DEFAULT_WEIGHTS.bb,
            "hbp": _DEFAULT_WEIGHTS.hbp,
            "single": _DEFAULT_WEIGHTS.single,
            "double": _DEFAULT_WEIGHTS.double,
            "triple": _DEFAULT_WEIGHTS.triple,
            "hr": _DEFAULT_WEIGHTS.hr,
        },
        "platoon": {
            "min_pa": MIN_PA_PER_SPLIT,
            "woba_threshold": WOBA_DIFF_THRESHOLD,
        },
        "trend": {
            "window": DEFAULT_WINDOW,
            "min_pa": MIN_PA_FOR_TREND,
            "hot_ops": HOT_OPS,
            "cold_ops": COLD_OPS,
        },
    },
}

_WOBA_KEYS = ("bb", "hbp", "single", "double", "triple", "hr")
_KNOWN_KEYS = frozenset(
    {
        "analysis.league_ops",
        "analysis.platoon.min_pa",
        "analysis.platoon.woba_threshold",
        "analysis.trend.window",
        "analysis.trend.min_pa",
        "analysis.trend.hot_ops",
        "analysis.trend.cold_ops",
        *(f"analysis.woba.{k}" for k in _WOBA_KEYS),
    }
)


@dataclass(frozen=True)
class AnalysisSettings:
    league_ops: float = DEFAULT_LEAGUE_OPS
    woba_weights: WobaWeights = _DEFAULT_WEIGHTS
    platoon_min_pa: int = MIN_PA_PER_SPLIT
    platoon_threshold: float = WOBA_DIFF_THRESHOLD
    trend_window: int = DEFAULT_WINDOW
    trend_min_pa: int = MIN_PA_FOR_TREND
    hot_ops: float = HOT_OPS
    cold_ops: float = COLD_OPS


def create_config(
    yaml_path: str = "scorebook.yaml",
    env_prefix: str = "SCOREBOOK",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def load_analysis_settings(cfg: ConfigurationSet | None = None) -> Result[AnalysisSettings, ConfigError]:
    """Read analysis policy constants; env values arrive as strings."""
    if cfg is None:
        cfg = create_config()

    unknown = tuple(sorted(k for k in cfg.as_dict() if k.startswith("analysis.") and k not in _KNOWN_KEYS))
    if unknown:
        return Err(ConfigError(message=f"Unrecognized analysis keys: {', '.join(unknown)}", unrecognized_keys=unknown))

    try:
        weights = WobaWeights(**{k: float(str(cfg[f"analysis.woba.{k}"])) for k in _WOBA_KEYS})
        settings = AnalysisSettings(
            league_ops=float(str(cfg["analysis.league_ops"])),
            woba_weights=weights,
            platoon_min_pa=int(str(cfg["analysis.platoon.min_pa"])),
            platoon_threshold=float(str(cfg["analysis.platoon.woba_threshold"])),
            trend_window=int(str(cfg["analysis.trend.window"])),
            trend_min_pa=int(str(cfg["analysis.trend.min_pa"])),
            hot_ops=float(str(cfg["analysis.trend.hot_ops"])),
            cold_ops=float(str(cfg["analysis.trend.cold_ops"])),
        )
    except ValueError as e:
        return Err(ConfigError(message=f"Invalid analysis setting: {e}"))
    return Ok(settings)
