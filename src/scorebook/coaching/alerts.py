from collections.abc import Iterable

from scorebook.domain.defensive_event import AlertType, CoachAlert, DefensiveEvent
from scorebook.domain.plate_appearance import normalize_base_state

BUNT_DEFENSE_ALERT = CoachAlert(
    id="bunt-1st",
    type=AlertType.DEFENSIVE,
    title="Bunt defense",
    line="Watch for bunt with runner on 1st.",
    icon="shield",
)


def defensive_alerts_from_events(events: Iterable[DefensiveEvent], limit: int = 5) -> list[CoachAlert]:
    """Short coach-facing alerts drawn from recent defensive events."""
    alerts: list[CoachAlert] = []
    if any(
        "bunt" in e.decision_type.lower() and normalize_base_state(e.base_state)[0] == "1" for e in events
    ):
        alerts.append(BUNT_DEFENSE_ALERT)
    return alerts[:limit]
