"""Rule-based coach-facing outputs built on top of computed ratings."""

from scorebook.coaching.alerts import defensive_alerts_from_events
from scorebook.coaching.green_light import bunt, green_light_for_ratings, hit_and_run, steal, swing_3_0
from scorebook.coaching.lineup_roles import lineup_role_from_ratings
from scorebook.coaching.situation import SituationContext, situation_prompt

__all__ = [
    "SituationContext",
    "bunt",
    "defensive_alerts_from_events",
    "green_light_for_ratings",
    "hit_and_run",
    "lineup_role_from_ratings",
    "situation_prompt",
    "steal",
    "swing_3_0",
]
