"""Green-light matrix: 3-0 swing, hit-and-run, steal and bunt from ratings."""

from scorebook.domain.ratings import GreenLight, GreenLightVerdict, Ratings


def swing_3_0(ratings: Ratings) -> GreenLightVerdict:
    if ratings.decision_quality >= 4 and ratings.damage_potential >= 4:
        return GreenLightVerdict.YES
    if ratings.decision_quality <= 2:
        return GreenLightVerdict.NO
    return GreenLightVerdict.SITUATIONAL


def _contact_play(ratings: Ratings) -> GreenLightVerdict:
    if ratings.contact_reliability >= 4 and ratings.decision_quality >= 3:
        return GreenLightVerdict.YES
    if ratings.contact_reliability <= 2:
        return GreenLightVerdict.NO
    return GreenLightVerdict.SITUATIONAL


def hit_and_run(ratings: Ratings) -> GreenLightVerdict:
    return _contact_play(ratings)


def bunt(ratings: Ratings) -> GreenLightVerdict:
    return _contact_play(ratings)


def steal(ratings: Ratings) -> GreenLightVerdict:
    # No speed data; decision quality stands in for reading the pitcher.
    if ratings.decision_quality >= 4:
        return GreenLightVerdict.YES
    if ratings.decision_quality <= 2:
        return GreenLightVerdict.NO
    return GreenLightVerdict.SITUATIONAL


def green_light_for_ratings(ratings: Ratings) -> GreenLight:
    return GreenLight(
        swing_3_0=swing_3_0(ratings),
        hit_and_run=hit_and_run(ratings),
        steal=steal(ratings),
        bunt=bunt(ratings),
    )
