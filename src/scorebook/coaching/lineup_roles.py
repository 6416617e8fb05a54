from scorebook.domain.ratings import LineupRole, Ratings


def lineup_role_from_ratings(ratings: Ratings) -> LineupRole:
    """Coach-facing lineup role; first matching rule wins."""
    contact = ratings.contact_reliability
    damage = ratings.damage_potential
    if damage >= 4:
        return LineupRole.DAMAGE
    if contact >= 4 and damage <= 2:
        return LineupRole.TABLE_SETTER
    if contact >= 3 and damage >= 3:
        return LineupRole.PROTECTION
    if contact <= 2 and damage <= 2:
        return LineupRole.BOTTOM
    return LineupRole.OTHER
