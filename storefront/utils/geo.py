import math

from storefront.core.config import NEARBY_RADIUS


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Planar distance between two coordinate pairs.

    The coordinates are treated as points on a flat grid rather than on the
    globe; store radii are expressed in the same units.
    """
    return math.sqrt((lat1 - lat2) ** 2 + (lon1 - lon2) ** 2)


def within_radius(
    lat1: float, lon1: float, lat2: float, lon2: float, radius: float = NEARBY_RADIUS
) -> bool:
    return distance(lat1, lon1, lat2, lon2) <= radius
