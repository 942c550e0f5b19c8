import math

from schemas.chord import Displacement

DEFAULT_NODE_DISTANCE = 60.0

# Angle in radians for a major chord, 0 = straight up, clockwise positive.
# Non-major chords move in the opposite direction.
_MAJOR_ANGLES = {
    "P": 0.0,
    "R": 2 * math.pi / 3,
    "L": 4 * math.pi / 3,
}


def displacement(
    transform_type: str, family: str, distance: float = DEFAULT_NODE_DISTANCE
) -> Displacement:
    """Offset from the current Tonnetz node to the node reached by a transform.

    y grows downwards, as on an SVG canvas.
    """
    angle = _MAJOR_ANGLES.get(transform_type)
    if angle is None:
        return Displacement(dx=0.0, dy=0.0)
    if family != "Major":
        angle += math.pi

    return Displacement(
        dx=distance * math.sin(angle),
        dy=-distance * math.cos(angle),
    )
