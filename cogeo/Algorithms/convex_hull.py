"""
Convex hull construction.

All three algorithms return the strict vertices of the hull (no collinear
boundary points), starting from the point that is smallest under
compare_x_then_y and going clockwise. For the same input they return the
same list.

    jarvis_march    O(n*h)      gift wrapping
    monotone_chain  O(n log n)  Andrew's upper/lower chains
    graham_scan     O(n log n)  angular sweep around the lowest-left point
"""
import logging
from functools import cmp_to_key

from cogeo.DCEL.geometry import (
    TurnDirection,
    as_points,
    compare_by_angle_around,
    orientation,
    squared_distance,
    x_then_y_key,
)
from cogeo.errors import InsufficientPoints

logger = logging.getLogger(__name__)


def _distinct_points(points):
    pts = list(dict.fromkeys(as_points(points)))
    if not pts:
        raise InsufficientPoints("Convex hull needs at least one point.")
    return pts


def _is_right_turn(a, b, c) -> bool:
    return orientation(a, b, c) is TurnDirection.RIGHT_TURN


def jarvis_march(points):
    """
    Gift wrapping. From the current hull point pick the candidate with no other
    point to the left of current -> candidate. Among collinear candidates the
    farthest one wins, so points in the middle of a hull edge are skipped.
    """
    pts = _distinct_points(points)
    start = min(pts, key=x_then_y_key)

    hull = [start]
    current = start
    while True:
        candidate = None
        for p in pts:
            if p == current:
                continue
            if candidate is None:
                candidate = p
                continue
            turn = orientation(current, candidate, p)
            if turn is TurnDirection.LEFT_TURN or (
                    turn is TurnDirection.NO_TURN
                    and squared_distance(current, p) > squared_distance(current, candidate)):
                candidate = p

        if candidate is None or candidate == start:
            break
        hull.append(candidate)
        current = candidate

    return hull


def monotone_chain(points):
    """
    Sort by x then y, build the upper chain left to right and the lower chain
    right to left. A point is popped whenever the last three do not make a
    clockwise (right) turn, which drops both concave and collinear points.
    """
    pts = sorted(_distinct_points(points), key=x_then_y_key)
    if len(pts) == 1:
        return pts

    upper = []
    for p in pts:
        while len(upper) >= 2 and not _is_right_turn(upper[-2], upper[-1], p):
            upper.pop()
        upper.append(p)

    lower = []
    for p in reversed(pts):
        while len(lower) >= 2 and not _is_right_turn(lower[-2], lower[-1], p):
            lower.pop()
        lower.append(p)

    # each chain ends where the other one starts
    return upper[:-1] + lower[:-1]


def graham_scan(points):
    """
    Angular sweep. Every other point is sorted clockwise around the lowest-left
    point (compare_by_angle_around), then pushed on a stack that pops while the
    top two and the next point fail to turn right.
    """
    pts = _distinct_points(points)
    pivot = min(pts, key=x_then_y_key)
    rest = [p for p in pts if p != pivot]
    rest.sort(key=cmp_to_key(lambda p, q: compare_by_angle_around(pivot, p, q)))

    stack = [pivot]
    for p in rest:
        while len(stack) >= 2 and not _is_right_turn(stack[-2], stack[-1], p):
            stack.pop()
        stack.append(p)

    return stack


HULL_ALGORITHMS = {
    "jarvis_march": jarvis_march,
    "monotone_chain": monotone_chain,
    "graham_scan": graham_scan,
}

_ALIASES = {
    "gift_wrapping": "jarvis_march",
    "angular_sweep": "graham_scan",
}

DEFAULT_HULL_ALGORITHM = "monotone_chain"


def convex_hull(points, algorithm: str = DEFAULT_HULL_ALGORITHM):
    """
    Convex hull by name. `algorithm` is a key of HULL_ALGORITHMS or one of the
    aliases "gift_wrapping" / "angular_sweep".
    """
    name = _ALIASES.get(algorithm, algorithm)
    try:
        fn = HULL_ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown hull algorithm {algorithm!r}; expected one of "
            f"{sorted(HULL_ALGORITHMS) + sorted(_ALIASES)}") from None

    hull = fn(points)
    logger.debug("%s: %d hull vertices", name, len(hull))
    return hull
