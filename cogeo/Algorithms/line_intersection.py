"""
Intersection points of a set of line segments.

bentley_ottmann is a plane sweep from left to right. brute_force_intersections
tests every pair and is kept as a reference; both report the same point set.

The sweep takes every ordering decision (event order, status order, which
segments pass through an event point) on exact rational copies of the input
coordinates, so rounding never reorders segments. The reported points are
computed from the caller's own segments, pair by pair, with
Segment.intersection_point, the same call the brute-force method makes.
"""
import heapq
import logging
import numbers
from decimal import Decimal
from fractions import Fraction
from functools import cmp_to_key

from cogeo.DCEL.geometry import (
    Point,
    Segment,
    TurnDirection,
    compare_x_then_y,
    orientation,
    x_then_y_key,
)
from cogeo.errors import IllegalSegment

logger = logging.getLogger(__name__)


def _as_segments(segments):
    result = []
    for idx, seg in enumerate(segments):
        if not isinstance(seg, Segment):
            seg = Segment(*seg)
        if seg.is_degenerate():
            raise IllegalSegment(f"Segment {idx} has zero length: {seg}")
        result.append(seg)
    return result


def _exact(value) -> Fraction:
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return Fraction(value)
    # e.g. numpy.float32, which Fraction does not take directly
    return Fraction(float(value))


def _exact_segment(seg) -> Segment:
    return Segment(Point(_exact(seg.p1.x), _exact(seg.p1.y)),
                   Point(_exact(seg.p2.x), _exact(seg.p2.y)))


class SweepLineStatus:
    """
    Segments currently cut by the sweep line, ordered bottom to top just to the
    right of the last event point.

    The order is kept between events and only changed locally: at an event
    point the segments passing through it are taken out and the ones that
    continue are put back in their order to the right of that point.
    """

    def __init__(self, segments):
        self._segments = segments
        self._active = []

    def __len__(self):
        return len(self._active)

    def __iter__(self):
        return iter(self._active)

    def side_of(self, p, idx) -> int:
        """1 if p is above segment idx, -1 if below, 0 if p lies on it."""
        seg = self._segments[idx]
        left, right = seg.left, seg.right
        if seg.is_vertical():
            # a vertical segment is only active while the sweep is on its x
            if p.y < left.y:
                return -1
            if p.y > right.y:
                return 1
            return 0
        turn = orientation(left, right, p)
        if turn is TurnDirection.LEFT_TURN:
            return 1
        if turn is TurnDirection.RIGHT_TURN:
            return -1
        return 0

    def locate(self, p):
        """
        (lo, hi) with the active segments through p at positions lo..hi-1.
        When no segment passes through p, lo == hi is where p falls.
        """
        lo, hi = 0, len(self._active)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.side_of(p, self._active[mid]) > 0:
                lo = mid + 1
            else:
                hi = mid

        end, hi = lo, len(self._active)
        while end < hi:
            mid = (end + hi) // 2
            if self.side_of(p, self._active[mid]) >= 0:
                end = mid + 1
            else:
                hi = mid
        return lo, end

    def block(self, lo, hi):
        return self._active[lo:hi]

    def replace(self, lo, hi, block):
        self._active[lo:hi] = block

    def neighbor(self, pos):
        if 0 <= pos < len(self._active):
            return self._active[pos]
        return None


def order_right_of(p, indices, segments):
    """
    Sort segments that pass through p (and go on past it) bottom to top just to
    the right of p. A vertical segment comes last; segments on the same line
    keep index order.
    """
    def compare(a, b):
        turn = orientation(p, segments[a].right, segments[b].right)
        if turn is TurnDirection.LEFT_TURN:
            return -1
        if turn is TurnDirection.RIGHT_TURN:
            return 1
        return (a > b) - (a < b)

    return sorted(indices, key=cmp_to_key(compare))


def bentley_ottmann(segments):
    """
    Plane sweep for all intersection points.

    Event points are the segment endpoints plus every crossing found between
    two segments that become neighbours in the status. They are visited in
    compare_x_then_y order. At an event point p:

    - the segments through p are located in the status, together with the
      segments starting at p; every pair among them meets at p and is reported,
    - segments ending at p leave the status,
    - segments starting at p or crossing through it are put back in their
      order just right of p, which reverses crossing segments in place,
    - only the new outermost neighbour pairs are tested, and a crossing to the
      right of p becomes a new event point.

    Returns
    ----
    list[Point]
        Distinct intersection points sorted by x then y.

    Raises
    ----
    IllegalSegment
        If any segment has zero length.
    """
    segs = _as_segments(segments)
    exact = [_exact_segment(s) for s in segs]

    queue = []
    queued = set()
    starts = {}

    def schedule(p):
        if p not in queued:
            queued.add(p)
            heapq.heappush(queue, (p.x, p.y))

    for idx, seg in enumerate(exact):
        starts.setdefault(seg.left, []).append(idx)
        schedule(seg.left)
        schedule(seg.right)

    status = SweepLineStatus(exact)
    reported = set()
    found = {}
    events = 0
    tests = 0

    def report(a, b):
        pair = (a, b) if a < b else (b, a)
        if pair in reported:
            return
        reported.add(pair)
        p = segs[pair[0]].intersection_point(segs[pair[1]])
        if p is not None:
            found[p] = None

    def test_pair(a, b, sweep):
        nonlocal tests
        if a is None or b is None:
            return
        tests += 1
        q = exact[a].intersection_point(exact[b])
        # a meeting at or behind the sweep point was reported there already
        if q is not None and compare_x_then_y(q, sweep) > 0:
            schedule(q)

    while queue:
        x, y = heapq.heappop(queue)
        sweep = Point(x, y)
        events += 1

        lo, hi = status.locate(sweep)
        through = status.block(lo, hi)
        started = starts.get(sweep, [])

        involved = started + through
        for i in range(len(involved)):
            for j in range(i + 1, len(involved)):
                report(involved[i], involved[j])

        continuing = [idx for idx in through if exact[idx].right != sweep]
        block = order_right_of(sweep, started + continuing, exact)
        status.replace(lo, hi, block)

        if block:
            test_pair(status.neighbor(lo - 1), block[0], sweep)
            test_pair(block[-1], status.neighbor(lo + len(block)), sweep)
        else:
            # the segments on either side of the removed ones are now neighbours
            test_pair(status.neighbor(lo - 1), status.neighbor(lo), sweep)

    logger.debug("sweep: %d segments, %d event points, %d neighbour tests, %d points",
                 len(segs), events, tests, len(found))
    return sorted(found, key=x_then_y_key)


def brute_force_intersections(segments):
    """Pairwise O(n^2) reference. Same output contract as bentley_ottmann."""
    segs = _as_segments(segments)
    found = {}
    for i in range(len(segs)):
        for j in range(i + 1, len(segs)):
            p = segs[i].intersection_point(segs[j])
            if p is not None:
                found[p] = None
    return sorted(found, key=x_then_y_key)


INTERSECTION_METHODS = {
    "sweep": bentley_ottmann,
    "brute_force": brute_force_intersections,
}


def find_intersections(segments, method: str = "sweep"):
    try:
        fn = INTERSECTION_METHODS[method]
    except KeyError:
        raise ValueError(
            f"Unknown intersection method {method!r}; expected one of "
            f"{sorted(INTERSECTION_METHODS)}") from None
    return fn(segments)
