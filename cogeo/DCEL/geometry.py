from enum import Enum


class TurnDirection(Enum):
    LEFT_TURN = 1
    RIGHT_TURN = -1
    NO_TURN = 0


class Point:
    """
    A 2D point. Coordinates can be any ordered-field number (float, Fraction,
    Decimal, numpy scalars); nothing here rounds or uses a tolerance.
    """

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def coord(self):
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point({self.x}, {self.y})"


def as_point(p) -> Point:
    """Accept a Point, an (x, y) tuple/list or a numpy row."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


def as_points(points):
    return [as_point(p) for p in points]


def cross_product(p, q, r):
    """
    Cross product of (q - p) and (r - p):

          | p.x p.y 1 |
          | q.x q.y 1 | = (q.x - p.x)*(r.y - p.y) - (q.y - p.y)*(r.x - p.x)
          | r.x r.y 1 |

    > 0 : r is to the left of the directed line p->q
    = 0 : p, q, r are collinear
    < 0 : r is to the right
    """
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def orientation(pivot, a, b) -> TurnDirection:
    """
    Turn made by pivot -> a -> b. The zero test is exact.

    Every directional decision in the hull, sweep and DCEL code goes through
    this function so that ties are broken the same way everywhere.
    """
    det = cross_product(pivot, a, b)
    if det > 0:
        return TurnDirection.LEFT_TURN
    if det < 0:
        return TurnDirection.RIGHT_TURN
    return TurnDirection.NO_TURN


def compare_x_then_y(p, q) -> int:
    """Total order by x, ties broken by y. Returns -1, 0 or 1."""
    if p.x != q.x:
        return -1 if p.x < q.x else 1
    if p.y != q.y:
        return -1 if p.y < q.y else 1
    return 0


def x_then_y_key(p):
    return (p.x, p.y)


def compare_by_angle_around(pivot, p, q) -> int:
    """
    Order p and q by polar angle around pivot, clockwise first.

    q counter-clockwise of p (left turn) means p sorts after q. Collinear points
    fall back to compare_x_then_y, so points along one ray come out nearest
    first as long as the pivot is the x-then-y minimum of the set.
    """
    turn = orientation(pivot, p, q)
    if turn is TurnDirection.LEFT_TURN:
        return 1
    if turn is TurnDirection.RIGHT_TURN:
        return -1
    return compare_x_then_y(p, q)


def squared_distance(p, q):
    dx = p.x - q.x
    dy = p.y - q.y
    return dx * dx + dy * dy


def midpoint(points):
    """
    Average of a sequence of points.
    """
    sum_x = 0
    sum_y = 0
    num = 0
    for p in points:
        sum_x += p.x
        sum_y += p.y
        num += 1
    return Point(sum_x / num, sum_y / num)


class Segment:
    """
    Line segment between p1 and p2.

    Containment and intersection ignore direction, but (p1, p2) order is kept
    for equality and hashing.
    """

    def __init__(self, p1, p2):
        self.p1 = as_point(p1)
        self.p2 = as_point(p2)

    @property
    def left(self) -> Point:
        """Endpoint that is smaller under compare_x_then_y."""
        return self.p1 if compare_x_then_y(self.p1, self.p2) <= 0 else self.p2

    @property
    def right(self) -> Point:
        return self.p2 if compare_x_then_y(self.p1, self.p2) <= 0 else self.p1

    def is_degenerate(self) -> bool:
        return self.p1 == self.p2

    def is_vertical(self) -> bool:
        return self.p1.x == self.p2.x

    def _in_bounds(self, p) -> bool:
        return (min(self.p1.x, self.p2.x) <= p.x <= max(self.p1.x, self.p2.x)
                and min(self.p1.y, self.p2.y) <= p.y <= max(self.p1.y, self.p2.y))

    def contains_point(self, p) -> bool:
        """
        True if p lies on the segment.

        p must fall inside the bounding box and its parametric position along x
        must equal the one along y. An axis with zero extent is satisfied by the
        bounding box check alone.
        """
        p = as_point(p)
        if not self._in_bounds(p):
            return False

        range_x = self.p2.x - self.p1.x
        range_y = self.p2.y - self.p1.y
        if range_x == 0 or range_y == 0:
            return True
        return (p.x - self.p1.x) / range_x == (p.y - self.p1.y) / range_y

    def intersects(self, other) -> bool:
        """
        True if the segments share at least one point.

        Either the endpoints of each segment lie on different sides of the
        other's supporting line (touching counts, NO_TURN differs from a turn),
        or both segments are collinear and one holds an endpoint of the other.
        """
        d1 = orientation(self.p1, self.p2, other.p1)
        d2 = orientation(self.p1, self.p2, other.p2)
        if d1 is TurnDirection.NO_TURN and d2 is TurnDirection.NO_TURN:
            return (self._in_bounds(other.p1) or self._in_bounds(other.p2)
                    or other._in_bounds(self.p1) or other._in_bounds(self.p2))

        d3 = orientation(other.p1, other.p2, self.p1)
        d4 = orientation(other.p1, other.p2, self.p2)
        return d1 is not d2 and d3 is not d4

    def intersection_point(self, other):
        """
        Intersection point with another segment, or None.

        Collinear overlapping segments only yield a representative: the start of
        the overlap (the larger of the two left endpoints). Use contains_point to
        recover the whole overlapping range.
        """
        if not self.intersects(other):
            return None

        if (orientation(self.p1, self.p2, other.p1) is TurnDirection.NO_TURN
                and orientation(self.p1, self.p2, other.p2) is TurnDirection.NO_TURN):
            a, b = self.left, other.left
            return a if compare_x_then_y(a, b) >= 0 else b

        # endpoint on the other supporting line: it is the crossing, keep it exact
        for q in (other.p1, other.p2):
            if orientation(self.p1, self.p2, q) is TurnDirection.NO_TURN:
                return q
        for q in (self.p1, self.p2):
            if orientation(other.p1, other.p2, q) is TurnDirection.NO_TURN:
                return q

        rx = self.p2.x - self.p1.x
        ry = self.p2.y - self.p1.y
        sx = other.p2.x - other.p1.x
        sy = other.p2.y - other.p1.y
        denom = rx * sy - ry * sx
        t = ((other.p1.x - self.p1.x) * sy - (other.p1.y - self.p1.y) * sx) / denom
        return Point(self.p1.x + t * rx, self.p1.y + t * ry)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    def __hash__(self):
        return hash((self.p1, self.p2))

    def __repr__(self):
        return f"Segment({self.p1}, {self.p2})"
