from cogeo.errors import DegeneratePolygon


def signed_area(points):
    """
    Shoelace signed area of a closed, non self-intersecting polygon.

    Sums (x_i + x_{i+1}) * (y_{i+1} - y_i) over consecutive vertices, wrapping
    around from the last vertex to the first, and halves the result.
    Counter-clockwise polygons give a positive area, clockwise ones negative.

    Parameters
    ----
    points : iterable of Point
        Consumed once, front to back; a generator is fine.

    Raises
    ----
    DegeneratePolygon
        If fewer than 3 points are supplied.
    """
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise DegeneratePolygon("Need at least 3 points to compute area, got 0.") from None

    last = first
    count = 1
    area = 0
    for point in it:
        area += (last.x + point.x) * (point.y - last.y)
        last = point
        count += 1

    if count < 3:
        raise DegeneratePolygon(f"Need at least 3 points to compute area, got {count}.")

    area += (last.x + first.x) * (first.y - last.y)
    return area / 2


def unsigned_area(points):
    return abs(signed_area(points))


def is_counter_clockwise(points) -> bool:
    """Zero-area (degenerate) input counts as counter-clockwise."""
    return signed_area(points) >= 0
