import numpy as np

from cogeo.DCEL.geometry import Point, Segment


def _rng(seed):
    return np.random.default_rng(seed)


def random_points_in_square(n, low=0.0, high=1.0, seed=None):
    """
    n points drawn uniformly from the square [low, high) x [low, high).
    """
    xy = _rng(seed).uniform(low, high, size=(n, 2))
    return [Point(float(x), float(y)) for x, y in xy]


def random_points_in_triangle(n, A, B, C, seed=None):
    """
    n points uniformly inside triangle ABC.

    (u, v) pairs with u + v > 1 are reflected back into the lower triangle
    before the affine combination A + u (B - A) + v (C - A).
    """
    rng = _rng(seed)
    A, B, C = (np.asarray(tuple(p), dtype=float) for p in (A, B, C))
    u = rng.random(n)
    v = rng.random(n)
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    xy = A + u[:, None] * (B - A) + v[:, None] * (C - A)
    return [Point(float(x), float(y)) for x, y in xy]


def random_segments(n, low=0.0, high=1.0, seed=None, integer=False):
    """
    n segments with both endpoints uniform in the square; zero-length draws are
    redrawn. With `integer`, endpoints are ints on the grid low..high-1, which
    gives plenty of shared endpoints, T-junctions and collinear overlaps.
    """
    rng = _rng(seed)
    segments = []
    while len(segments) < n:
        if integer:
            x1, y1, x2, y2 = (int(v) for v in rng.integers(low, high, size=4))
        else:
            x1, y1, x2, y2 = (float(v) for v in rng.uniform(low, high, size=4))
        if x1 == x2 and y1 == y2:
            continue
        segments.append(Segment(Point(x1, y1), Point(x2, y2)))
    return segments


def regular_polygon(n, radius=1.0, center=(0.0, 0.0), clockwise=False):
    """Vertices of a regular n-gon, counter-clockwise unless `clockwise`."""
    angles = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    if clockwise:
        angles = -angles
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def star_polygon(n, outer=1.0, inner=0.4, center=(0.0, 0.0)):
    """
    Simple, non-convex star with n spikes (2n vertices, counter-clockwise),
    alternating between the outer and inner radius.
    """
    angles = np.linspace(0.0, 2.0 * np.pi, 2 * n, endpoint=False)
    radii = np.where(np.arange(2 * n) % 2 == 0, outer, inner)
    xs = center[0] + radii * np.cos(angles)
    ys = center[1] + radii * np.sin(angles)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
