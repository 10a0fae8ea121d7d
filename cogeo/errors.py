"""
Exceptions raised by the geometry kernel.

Input problems derive from ``ValueError`` as well, so callers that only care about
"bad input" can catch that.
"""


class GeometryError(Exception):
    """Base class for every error raised on purpose by cogeo."""


class IllegalSegment(GeometryError, ValueError):
    """A segment of zero length was given to the intersection sweep."""


class DegeneratePolygon(GeometryError, ValueError):
    """Fewer than 3 points were given to an area computation."""


class InsufficientPoints(GeometryError, ValueError):
    """Not enough points to build the requested structure."""


class InvalidSplit(GeometryError, ValueError):
    """The half-edges given to split_face cannot be joined by a new diagonal."""


class MissingBoundary(GeometryError, ValueError):
    """The face has no outer boundary (the unbounded face)."""


class StructuralViolation(GeometryError):
    """A DCEL invariant is broken. The message names the first record that fails."""
