import logging
import math

import matplotlib.pyplot as plt

from cogeo.Algorithms.polygon_area import signed_area, unsigned_area
from cogeo.DCEL.face import Face
from cogeo.DCEL.geometry import as_point, as_points, midpoint
from cogeo.DCEL.halfedge import HalfEdge
from cogeo.DCEL.vertex import Vertex
from cogeo.DCEL.verify import verify_dcel
from cogeo.errors import InsufficientPoints, InvalidSplit, MissingBoundary, StructuralViolation

logger = logging.getLogger(__name__)


class DCEL:
    """
    Doubly connected edge list over three index-addressed arenas. Also
    importable as PlanarSubdivision, the name used for it in the geometry
    kernel's interface; both names refer to this class.

    Vertices, half-edges and faces are only ever appended, so an index stays
    valid for the lifetime of the structure. Records refer to each other by
    index only. Half-edges are created in twin pairs: pair k is stored at
    indices 2k and 2k + 1.

    Not safe for concurrent mutation. Read-only queries may run concurrently
    with each other.
    """

    def __init__(self):
        self.vertices = []
        self.half_edges = []
        self.faces = []

    # ------------------------------------------------------------------
    # arenas
    # ------------------------------------------------------------------
    def create_vertex(self, point) -> int:
        v = Vertex(len(self.vertices), as_point(point))
        self.vertices.append(v)
        return v.index

    def create_face(self) -> int:
        face = Face(len(self.faces))
        self.faces.append(face)
        return face.index

    def create_twin_edge_pair(self):
        """Append two half-edges that are each other's twin. Everything else is unset."""
        first = HalfEdge(len(self.half_edges))
        second = HalfEdge(first.index + 1)
        first.twin = second.index
        second.twin = first.index
        self.half_edges.append(first)
        self.half_edges.append(second)
        return first.index, second.index

    def vertex(self, index: int) -> Vertex:
        return self.vertices[index]

    def half_edge(self, index: int) -> HalfEdge:
        return self.half_edges[index]

    def face(self, index: int) -> Face:
        return self.faces[index]

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_simple_polygon(cls, points) -> "DCEL":
        """
        Two-face subdivision of a simple polygon.

        Face 0 is the unbounded face, face 1 the polygon's interior. Vertex i
        holds points[i]. The interior cycle runs counter-clockwise whatever the
        input orientation, so the interior is on the left of each of its
        half-edges; the outer cycle runs the other way.

        Raises
        ----
        InsufficientPoints
            If fewer than 3 points are given.
        """
        points = as_points(points)
        n = len(points)
        if n < 3:
            raise InsufficientPoints(f"A polygon needs at least 3 points, got {n}.")

        dcel = cls()
        outer_face = dcel.create_face()
        inner_face = dcel.create_face()
        vertices = [dcel.create_vertex(p) for p in points]

        if signed_area(points) >= 0:
            order = list(range(n))
        else:
            order = [0] + list(range(n - 1, 0, -1))

        inner_edges = []
        outer_edges = []
        for i in range(n):
            a = vertices[order[i]]
            b = vertices[order[(i + 1) % n]]
            inner, outer = dcel.create_twin_edge_pair()

            # inner runs a -> b, its twin b -> a
            dcel.half_edges[inner].origin = a
            dcel.half_edges[inner].incident_face = inner_face
            dcel.half_edges[outer].origin = b
            dcel.half_edges[outer].incident_face = outer_face
            dcel.vertices[a].incident_edge = inner

            inner_edges.append(inner)
            outer_edges.append(outer)

        for i in range(n):
            he_in = dcel.half_edges[inner_edges[i]]
            he_in.next = inner_edges[(i + 1) % n]
            he_in.prev = inner_edges[i - 1]

            he_out = dcel.half_edges[outer_edges[i]]
            he_out.next = outer_edges[i - 1]
            he_out.prev = outer_edges[(i + 1) % n]

        dcel.faces[inner_face].outer_component = inner_edges[0]
        dcel.faces[outer_face].inner_components.append(outer_edges[0])

        logger.debug("DCEL from polygon: %d vertices, %d half-edges, %d faces",
                     len(dcel.vertices), len(dcel.half_edges), len(dcel.faces))
        return dcel

    # ------------------------------------------------------------------
    # traversal
    # ------------------------------------------------------------------
    def boundary(self, start: int):
        """
        Lazily walk the cycle through `start` along `next`, yielding half-edge
        indices. `start` comes first and the walk ends when it comes back.
        Each call restarts from `start`.
        """
        limit = len(self.half_edges)
        e = start
        for _ in range(limit):
            yield e
            e = self.half_edges[e].next
            if e == start:
                return
        raise StructuralViolation(
            f"Cycle starting at half-edge {start} does not close within {limit} steps")

    def boundary_vertices(self, start: int):
        for e in self.boundary(start):
            yield self.half_edges[e].origin

    def outgoing_edges(self, vertex: int):
        """Half-edges leaving `vertex`, found by rotating through twin.next."""
        start = self.vertices[vertex].incident_edge
        if start is None:
            return
        limit = len(self.half_edges)
        e = start
        for _ in range(limit):
            yield e
            e = self.half_edges[self.half_edges[e].twin].next
            if e == start:
                return
        raise StructuralViolation(
            f"Edges around vertex {vertex} do not close within {limit} steps")

    def destination(self, edge: int) -> int:
        return self.half_edges[self.half_edges[edge].twin].origin

    def find_half_edge(self, u: int, v: int):
        """Half-edge from vertex u to vertex v, or None."""
        for e in self.outgoing_edges(u):
            if self.destination(e) == v:
                return e
        return None

    def enumerate_half_edges(self, face: int):
        """Half-edges on the outer boundary of `face`."""
        return list(self.boundary(self._outer_component(face)))

    def enumerate_vertices(self, face: int):
        return list(self.boundary_vertices(self._outer_component(face)))

    def _outer_component(self, face: int) -> int:
        edge = self.faces[face].outer_component
        if edge is None:
            raise MissingBoundary(f"Face {face} has no outer boundary")
        return edge

    def _cycle_points(self, start: int):
        return (self.vertices[v].point for v in self.boundary_vertices(start))

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------
    def split_face(self, edge_a: int, edge_b: int):
        """
        Split the face on the left of edge_a and edge_b with a new diagonal from
        origin(edge_a) to origin(edge_b).

        Precondition, not checked: the diagonal does not cross any existing
        edge. Test it with the segment intersection sweep first if that is not
        known. Holes of the split face stay with the original face.

        When the split runs along the face's outer boundary, the cycle through
        edge_b moves to the new face. When it runs along a hole boundary (always
        the case for the unbounded face), the new face takes whichever cycle is
        counter-clockwise, i.e. the bounded pocket.

        Returns
        ----
        (old_edge, new_edge, new_face)
            The new twin pair and the new face. old_edge bounds the original
            face, new_edge bounds the new one.

        Raises
        ----
        InvalidSplit
            If the half-edges are on different faces or different cycles, share
            an origin, or their origins are already joined by an edge.
        """
        he_a = self.half_edges[edge_a]
        he_b = self.half_edges[edge_b]
        if he_a.incident_face != he_b.incident_face:
            raise InvalidSplit(
                f"Half-edges {edge_a} and {edge_b} bound different faces "
                f"({he_a.incident_face} and {he_b.incident_face})")
        if he_a.origin == he_b.origin:
            raise InvalidSplit(f"Half-edges {edge_a} and {edge_b} share origin vertex {he_a.origin}")
        if self.find_half_edge(he_a.origin, he_b.origin) is not None:
            raise InvalidSplit(f"Vertices {he_a.origin} and {he_b.origin} are already joined by an edge")

        cycle = set(self.boundary(edge_a))
        if edge_b not in cycle:
            raise InvalidSplit(f"Half-edges {edge_a} and {edge_b} are on different boundary cycles")

        face_index = he_a.incident_face
        face = self.faces[face_index]
        a_prev = he_a.prev
        b_prev = he_b.prev

        # closes the cycle through edge_a: origin(b) -> origin(a)
        # and the one through edge_b:     origin(a) -> origin(b)
        edge_ba, edge_ab = self.create_twin_edge_pair()
        he_ba = self.half_edges[edge_ba]
        he_ab = self.half_edges[edge_ab]

        he_ba.origin = he_b.origin
        he_ba.next = edge_a
        he_ba.prev = b_prev
        he_a.prev = edge_ba
        self.half_edges[b_prev].next = edge_ba

        he_ab.origin = he_a.origin
        he_ab.next = edge_b
        he_ab.prev = a_prev
        he_b.prev = edge_ab
        self.half_edges[a_prev].next = edge_ab

        on_outer = face.outer_component in cycle
        old_edge, new_edge = edge_ba, edge_ab
        if not on_outer and signed_area(self._cycle_points(new_edge)) <= 0:
            old_edge, new_edge = new_edge, old_edge

        new_face = self.create_face()
        self.faces[new_face].outer_component = new_edge
        for e in self.boundary(new_edge):
            self.half_edges[e].incident_face = new_face
        self.half_edges[old_edge].incident_face = face_index

        if on_outer:
            face.outer_component = old_edge
        else:
            face.inner_components = [h for h in face.inner_components if h not in cycle]
            face.inner_components.append(old_edge)

        logger.debug("split face %d with diagonal %d -> %d into faces %d and %d",
                     face_index, he_a.origin, he_b.origin, face_index, new_face)
        return old_edge, new_edge, new_face

    def connect_vertices(self, face: int, u: int, v: int):
        """
        split_face for two vertices on the boundary of `face`.

        Raises
        ----
        InvalidSplit
            If u or v is not on the boundary of the face.
        """
        f = self.faces[face]
        starts = list(f.inner_components)
        if f.outer_component is not None:
            starts.insert(0, f.outer_component)

        edge_u = edge_v = None
        for start in starts:
            for e in self.boundary(start):
                origin = self.half_edges[e].origin
                if origin == u and edge_u is None:
                    edge_u = e
                elif origin == v and edge_v is None:
                    edge_v = e
        if edge_u is None or edge_v is None:
            missing = u if edge_u is None else v
            raise InvalidSplit(f"Vertex {missing} is not on the boundary of face {face}")
        return self.split_face(edge_u, edge_v)

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------
    def polygon_of(self, face: int):
        """
        Points of the outer boundary of `face`, in cycle order.

        Raises
        ----
        MissingBoundary
            If the face is the unbounded face.
        """
        return list(self._cycle_points(self._outer_component(face)))

    def area_of(self, face: int):
        return unsigned_area(self._cycle_points(self._outer_component(face)))

    def bounded_faces(self):
        return [f.index for f in self.faces if not f.is_unbounded()]

    def polygons(self):
        return [self.polygon_of(f) for f in self.bounded_faces()]

    def verify(self) -> bool:
        """True, or StructuralViolation naming the first broken invariant."""
        return verify_dcel(self)

    def is_valid(self) -> bool:
        try:
            return self.verify()
        except StructuralViolation as exc:
            logger.debug("DCEL invalid: %s", exc)
            return False

    # ------------------------------------------------------------------
    # drawing
    # ------------------------------------------------------------------
    def draw(self, show=True, ax=None,
             label_vertices=True,
             label_faces=True,
             draw_halfedges=True):
        """
        Plot bounded faces, vertices and half-edge directions with matplotlib.
        Returns the axes.
        """
        if ax is None:
            plt.figure()
            ax = plt.gca()

        cmap = plt.get_cmap('tab10')
        face_color = cmap(2)
        vertex_color = cmap(0)
        arrow_color = cmap(1)

        for idx in self.bounded_faces():
            pts = self.polygon_of(idx)
            xs = [float(p.x) for p in pts] + [float(pts[0].x)]
            ys = [float(p.y) for p in pts] + [float(pts[0].y)]
            ax.plot(xs, ys, color=face_color, lw=2, zorder=1)
            if label_faces:
                c = midpoint(pts)
                ax.text(float(c.x), float(c.y), f"{idx}", color="magenta",
                        fontsize=12, ha="center", va="center",
                        bbox=dict(facecolor='white', alpha=0.5, edgecolor='none'))

        for v in self.vertices:
            ax.plot(float(v.x), float(v.y), marker='o', color=vertex_color, zorder=2)
            if label_vertices:
                ax.text(float(v.x) + 0.02, float(v.y) + 0.02, f"{v.index}", color="blue", fontsize=10)

        if draw_halfedges:
            for he in self.half_edges:
                if he.next is None or he.origin is None:
                    continue
                p = self.vertices[he.origin].point
                q = self.vertices[self.half_edges[he.next].origin].point
                x1, y1, x2, y2 = float(p.x), float(p.y), float(q.x), float(q.y)
                dx, dy = x2 - x1, y2 - y1
                length = math.hypot(dx, dy)
                if length == 0:
                    continue
                # shift toward the incident face so twins do not overlap
                nx, ny = -dy / length, dx / length
                offset = 0.03 * length
                mid_x = (x1 + x2) / 2.0 + nx * offset
                mid_y = (y1 + y2) / 2.0 + ny * offset
                arrow_len = length * 0.3
                ax.arrow(mid_x, mid_y, dx / length * arrow_len, dy / length * arrow_len,
                         head_width=0.02, head_length=0.03,
                         fc=arrow_color, ec=arrow_color, zorder=3)

        ax.axis('equal')
        ax.set_title("DCEL")
        if show:
            plt.show()
        return ax

    def __repr__(self):
        return (f"DCEL(vertices={len(self.vertices)}, half_edges={len(self.half_edges)}, "
                f"faces={len(self.faces)})")


PlanarSubdivision = DCEL
