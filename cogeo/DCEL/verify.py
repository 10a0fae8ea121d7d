from cogeo.errors import StructuralViolation


def _check_index(kind, index, arena, owner):
    if index is None:
        raise StructuralViolation(f"{owner} has no {kind}")
    if not 0 <= index < len(arena):
        raise StructuralViolation(f"{owner} refers to {kind} {index}, which does not exist")


def verify_dcel(dcel) -> bool:
    """
    Walk every half-edge, vertex and face of `dcel` and check:

    - twin.twin == e, twin != e, and next.prev == e, prev.next == e
    - every half-edge has an origin and an incident face
    - next starts where the twin starts (e ends where e.next begins)
    - every vertex has an incident edge that leaves it
    - every half-edge on a face's boundary cycles points back at that face
    - every half-edge lies on exactly one face boundary cycle

    Returns True, otherwise raises StructuralViolation for the first failure.
    Meant for tests and post-condition checks, not for hot paths.
    """
    edges = dcel.half_edges
    for he in edges:
        owner = f"Edge {he.index}"
        _check_index("twin", he.twin, edges, owner)
        _check_index("next", he.next, edges, owner)
        _check_index("prev", he.prev, edges, owner)
        _check_index("origin", he.origin, dcel.vertices, owner)
        _check_index("incident_face", he.incident_face, dcel.faces, owner)

    for he in edges:
        twin = edges[he.twin]
        if twin.index == he.index:
            raise StructuralViolation(f"Edge {he.index} is its own twin")
        if twin.twin != he.index:
            raise StructuralViolation(
                f"Edge {he.index} has twin {twin.index}, but the twin of {twin.index} is {twin.twin}")
        if edges[he.next].prev != he.index:
            raise StructuralViolation(
                f"Edge {he.index} has next {he.next}, but the prev of {he.next} is {edges[he.next].prev}")
        if edges[he.prev].next != he.index:
            raise StructuralViolation(
                f"Edge {he.index} has prev {he.prev}, but the next of {he.prev} is {edges[he.prev].next}")
        if edges[he.next].origin != twin.origin:
            raise StructuralViolation(
                f"Edge {he.index} ends at vertex {twin.origin}, but its next {he.next} "
                f"starts at vertex {edges[he.next].origin}")

    for v in dcel.vertices:
        owner = f"Vertex {v.index}"
        _check_index("incident_edge", v.incident_edge, edges, owner)
        if edges[v.incident_edge].origin != v.index:
            raise StructuralViolation(
                f"Vertex {v.index} has incident_edge {v.incident_edge}, "
                f"but its origin is {edges[v.incident_edge].origin}")

    seen = {}
    for face in dcel.faces:
        starts = list(face.inner_components)
        if face.outer_component is not None:
            starts.insert(0, face.outer_component)
        for start in starts:
            _check_index("boundary edge", start, edges, f"Face {face.index}")
            for e in dcel.boundary(start):
                if edges[e].incident_face != face.index:
                    raise StructuralViolation(
                        f"Edge {e} on the cycle starting at {start} has incident face "
                        f"{edges[e].incident_face}, not {face.index}")
                if e in seen:
                    raise StructuralViolation(
                        f"Edge {e} is on boundary cycles of both face {seen[e]} and face {face.index}")
                seen[e] = face.index

    if len(seen) != len(edges):
        orphan = next(he.index for he in edges if he.index not in seen)
        raise StructuralViolation(f"Edge {orphan} is not on the boundary of any face")

    return True
