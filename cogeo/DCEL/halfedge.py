class HalfEdge:
    """
    Directed edge record. Every reference is an integer index into the arenas of
    the owning DCEL, never the record itself.
    """

    def __init__(self, index: int):
        self.index = index
        self.origin = None            # vertex index
        self.twin = None              # half-edge index, opposite direction
        self.next = None              # next half-edge along the incident face
        self.prev = None              # previous half-edge along the incident face
        self.incident_face = None     # face index, the face on the left

    def __repr__(self):
        return (f"HalfEdge({self.index}, origin={self.origin}, twin={self.twin}, "
                f"next={self.next}, prev={self.prev}, face={self.incident_face})")
