from cogeo.DCEL.geometry import Point


class Vertex:
    def __init__(self, index: int, point: Point):
        self.index = index
        self.point = point
        self.incident_edge = None  # index of any half-edge whose origin is this vertex

    @property
    def x(self):
        return self.point.x

    @property
    def y(self):
        return self.point.y

    def __repr__(self):
        return f"Vertex({self.index}, {self.point.x}, {self.point.y})"
