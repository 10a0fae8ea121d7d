class Face:
    def __init__(self, index: int):
        self.index = index
        self.outer_component = None   # half-edge on the outer boundary; None for the unbounded face
        self.inner_components = []    # one half-edge per hole boundary

    def is_unbounded(self) -> bool:
        return self.outer_component is None

    def __repr__(self):
        return (f"Face({self.index}, outer_component={self.outer_component}, "
                f"inner_components={self.inner_components})")
