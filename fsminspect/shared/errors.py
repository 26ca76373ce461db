class InspectionError(ValueError):
    """Caller misuse of the engine. Bad document data never raises."""


class RowIndexError(InspectionError, IndexError):
    def __init__(self, index: int, size: int, what: str = "row"):
        super().__init__(f"{what} index {index} out of range 0..{size - 1}")
        self.index = index
        self.size = size
