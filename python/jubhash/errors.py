class JubHashError(Exception):
    pass


class InvalidCurvePoint(JubHashError, ValueError):
    """A point does not satisfy the twisted Edwards curve equation."""

    def __init__(self, point, message=None):
        self.point = point
        super().__init__(message or "Point {} is not on the curve.".format(point))


class InputTooLong(JubHashError, ValueError):
    """The padded input needs more generators than the table provides."""

    def __init__(self, triples, capacity):
        self.triples = triples
        self.capacity = capacity
        super().__init__(
            "Input of {} triples exceeds the capacity of {} triples ({} bits).".format(
                triples, capacity, 3 * capacity
            )
        )
