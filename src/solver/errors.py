class SeatingError(Exception):
    """Base class for every failure the seating solver reports to its caller."""
    kind = "SeatingError"

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        return {"error": self.kind, "detail": self.message, **self.details}


class UnsatisfiableAssignment(SeatingError):
    kind = "UnsatisfiableAssignment"


class InsufficientCapacity(UnsatisfiableAssignment):
    """Fewer seats than people: no search can succeed, so it never starts."""
    kind = "InsufficientCapacity"


class PinnedSeatConflict(SeatingError):
    kind = "PinnedSeatConflict"


class InternalConsistencyError(SeatingError):
    kind = "InternalConsistencyError"
