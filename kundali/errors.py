"""Exception types raised by the kundali core."""


class KundaliError(Exception):
    """Base class for chart computation errors."""


class ValidationError(KundaliError, ValueError):
    """Required birth details are missing."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Birth details are incomplete: missing {', '.join(self.missing)}")


class ComputationFailure(KundaliError, ArithmeticError):
    """A numeric step degenerated (e.g. ascendant at the poles)."""
