"""Exceptions raised by the tile merge engine."""


class TileMergeError(Exception):
    """Base class for every error raised by this package."""


class InvariantViolation(TileMergeError, ValueError):
    """A board or tile breaks the bounds, uniqueness or value invariants."""


class UnrecognizedDirection(TileMergeError, ValueError):
    """A value that is not one of the four slide directions."""


class UnrecognizedIntent(TileMergeError, TypeError):
    """The dispatcher received an intent kind it does not implement."""
