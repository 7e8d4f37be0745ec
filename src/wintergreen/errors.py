class WintergreenError(Exception):
    """Base class for all library errors."""


class InvalidArgument(WintergreenError, ValueError):
    """Generation parameters are malformed (negative length, inverted range)."""


class MarkerConflict(InvalidArgument):
    """A field carries more than one generation marker."""


class ConstructionFailure(WintergreenError):
    """The target type cannot be default-constructed or populated."""
