class LevelOutOfRange(ValueError):
    """Raised when a level outside 1..MAX_LEVEL is requested programmatically."""


class InvalidViewport(ValueError):
    """Raised when a viewport is built with a non-positive width or height."""
