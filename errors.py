class ConfigurationError(ValueError):
    """Raised for world generation settings that cannot produce a world."""


class TileBoundsError(IndexError):
    """Raised when a tile position falls outside the world grid."""

    def __init__(self, position, size):
        self.position = position
        self.size = size
        super().__init__(f"tile position {position} outside world of size {size}")
