"""Exception types raised by earclip."""


class TriangulationError(ValueError):
    """Base class for errors raised by earclip."""


class InvalidInputError(TriangulationError):
    """The polygon cannot be triangulated (too few vertices, malformed points)."""


class PolyFormatError(TriangulationError):
    """A .poly or .tri file could not be parsed."""

    def __init__(self, path, line: int, message: str):
        self.path = path
        self.line = line
        super().__init__(f"{path}:{line}: {message}")
