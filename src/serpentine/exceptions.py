"""Exception hierarchy for Serpentine.

Geometric degeneracy (nested circles, coincident centers, zero-length drags)
is a normal outcome of the geometry core and never raises. These exceptions
cover malformed values and scene files.
"""


class SerpentineError(Exception):
    """Base exception for all Serpentine errors."""

    pass


class GeometryError(SerpentineError):
    """Errors in geometric input values."""

    pass


class InvalidCircleError(GeometryError):
    """Circle with an unusable radius."""

    def __init__(self, circle_id: str, reason: str) -> None:
        self.circle_id = circle_id
        self.reason = reason
        super().__init__(f"Invalid circle '{circle_id}': {reason}")


class InvalidMirrorConfigError(GeometryError):
    """Mirror configuration outside its valid range."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid mirror configuration: {reason}")


class SegmentFormatError(SerpentineError):
    """Serialized segment that cannot be decoded."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid segment data: {details}")


class SceneError(SerpentineError):
    """Errors related to scene files read by the CLI."""

    pass


class SceneLoadError(SceneError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file with invalid content."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")
