"""
Error types for Prefab Shapes.

Every failure while building a shape is reported through one of these
exceptions; no builder ever returns a fallback or partial mesh.
"""


class ShapeCreationError(Exception):
    """Base class for all shape building failures."""
    pass


class ConfigurationError(ShapeCreationError):
    """Raised when builder parameters are invalid (detected before generation)."""
    pass


class NotEnoughDivisionsError(ConfigurationError):
    """
    Raised when a resolution parameter is below its minimum.

    Attributes:
        parameter: Name of the resolution parameter (e.g. 'longitude_segments')
        value: The rejected value
        minimum: Smallest accepted value
    """

    def __init__(self, parameter: str, value, minimum: int):
        self.parameter = parameter
        self.value = value
        self.minimum = minimum
        super().__init__(
            f"Not enough divisions: {parameter}={value} (minimum {minimum})"
        )


class InvalidTransformError(ConfigurationError):
    """Raised for a degenerate scale, non-finite translation or non-rotation orientation."""
    pass


class UploadError(ShapeCreationError):
    """Raised by a render adapter when a mesh cannot be uploaded."""
    pass


class BuilderSpentError(ShapeCreationError):
    """Raised when a builder is used after it has produced its mesh."""
    pass
