"""Typed failures raised by the card layout engine and its collaborators."""


class CardLayoutError(ValueError):
    """Base class for rejected layout inputs."""


class InvalidGeometry(CardLayoutError):
    """Page dimensions are not positive, not finite, or use an unknown unit."""


class InvalidImageSpec(CardLayoutError):
    """Artwork intrinsic dimensions are not positive."""


class InvalidMessageSpec(CardLayoutError):
    """Message uses an unrecognized font tier or a negative inset."""


class ArtworkLoadError(RuntimeError):
    """The artwork could not be fetched or decoded."""
