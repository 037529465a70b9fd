"""
Exception hierarchy shared by the geometry core and its hosts.
"""


class LathFrameError(Exception):
    """Base class for all lathframe errors."""


class SilhouetteError(LathFrameError):
    """The silhouette cannot be built from the current control primitives.

    Hosts abort the whole recompute pass and keep the previous valid design.
    """


class DegenerateTangentError(SilhouetteError):
    """Two circles overlap, touch or are nested, so no tangent exists."""

    def __init__(self, link: str) -> None:
        super().__init__(f"No tangent exists for the {link} (circles overlap, touch or are nested).")
        self.link = link


class SilhouetteOrientationError(SilhouetteError):
    """An arc sweeps against the direction its link requires.

    This happens when the foot point is not below the leg circle or the head point
    is not above the back circle.
    """


class InvalidConfigurationError(LathFrameError, ValueError):
    """A caller passed a non-positive radius, lath dimension or piece dimension."""
