"""
Configuration & Global Constants
================================
This module serves as the central registry for the drawing constants and the
user-adjustable layout settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents canvas sizes, handle radii and lath defaults from
   being scattered across the geometry core and the Qt widgets.
2. Validation: `LayoutConfig.validate` is the single place where caller
   contract violations on lath and lintel dimensions are detected.

Exports:
    CANVAS_WIDTH, CANVAS_HEIGHT (float): Drawing surface extent in millimeters.
    CANVAS_SCALE (float): Millimeters per screen pixel.
    LayoutConfig: Lath and lintel dimensions consumed by the core.
    DisplayOptions: Host-side visibility toggles.
"""
from __future__ import annotations

from dataclasses import dataclass

from lathframe.errors import InvalidConfigurationError

# Global Constants
CANVAS_WIDTH: float = 2200.0
CANVAS_HEIGHT: float = 1800.0
CANVAS_SCALE: float = 3.5  # 1 pixel = 3.5 millimeters

HANDLE_RADIUS: float = 40.0
CIRCLE_HIT_MARGIN: float = 10.0 * CANVAS_SCALE
MIN_CIRCLE_RADIUS: float = 100.0
MAX_CIRCLE_RADIUS: float = 1000.0

DEFAULT_LATH_WIDTH: float = 55.0
DEFAULT_LATH_GAP: float = 18.0
DEFAULT_LINTEL_THICKNESS: float = 40.0

CONSTRUCTION_LINE_DASH: tuple[float, float] = (8.0 * CANVAS_SCALE, 10.0 * CANVAS_SCALE)


@dataclass(frozen=True)
class LayoutConfig:
    """Dimensions of the laths and of the frame pieces, in millimeters."""
    lath_width: float = DEFAULT_LATH_WIDTH
    lath_gap: float = DEFAULT_LATH_GAP
    lintel_thickness: float = DEFAULT_LINTEL_THICKNESS

    @property
    def pitch(self) -> float:
        """Length of one lath plus the gap that follows it."""
        return self.lath_width + self.lath_gap

    def validate(self) -> None:
        for name in ("lath_width", "lath_gap", "lintel_thickness"):
            value = getattr(self, name)
            if not value > 0.0:
                raise InvalidConfigurationError(f"'{name}' must be positive, got {value!r}.")


@dataclass(frozen=True)
class DisplayOptions:
    """Visibility toggles. Only the host reads them, never the geometry core."""
    construction_lines: bool = True
    construction_handles: bool = True
    laths: bool = True
