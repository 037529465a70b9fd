"""
Pointer Interaction
===================
Explicit state machine translating pointer events on the construction canvas
into new control primitive snapshots.

States:
    Idle: nothing grabbed; remembers what the pointer hovers for the cursor.
    Dragging: a handle follows the pointer, keeping the initial grab offset.
    Resizing: a circle radius follows the pointer distance to its center.

Every event returns an `InteractionResult` carrying the next state, the
(possibly unchanged) controls and the cursor hint the host should show. The
machine never mutates a `ControlPrimitives` value and knows nothing about Qt.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional, Union

from lathframe.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CIRCLE_HIT_MARGIN,
    HANDLE_RADIUS,
    MAX_CIRCLE_RADIUS,
    MIN_CIRCLE_RADIUS,
    DisplayOptions,
)
from lathframe.model import geometry
from lathframe.model.angles import HALF_CIRCLE, QUARTER_CIRCLE, SIXTEENTH_CIRCLE
from lathframe.model.controls import CircleKey, ControlPrimitives, Handle
from lathframe.model.geometry_primitives import Point, Vector

logger = logging.getLogger(__name__)

CURSOR_DEFAULT = "default"
CURSOR_GRAB = "grab"
CURSOR_GRABBING = "grabbing"


@dataclass(frozen=True)
class Idle:
    hovered_handle: Optional[Handle] = None
    hovered_circle: Optional[CircleKey] = None


@dataclass(frozen=True)
class Dragging:
    handle: Handle
    original_position: Point
    grab_offset: Vector


@dataclass(frozen=True)
class Resizing:
    circle: CircleKey
    original_radius: float


InteractionState = Union[Idle, Dragging, Resizing]


@dataclass(frozen=True)
class InteractionResult:
    state: InteractionState
    controls: ControlPrimitives
    cursor: str
    changed: bool = False


def resize_direction(center: Point, pointer: Point) -> str:
    """Resize cursor family for a pointer around `center`: 'ns', 'ew', 'nesw' or 'nwse'."""
    direction_angle = geometry.angle(center, pointer)
    is_upward = direction_angle < 0
    direction_angle = abs(direction_angle)
    if SIXTEENTH_CIRCLE <= direction_angle < QUARTER_CIRCLE - SIXTEENTH_CIRCLE:
        return "nesw" if is_upward else "nwse"
    if QUARTER_CIRCLE - SIXTEENTH_CIRCLE <= direction_angle < QUARTER_CIRCLE + SIXTEENTH_CIRCLE:
        return "ns"
    if QUARTER_CIRCLE + SIXTEENTH_CIRCLE <= direction_angle < HALF_CIRCLE - SIXTEENTH_CIRCLE:
        return "nwse" if is_upward else "nesw"
    return "ew"


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def clamp_radius(value: float) -> float:
    return _round_half_up(min(max(MIN_CIRCLE_RADIUS, value), MAX_CIRCLE_RADIUS))


@dataclass
class InteractionMachine:
    """
    Holds the current interaction state between pointer events.

    `display` decides what can be picked: handles only while they are shown,
    circle outlines only while construction lines are shown.
    """
    display: DisplayOptions = field(default_factory=DisplayOptions)
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    state: InteractionState = field(default_factory=Idle)
    cursor: str = CURSOR_DEFAULT

    # --- Hit testing ---
    def handle_at(self, controls: ControlPrimitives, point: Point) -> Optional[Handle]:
        if not self.display.construction_handles:
            return None
        for handle, position in controls.handles().items():
            if geometry.distance(point, position) <= HANDLE_RADIUS:
                return handle
        return None

    def circle_at(self, controls: ControlPrimitives, point: Point) -> Optional[CircleKey]:
        if not self.display.construction_lines:
            return None
        for key, circle in controls.circles().items():
            if abs(geometry.distance(point, circle.center) - circle.radius) <= CIRCLE_HIT_MARGIN:
                return key
        return None

    def clamp_point(self, point: Point) -> Point:
        return Point(
            min(max(0.0, point.x), self.width),
            min(max(0.0, point.y), self.height),
        )

    def _result(self, state: InteractionState, controls: ControlPrimitives, cursor: str, changed: bool = False) -> InteractionResult:
        self.state = state
        self.cursor = cursor
        return InteractionResult(state=state, controls=controls, cursor=cursor, changed=changed)

    # --- Events ---
    def pointer_down(self, controls: ControlPrimitives, pointer: Point) -> InteractionResult:
        if not isinstance(self.state, Idle):
            return self._result(self.state, controls, self.cursor)

        handle = self.handle_at(controls, pointer)
        if handle is not None:
            origin = controls.position(handle)
            logger.debug(f"Dragging {handle} handle from ({origin.x:.0f}, {origin.y:.0f}).")
            return self._result(Dragging(handle, origin, pointer - origin), controls, CURSOR_GRABBING)

        key = self.circle_at(controls, pointer)
        if key is not None:
            circle = controls.circle(key)
            logger.debug(f"Resizing {key} circle from radius {circle.radius:.0f}.")
            cursor = f"{resize_direction(circle.center, pointer)}-resize"
            return self._result(Resizing(key, circle.radius), controls, cursor)

        return self._result(Idle(), controls, CURSOR_DEFAULT)

    def pointer_move(self, controls: ControlPrimitives, pointer: Point) -> InteractionResult:
        state = self.state
        match state:
            case Dragging(handle=handle, grab_offset=grab_offset):
                position = self.clamp_point(pointer - grab_offset)
                moved = controls.moved(handle, position)
                return self._result(state, moved, CURSOR_GRABBING, changed=moved != controls)
            case Resizing(circle=key):
                circle = controls.circle(key)
                radius = clamp_radius(geometry.distance(pointer, circle.center))
                resized = controls.resized(key, radius)
                cursor = f"{resize_direction(circle.center, pointer)}-resize"
                return self._result(state, resized, cursor, changed=resized != controls)

        handle = self.handle_at(controls, pointer)
        if handle is not None:
            return self._result(Idle(hovered_handle=handle), controls, CURSOR_GRAB)
        key = self.circle_at(controls, pointer)
        if key is not None:
            cursor = f"{resize_direction(controls.circle(key).center, pointer)}-resize"
            return self._result(Idle(hovered_circle=key), controls, cursor)
        return self._result(Idle(), controls, CURSOR_DEFAULT)

    def pointer_up(self, controls: ControlPrimitives) -> InteractionResult:
        return self._result(Idle(), controls, CURSOR_DEFAULT)

    def pointer_out(self, controls: ControlPrimitives) -> InteractionResult:
        """The pointer left the canvas. A grab in progress continues."""
        state = self.state
        if isinstance(state, Idle) and state.hovered_handle is not None:
            return self._result(Idle(), controls, CURSOR_DEFAULT)
        return self._result(state, controls, self.cursor)

    def cancel(self, controls: ControlPrimitives) -> InteractionResult:
        """Abort a drag or a resize and put the grabbed primitive back."""
        match self.state:
            case Dragging(handle=handle, original_position=original_position):
                restored = controls.moved(handle, original_position)
                return self._result(Idle(), restored, CURSOR_DEFAULT, changed=restored != controls)
            case Resizing(circle=key, original_radius=original_radius):
                restored = controls.resized(key, original_radius)
                return self._result(Idle(), restored, CURSOR_DEFAULT, changed=restored != controls)
        return self._result(Idle(), controls, CURSOR_DEFAULT)

