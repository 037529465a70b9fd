"""
Drawing Port
============
The abstract 2D drawing surface consumed by the blueprints and the scene.

Coordinates are in surface units with the y axis pointing down. Angles passed
to `arc` are in radians, measured clockwise on screen from the positive x axis,
exactly like the HTML canvas `arc` call.

Exports:
    DrawingPort: Protocol every surface adapter implements.
    TextMetrics: Result of `measure_text`.
    RecordingPort: In-memory adapter recording every call as a `DrawCommand`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_SIZE = 10.0

# Average glyph advance of Arial, as a fraction of the font size.
AVERAGE_CHAR_WIDTH = 0.55


@dataclass(frozen=True)
class TextMetrics:
    width: float


@runtime_checkable
class DrawingPort(Protocol):
    """Subset of the 2D canvas API the drawing code relies on."""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def set_stroke_style(self, color: str) -> None: ...

    def set_fill_style(self, color: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_dash(self, pattern: Sequence[float]) -> None: ...

    def set_font(self, size: float, family: str = DEFAULT_FONT_FAMILY) -> None: ...

    def set_text_align(self, align: str) -> None: ...

    def set_text_baseline(self, baseline: str) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def measure_text(self, text: str) -> TextMetrics: ...


@dataclass(frozen=True)
class DrawCommand:
    """One recorded call: the method name and its positional arguments."""
    name: str
    args: tuple[Any, ...] = ()


def estimate_text_width(text: str, font_size: float) -> float:
    return len(text) * font_size * AVERAGE_CHAR_WIDTH


@dataclass
class RecordingPort:
    """
    Drawing port that draws nothing and records every call.

    Text width is estimated from the character count unless a `text_width`
    callable is given, so layouts computed on this port are deterministic.
    """
    text_width: Optional[Callable[[str, float], float]] = None
    commands: list[DrawCommand] = field(default_factory=list)
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    _font_stack: list[tuple[float, str]] = field(default_factory=list, repr=False)

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append(DrawCommand(name, args))

    def names(self) -> list[str]:
        return [command.name for command in self.commands]

    def calls(self, name: str) -> list[DrawCommand]:
        return [command for command in self.commands if command.name == name]

    def clear(self) -> None:
        self.commands.clear()

    # State
    def save(self) -> None:
        self._font_stack.append((self.font_size, self.font_family))
        self._record("save")

    def restore(self) -> None:
        if self._font_stack:
            self.font_size, self.font_family = self._font_stack.pop()
        self._record("restore")

    def translate(self, dx: float, dy: float) -> None:
        self._record("translate", dx, dy)

    def set_stroke_style(self, color: str) -> None:
        self._record("set_stroke_style", color)

    def set_fill_style(self, color: str) -> None:
        self._record("set_fill_style", color)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._record("set_line_dash", tuple(pattern))

    def set_font(self, size: float, family: str = DEFAULT_FONT_FAMILY) -> None:
        self.font_size = size
        self.font_family = family
        self._record("set_font", size, family)

    def set_text_align(self, align: str) -> None:
        self._record("set_text_align", align)

    def set_text_baseline(self, baseline: str) -> None:
        self._record("set_text_baseline", baseline)

    # Paths
    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle, counter_clockwise)

    def close_path(self) -> None:
        self._record("close_path")

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    # Rectangles & text
    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("stroke_rect", x, y, width, height)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("fill_rect", x, y, width, height)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("clear_rect", x, y, width, height)

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", text, x, y)

    def measure_text(self, text: str) -> TextMetrics:
        if self.text_width is not None:
            return TextMetrics(width=self.text_width(text, self.font_size))
        return TextMetrics(width=estimate_text_width(text, self.font_size))
