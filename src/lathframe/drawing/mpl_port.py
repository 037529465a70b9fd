"""
Matplotlib Adapter
==================
Implements the drawing port on a headless matplotlib figure, used to export
blueprint sheets to PDF, SVG or PNG without a display.

The figure is sized so that one surface unit equals one typographic point:
line widths and font sizes given to the port can be handed to matplotlib
unchanged. The y axis is inverted to match the y-down canvas convention.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path as FilePath
from typing import Sequence, Union

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import PathPatch, Rectangle
from matplotlib.path import Path
from matplotlib.textpath import TextPath

from lathframe.drawing.port import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, TextMetrics
from lathframe.model.geometry import arc_points
from lathframe.model.geometry_primitives import Circle, Point

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72.0

_HORIZONTAL_ALIGNMENT = {
    "left": "left",
    "start": "left",
    "center": "center",
    "right": "right",
    "end": "right",
}
_VERTICAL_ALIGNMENT = {
    "top": "top",
    "hanging": "top",
    "middle": "center",
    "alphabetic": "baseline",
    "bottom": "bottom",
    "ideographic": "bottom",
}


@dataclass(frozen=True)
class _StyleState:
    stroke_style: str = "#000"
    fill_style: str = "#000"
    line_width: float = 1.0
    line_dash: tuple[float, ...] = ()
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    text_align: str = "start"
    text_baseline: str = "alphabetic"
    offset_x: float = 0.0
    offset_y: float = 0.0


class MatplotlibPort:
    """Drawing port backed by a matplotlib `Figure`."""

    def __init__(self, width: float, height: float, background: str = "#fff") -> None:
        self.width = width
        self.height = height
        self.figure = Figure(figsize=(width / POINTS_PER_INCH, height / POINTS_PER_INCH), dpi=POINTS_PER_INCH)
        FigureCanvasAgg(self.figure)
        self.axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.axes.set_xlim(0.0, width)
        self.axes.set_ylim(height, 0.0)
        self.axes.set_axis_off()
        self.axes.set_facecolor(to_rgba(background))
        self.figure.patch.set_facecolor(to_rgba(background))

        self._state = _StyleState()
        self._stack: list[_StyleState] = []
        self._vertices: list[tuple[float, float]] = []
        self._codes: list[int] = []
        self._subpath_start = 0

    # --- Helpers ---
    def _map(self, x: float, y: float) -> tuple[float, float]:
        return x + self._state.offset_x, y + self._state.offset_y

    def _linestyle(self) -> Union[str, tuple[float, tuple[float, ...]]]:
        if not self._state.line_dash:
            return "solid"
        unit = self._state.line_width if self._state.line_width > 0 else 1.0
        return 0.0, tuple(value / unit for value in self._state.line_dash)

    def _font_properties(self) -> FontProperties:
        return FontProperties(family=self._state.font_family, size=self._state.font_size)

    def _current_path(self) -> Path:
        return Path(np.array(self._vertices, dtype=float), self._codes)

    # --- State ---
    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._state = replace(
            self._state,
            offset_x=self._state.offset_x + dx,
            offset_y=self._state.offset_y + dy,
        )

    def set_stroke_style(self, color: str) -> None:
        self._state = replace(self._state, stroke_style=color)

    def set_fill_style(self, color: str) -> None:
        self._state = replace(self._state, fill_style=color)

    def set_line_width(self, width: float) -> None:
        self._state = replace(self._state, line_width=width)

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._state = replace(self._state, line_dash=tuple(pattern))

    def set_font(self, size: float, family: str = DEFAULT_FONT_FAMILY) -> None:
        self._state = replace(self._state, font_size=size, font_family=family)

    def set_text_align(self, align: str) -> None:
        self._state = replace(self._state, text_align=align)

    def set_text_baseline(self, baseline: str) -> None:
        self._state = replace(self._state, text_baseline=baseline)

    # --- Paths ---
    def begin_path(self) -> None:
        self._vertices = []
        self._codes = []
        self._subpath_start = 0

    def move_to(self, x: float, y: float) -> None:
        self._subpath_start = len(self._vertices)
        self._vertices.append(self._map(x, y))
        self._codes.append(Path.MOVETO)

    def line_to(self, x: float, y: float) -> None:
        if not self._vertices:
            self.move_to(x, y)
            return
        self._vertices.append(self._map(x, y))
        self._codes.append(Path.LINETO)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        center_x, center_y = self._map(cx, cy)
        points = arc_points(
            Circle(center=Point(center_x, center_y), radius=radius),
            start_angle,
            end_angle,
            counter_clockwise=counter_clockwise,
        )
        first_x, first_y = points[0]
        if not self._vertices:
            self._subpath_start = 0
            self._codes.append(Path.MOVETO)
        else:
            self._codes.append(Path.LINETO)
        self._vertices.append((float(first_x), float(first_y)))
        for x, y in points[1:]:
            self._vertices.append((float(x), float(y)))
            self._codes.append(Path.LINETO)

    def close_path(self) -> None:
        if not self._vertices:
            return
        self._vertices.append(self._vertices[self._subpath_start])
        self._codes.append(Path.CLOSEPOLY)

    def stroke(self) -> None:
        if not self._vertices:
            return
        self.axes.add_patch(PathPatch(
            self._current_path(),
            fill=False,
            edgecolor=to_rgba(self._state.stroke_style),
            linewidth=self._state.line_width,
            linestyle=self._linestyle(),
        ))

    def fill(self) -> None:
        if not self._vertices:
            return
        self.axes.add_patch(PathPatch(
            self._current_path(),
            facecolor=to_rgba(self._state.fill_style),
            edgecolor="none",
        ))

    # --- Rectangles & text ---
    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.axes.add_patch(Rectangle(
            self._map(x, y), width, height,
            fill=False,
            edgecolor=to_rgba(self._state.stroke_style),
            linewidth=self._state.line_width,
            linestyle=self._linestyle(),
        ))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.axes.add_patch(Rectangle(
            self._map(x, y), width, height,
            facecolor=to_rgba(self._state.fill_style),
            edgecolor="none",
        ))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.axes.add_patch(Rectangle(
            self._map(x, y), width, height,
            facecolor=self.axes.get_facecolor(),
            edgecolor="none",
        ))

    def fill_text(self, text: str, x: float, y: float) -> None:
        mapped_x, mapped_y = self._map(x, y)
        self.axes.text(
            mapped_x,
            mapped_y,
            text,
            fontproperties=self._font_properties(),
            color=to_rgba(self._state.fill_style),
            ha=_HORIZONTAL_ALIGNMENT.get(self._state.text_align, "left"),
            va=_VERTICAL_ALIGNMENT.get(self._state.text_baseline, "baseline"),
        )

    def measure_text(self, text: str) -> TextMetrics:
        if not text:
            return TextMetrics(width=0.0)
        extents = TextPath((0.0, 0.0), text, prop=self._font_properties()).get_extents()
        return TextMetrics(width=float(extents.width))

    def save_figure(self, path: Union[str, FilePath]) -> None:
        """Write the figure; the format follows the file extension."""
        self.figure.savefig(path, dpi=POINTS_PER_INCH, facecolor=self.figure.get_facecolor())
        logger.info(f"Saved drawing to {path}.")
