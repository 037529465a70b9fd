"""
QPainter Adapter
================
Implements the drawing port on top of a `QPainter`, so the scene and the
blueprints can be painted into any Qt paint device (widgets, images, printers).

Canvas semantics reproduced here:
    - Style state (colours, line width, dash, font, text alignment) is saved and
      restored together with the painter state.
    - `arc` angles are clockwise on screen; Qt angles are counter-clockwise, so
      both the start angle and the sweep are negated.
    - Dash patterns are given in surface units; Qt expects them in multiples of
      the pen width.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from matplotlib.colors import to_rgba
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPainterPath, QPen

from lathframe.drawing.port import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, TextMetrics
from lathframe.model.angles import rad2deg
from lathframe.model.geometry import canvas_sweep


def to_qcolor(color: str) -> QColor:
    """CSS colour string ('#rgb', '#rrggbbaa', ...) to a QColor."""
    return QColor.fromRgbF(*to_rgba(color))


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


class QPainterPort:
    """Drawing port that forwards to an active `QPainter`."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self._state = _StyleState()
        self._stack: list[_StyleState] = []
        self._path = QPainterPath()

    # --- Helpers ---
    def _pen(self) -> QPen:
        pen = QPen(to_qcolor(self._state.stroke_style))
        pen.setWidthF(self._state.line_width)
        if self._state.line_dash:
            unit = self._state.line_width if self._state.line_width > 0 else 1.0
            pattern = list(self._state.line_dash)
            if len(pattern) % 2:
                pattern = pattern * 2
            pen.setDashPattern([max(value / unit, 1e-3) for value in pattern])
        else:
            pen.setStyle(Qt.PenStyle.SolidLine)
        return pen

    def _font(self) -> QFont:
        font = QFont(self._state.font_family)
        font.setPixelSize(max(1, round(self._state.font_size)))
        return font

    # --- State ---
    def save(self) -> None:
        self._stack.append(self._state)
        self.painter.save()

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()
        self.painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

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
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
        else:
            self._path.lineTo(x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        rect = QRectF(cx - radius, cy - radius, 2 * radius, 2 * radius)
        qt_start = -rad2deg(start_angle)
        qt_sweep = -rad2deg(canvas_sweep(start_angle, end_angle, counter_clockwise))
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, qt_start)
        self._path.arcTo(rect, qt_start, qt_sweep)

    def close_path(self) -> None:
        self._path.closeSubpath()

    def stroke(self) -> None:
        self.painter.strokePath(self._path, self._pen())

    def fill(self) -> None:
        self.painter.fillPath(self._path, QBrush(to_qcolor(self._state.fill_style)))

    # --- Rectangles & text ---
    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        path = QPainterPath()
        path.addRect(QRectF(x, y, width, height))
        self.painter.strokePath(path, self._pen())

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.painter.fillRect(QRectF(x, y, width, height), to_qcolor(self._state.fill_style))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.painter.save()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        self.painter.fillRect(QRectF(x, y, width, height), Qt.GlobalColor.transparent)
        self.painter.restore()

    def fill_text(self, text: str, x: float, y: float) -> None:
        font = self._font()
        metrics = QFontMetricsF(font)
        width = metrics.horizontalAdvance(text)

        match self._state.text_align:
            case "center":
                x -= width / 2
            case "right" | "end":
                x -= width

        match self._state.text_baseline:
            case "middle":
                y += (metrics.ascent() - metrics.descent()) / 2
            case "top" | "hanging":
                y += metrics.ascent()
            case "bottom" | "ideographic":
                y -= metrics.descent()

        self.painter.save()
        self.painter.setFont(font)
        self.painter.setPen(QPen(to_qcolor(self._state.fill_style)))
        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()

    def measure_text(self, text: str) -> TextMetrics:
        return TextMetrics(width=QFontMetricsF(self._font()).horizontalAdvance(text))
