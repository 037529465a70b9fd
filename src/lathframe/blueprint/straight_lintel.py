"""
Blueprint of a straight frame piece: a rectangle with its length and thickness.
"""
from __future__ import annotations

import logging

from lathframe.blueprint.base import LINE_COLOR, Blueprint, MeasureStyle, format_length
from lathframe.drawing.port import DrawingPort
from lathframe.errors import InvalidConfigurationError
from lathframe.model.geometry_primitives import Point, Size

logger = logging.getLogger(__name__)


class StraightLintel(Blueprint):
    horizontal_padding = 80.0
    vertical_padding = 40.0
    label_offset = 60.0

    def __init__(
        self,
        label: str,
        port: DrawingPort,
        width: float,
        thickness: float,
        style: MeasureStyle = MeasureStyle(),
    ) -> None:
        super().__init__(port, style)
        if not width > 0.0 or not thickness > 0.0:
            raise InvalidConfigurationError(
                f"Straight piece '{label}' needs a positive width and thickness, got {width!r} x {thickness!r}."
            )
        self.label = label
        self.lintel_width = width
        self.thickness = thickness

    def render(self) -> None:
        port = self.port
        label_y = self.vertical_padding + self.style.font_size / 2
        left_x = self.horizontal_padding
        right_x = left_x + self.lintel_width
        top_y = label_y + self.label_offset
        bottom_y = top_y + self.thickness

        port.save()
        port.set_fill_style(LINE_COLOR)
        port.set_stroke_style(LINE_COLOR)
        port.stroke_rect(left_x, top_y, self.lintel_width, self.thickness)

        self._set_font()
        port.set_text_baseline("middle")
        port.fill_text(self.label, left_x, label_y)
        port.restore()

        width_measure = self.draw_measure(
            format_length(self.lintel_width),
            Point(left_x, bottom_y),
            Point(right_x, bottom_y),
        )
        height_measure = self.draw_measure(
            format_length(self.thickness),
            Point(right_x, bottom_y),
            Point(right_x, top_y),
        )

        self._size = Size(
            width=right_x + height_measure.width + self.horizontal_padding,
            height=bottom_y + width_measure.height + self.vertical_padding,
        )
        logger.debug(f"Rendered '{self.label}' at {self.width:.0f} x {self.height:.0f}.")
