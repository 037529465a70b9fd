"""
Blueprint View
==============
Scrollable widget painting the blueprint sheet of the current design.

The sheet is laid out once on a throw-away image painter to learn its size,
so the widget can be resized before the real paint happens.
"""
from __future__ import annotations

import math

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QImage, QPainter, QPaintEvent
from PySide6.QtWidgets import QScrollArea, QWidget

from lathframe.app.state import Store
from lathframe.blueprint.sheet import BlueprintSheet
from lathframe.controller.design import Design
from lathframe.drawing.qt_port import QPainterPort
from lathframe.model.geometry_primitives import Size


def measure_sheet(sheet: BlueprintSheet) -> Size:
    image = QImage(1, 1, QImage.Format.Format_ARGB32)
    painter = QPainter(image)
    try:
        return sheet.measure(QPainterPort(painter))
    finally:
        painter.end()


class BlueprintSheetWidget(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sheet: BlueprintSheet | None = None
        self._size = Size(0.0, 0.0)

    def set_sheet(self, sheet: BlueprintSheet) -> None:
        size = measure_sheet(sheet)
        self._sheet = sheet
        self._size = size
        self.setFixedSize(math.ceil(self._size.width), math.ceil(self._size.height))
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(math.ceil(self._size.width), math.ceil(self._size.height))

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        painter.fillRect(self.rect(), QColor(255, 255, 255))
        if self._sheet is not None:
            self._sheet.render(QPainterPort(painter))
        painter.end()


class BlueprintView(QScrollArea):
    """Shows the five frame pieces of the last valid design."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.sheet_widget = BlueprintSheetWidget(self)
        self.setWidget(self.sheet_widget)
        self.setWidgetResizable(False)

        store.design_changed.connect(self.set_design)
        if store.design is not None:
            self.set_design(store.design)

    def set_design(self, design: Design) -> None:
        self.sheet_widget.set_sheet(design.blueprint_sheet())
