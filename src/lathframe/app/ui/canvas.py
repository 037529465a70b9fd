"""
Construction Canvas
===================
Widget showing the construction scene and forwarding pointer events to the
interaction state machine.

The scene is drawn in millimeters and scaled to fit the widget while keeping
its aspect ratio; pointer positions are mapped back to millimeters before they
reach the state machine.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QSize, Qt
from PySide6.QtGui import QCursor, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from lathframe.app.state import Store
from lathframe.config import CANVAS_HEIGHT, CANVAS_SCALE, CANVAS_WIDTH, DisplayOptions
from lathframe.controller.interaction import InteractionMachine, InteractionResult
from lathframe.drawing.qt_port import QPainterPort
from lathframe.drawing.scene import render_scene
from lathframe.model.geometry_primitives import Point

CURSOR_SHAPES = {
    "default": Qt.CursorShape.ArrowCursor,
    "grab": Qt.CursorShape.OpenHandCursor,
    "grabbing": Qt.CursorShape.ClosedHandCursor,
    "ns-resize": Qt.CursorShape.SizeVerCursor,
    "ew-resize": Qt.CursorShape.SizeHorCursor,
    "nesw-resize": Qt.CursorShape.SizeBDiagCursor,
    "nwse-resize": Qt.CursorShape.SizeFDiagCursor,
}


class ConstructionCanvas(QWidget):
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.machine = InteractionMachine(display=store.display)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        store.controls_changed.connect(lambda *_: self.update())
        store.design_changed.connect(lambda *_: self.update())
        store.display_changed.connect(self._on_display_changed)

    def sizeHint(self) -> QSize:
        return QSize(round(CANVAS_WIDTH / CANVAS_SCALE), round(CANVAS_HEIGHT / CANVAS_SCALE))

    # ---- coordinate mapping ----

    def _scale(self) -> float:
        return min(self.width() / CANVAS_WIDTH, self.height() / CANVAS_HEIGHT)

    def _origin(self) -> QPointF:
        scale = self._scale()
        return QPointF(
            (self.width() - CANVAS_WIDTH * scale) / 2,
            (self.height() - CANVAS_HEIGHT * scale) / 2,
        )

    def to_canvas(self, position: QPointF) -> Point:
        scale = self._scale()
        origin = self._origin()
        return Point((position.x() - origin.x()) / scale, (position.y() - origin.y()) / scale)

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        origin = self._origin()
        painter.translate(origin)
        painter.scale(self._scale(), self._scale())

        store = self.store
        design = store.design if store.design_is_current else None
        render_scene(
            QPainterPort(painter),
            store.controls,
            silhouette=design.silhouette if design else None,
            laths=design.laths if design else None,
            display=store.display,
        )
        painter.end()

    # ---- pointer events ----

    def _apply(self, result: InteractionResult) -> None:
        self.setCursor(QCursor(CURSOR_SHAPES.get(result.cursor, Qt.CursorShape.ArrowCursor)))
        if result.changed:
            self.store.set_controls(result.controls)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._apply(self.machine.pointer_down(self.store.controls, self.to_canvas(event.position())))
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._apply(self.machine.pointer_move(self.store.controls, self.to_canvas(event.position())))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._apply(self.machine.pointer_up(self.store.controls))
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        self._apply(self.machine.pointer_out(self.store.controls))
        super().leaveEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self._apply(self.machine.cancel(self.store.controls))
            return
        super().keyPressEvent(event)

    def _on_display_changed(self, display: DisplayOptions) -> None:
        self.machine.display = display
        self.update()
