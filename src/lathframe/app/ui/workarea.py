from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QStackedWidget, QVBoxLayout

from lathframe.app.state import Store
from lathframe.app.ui.blueprint_view import BlueprintView
from lathframe.app.ui.canvas import ConstructionCanvas
from lathframe.app.ui.panels.metrics import MetricsPanel
from lathframe.app.ui.panels.settings import SettingsPanel


class WorkArea(QWidget):
    """The main work area with a splitter between the side panels and the stacked views."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        side = QWidget(split)
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(0, 0, 0, 0)
        self.settings_panel = SettingsPanel(store, side)
        self.metrics_panel = MetricsPanel(store, side)
        side_layout.addWidget(self.settings_panel)
        side_layout.addWidget(self.metrics_panel)
        side_layout.addStretch()

        self.view_stack = QStackedWidget(split)
        self.canvas = ConstructionCanvas(store, self.view_stack)
        self.blueprints = BlueprintView(store, self.view_stack)
        self.view_stack.addWidget(self.canvas)
        self.view_stack.addWidget(self.blueprints)

        split.addWidget(side)
        split.addWidget(self.view_stack)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

    def set_view_index(self, index: int) -> None:
        """Set the currently visible view (0: construction, 1: blueprints)."""
        self.view_stack.setCurrentIndex(index)
