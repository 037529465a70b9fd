"""
Main Application Window
=======================
The primary GUI container that holds the menu bar, the view tabs, the work
area and the status bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (File -> Export) to the controllers and
   reports rejected designs in the status bar.
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QTabBar, QFileDialog, QMessageBox,
)

from lathframe.app.application import VISIBLE_APP_NAME
from lathframe.app.state import Store
from lathframe.app.ui.workarea import WorkArea
from lathframe.controller.export import export_blueprints

logger = logging.getLogger(__name__)

VIEW_LABELS = ["Construction", "Blueprints"]
STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # ---- Central: TabBar on top + WorkArea below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.tabs = QTabBar(central)
        self.tabs.setExpanding(True)
        self.tabs.setMovable(False)
        self.tabs.setTabsClosable(False)
        self.tabs.setDrawBase(True)
        self.tabs.setShape(QTabBar.Shape.RoundedNorth)
        for label in VIEW_LABELS:
            self.tabs.addTab(self.tr(label))
        v.addWidget(self.tabs, 0)

        self.work_area = WorkArea(store, central)
        v.addWidget(self.work_area, 1)

        self.setCentralWidget(central)

        self.tabs.currentChanged.connect(self.work_area.set_view_index)
        store.design_rejected.connect(self.on_design_rejected)
        store.design_changed.connect(lambda *_: self.statusBar().clearMessage())

        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_export = QAction(self.tr("Export Blueprints..."), self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.on_export_blueprints)

        self.act_exit = QAction(self.tr("Exit"), self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_file = self.menuBar().addMenu(self.tr("File"))
        menu_file.addAction(self.act_export)
        menu_file.addSeparator()
        menu_file.addAction(self.act_exit)

    def on_design_rejected(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def on_export_blueprints(self) -> None:
        design = self.store.design
        if design is None:
            QMessageBox.warning(self, self.tr("Export"), self.tr("There is no valid design to export."))
            return

        fname, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Export Blueprints"),
            "blueprints.pdf",
            "PDF (*.pdf);;SVG (*.svg);;PNG (*.png)",
        )
        if not fname:
            return
        try:
            export_blueprints(design, fname)
        except (OSError, ValueError) as e:
            logger.error(f"Export to {fname} failed: {e}")
            QMessageBox.critical(self, self.tr("Error"), self.tr("Could not export blueprints:\n") + str(e))
            return
        self.statusBar().showMessage(self.tr("Blueprints exported to ") + fname, STATUS_TIMEOUT_MS)
