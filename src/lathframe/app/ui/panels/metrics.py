from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLabel

from lathframe.app.state import Store
from lathframe.controller.design import Design

# Summary key -> (label, unit)
METRIC_ROWS = {
    "leg_tangent_length": ("Leg tangent", "mm"),
    "middle_tangent_length": ("Middle tangent", "mm"),
    "back_tangent_length": ("Back tangent", "mm"),
    "leg_angle": ("Leg angle", "°"),
    "leg_arc_length": ("Leg arc length", "mm"),
    "leg_arc_chord_length": ("Leg arc chord", "mm"),
    "leg_arc_thickness": ("Leg arc thickness", "mm"),
    "back_angle": ("Back angle", "°"),
    "back_arc_length": ("Back arc length", "mm"),
    "back_arc_chord_length": ("Back arc chord", "mm"),
    "back_arc_thickness": ("Back arc thickness", "mm"),
    "lath_count": ("Laths", ""),
    "remaining_length": ("Remaining length", "mm"),
}


class MetricsPanel(QWidget):
    """Read-only figures of the current design."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        root = QVBoxLayout(self)
        box = QGroupBox(self.tr("Measurements"), self)
        root.addWidget(box)
        form = QFormLayout(box)

        self._values: dict[str, QLabel] = {}
        for key, (label, _unit) in METRIC_ROWS.items():
            value = QLabel("-", box)
            form.addRow(self.tr(label), value)
            self._values[key] = value

        store.design_changed.connect(self.update_metrics)
        if store.design is not None:
            self.update_metrics(store.design)

    def update_metrics(self, design: Design) -> None:
        summary = design.summary()
        for key, (_label, unit) in METRIC_ROWS.items():
            separator = "" if unit == "°" or not unit else " "
            self._values[key].setText(f"{summary[key]}{separator}{unit}")
