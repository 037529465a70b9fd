"""
Settings Panel
==============
Left-side panel editing the lath and lintel dimensions, the display toggles
and the preset placement of the control primitives.
"""
from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSizePolicy,
    QDoubleSpinBox, QCheckBox, QComboBox, QPushButton, QHBoxLayout,
)

from lathframe.app.state import Store
from lathframe.config import DisplayOptions, LayoutConfig
from lathframe.model.presets import DesignPreset

PRESET_LABELS = {
    DesignPreset.DEFAULT: "Default",
    DesignPreset.SEAT: "Seat",
    DesignPreset.BED: "Bed",
}

DISPLAY_LABELS = {
    "construction_lines": "Construction lines",
    "construction_handles": "Construction handles",
    "laths": "Laths",
}


class SettingsPanel(QWidget):
    """Dimension spin boxes, display check boxes and preset buttons."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        root = QVBoxLayout(self)

        # ---- Dimensions ----
        box = QGroupBox(self.tr("Dimensions"), self)
        root.addWidget(box, 0)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox] = {}
        self._row = 0

        config = store.config
        self._add_spin("lath_width", "Lath width", default=config.lath_width)
        self._add_spin("lath_gap", "Lath gap", default=config.lath_gap)
        self._add_spin("lintel_thickness", "Lintel thickness", default=config.lintel_thickness)
        for spin in self._spins.values():
            spin.valueChanged.connect(self._on_dimensions_changed)

        # ---- Display ----
        display_box = QGroupBox(self.tr("Display"), self)
        root.addWidget(display_box, 0)
        display_layout = QVBoxLayout(display_box)
        self._checks: dict[str, QCheckBox] = {}
        for key, label in DISPLAY_LABELS.items():
            check = QCheckBox(self.tr(label), display_box)
            check.setChecked(getattr(store.display, key))
            check.toggled.connect(self._on_display_changed)
            display_layout.addWidget(check)
            self._checks[key] = check

        # ---- Presets ----
        preset_box = QGroupBox(self.tr("Presets"), self)
        root.addWidget(preset_box, 0)
        preset_layout = QHBoxLayout(preset_box)
        self.combo_box = QComboBox(preset_box)
        for preset, label in PRESET_LABELS.items():
            self.combo_box.addItem(self.tr(label), userData=preset)
        preset_layout.addWidget(self.combo_box, 1)
        self.button_apply = QPushButton(self.tr("Apply"), preset_box)
        self.button_apply.clicked.connect(self._on_preset_applied)
        preset_layout.addWidget(self.button_apply, 0)

        root.addStretch()

        store.config_changed.connect(self._sync_config)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = 1.0,
        max_value: float = 1000.0,
        step: float = 1.0,
        default: float = 0.0,
        suffix: str = "mm",
        decimals: int = 0
    ) -> QDoubleSpinBox:
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        if suffix:
            w.setSuffix(f" {suffix}")
        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def params(self) -> dict[str, float]:
        return {k: w.value() for k, w in self._spins.items()}

    # ---- slots ----

    @Slot()
    def _on_dimensions_changed(self) -> None:
        self.store.set_config(LayoutConfig(**self.params()))

    @Slot()
    def _on_display_changed(self) -> None:
        self.store.set_display(DisplayOptions(**{k: c.isChecked() for k, c in self._checks.items()}))

    @Slot()
    def _on_preset_applied(self) -> None:
        self.store.apply_preset(self.combo_box.currentData())

    def _sync_config(self, config: LayoutConfig) -> None:
        for key, spin in self._spins.items():
            value = getattr(config, key)
            if spin.value() != value:
                spin.blockSignals(True)
                spin.setValue(value)
                spin.blockSignals(False)
