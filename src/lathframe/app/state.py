"""
Application State
=================
Central store shared by the canvas, the settings panel and the blueprint view.

Why is this file needed?
------------------------
1. State Management: It holds the current control primitives, the layout
   configuration, the display toggles and the last valid design in one place.
2. Recompute: Every change of controls or configuration runs the recompute
   pass; a rejected silhouette keeps the previous design and is reported
   through `design_rejected` instead of propagating.
3. Decoupling: Widgets only talk to the store and listen to its signals.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from lathframe.config import DisplayOptions, LayoutConfig
from lathframe.controller.design import Design, compute_design
from lathframe.errors import InvalidConfigurationError, SilhouetteError
from lathframe.model.controls import ControlPrimitives
from lathframe.model.presets import DesignPreset, get_preset

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for panel/canvas sync."""
    controls_changed = Signal(object)
    config_changed = Signal(object)
    display_changed = Signal(object)
    design_changed = Signal(object)
    design_rejected = Signal(str)

    def __init__(
        self,
        controls: Optional[ControlPrimitives] = None,
        config: Optional[LayoutConfig] = None,
    ) -> None:
        super().__init__()
        self.controls: ControlPrimitives = controls or get_preset(DesignPreset.DEFAULT)
        self.config: LayoutConfig = config or LayoutConfig()
        self.display: DisplayOptions = DisplayOptions()
        self.design: Optional[Design] = None
        self.recompute()

    @property
    def design_is_current(self) -> bool:
        """Whether the kept design was computed from the current controls."""
        return self.design is not None and self.design.controls == self.controls and self.design.config == self.config

    def recompute(self) -> bool:
        try:
            design = compute_design(self.controls, self.config)
        except (SilhouetteError, InvalidConfigurationError) as exc:
            logger.warning(f"Design rejected, keeping the previous design: {exc}")
            self.design_rejected.emit(str(exc))
            return False
        self.design = design
        self.design_changed.emit(design)
        return True

    def set_controls(self, controls: ControlPrimitives) -> None:
        if controls == self.controls:
            return
        self.controls = controls
        self.controls_changed.emit(controls)
        self.recompute()

    def set_config(self, config: LayoutConfig) -> None:
        try:
            config.validate()
        except InvalidConfigurationError as exc:
            logger.warning(f"Configuration rejected: {exc}")
            self.design_rejected.emit(str(exc))
            return
        if config == self.config:
            return
        self.config = config
        self.config_changed.emit(config)
        self.recompute()

    def update_config(self, **changes: float) -> None:
        self.set_config(replace(self.config, **changes))

    def set_display(self, display: DisplayOptions) -> None:
        if display == self.display:
            return
        self.display = display
        self.display_changed.emit(display)

    def update_display(self, **changes: bool) -> None:
        self.set_display(replace(self.display, **changes))

    def apply_preset(self, preset: DesignPreset | str) -> None:
        logger.info(f"Applying preset '{preset}'.")
        self.set_controls(get_preset(preset))
