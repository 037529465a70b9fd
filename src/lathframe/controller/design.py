"""
Recompute Pass
==============
Turns one control primitive snapshot and one layout configuration into a
complete, immutable design: silhouette, metrics and lath layout.

Raises `SilhouetteError` when the snapshot cannot produce a silhouette; the
caller decides whether to keep its previous design.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from lathframe.blueprint.sheet import BlueprintSheet
from lathframe.config import LayoutConfig
from lathframe.errors import InvalidConfigurationError
from lathframe.model.controls import ControlPrimitives
from lathframe.model.laths import LathLayout, layout_silhouette
from lathframe.model.silhouette import Silhouette, SilhouetteMetrics, build_silhouette

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Design:
    controls: ControlPrimitives
    config: LayoutConfig
    silhouette: Silhouette
    metrics: SilhouetteMetrics
    laths: LathLayout

    @property
    def lath_count(self) -> int:
        return self.laths.count

    @property
    def remaining_length(self) -> float:
        return self.laths.remaining_length

    def blueprint_sheet(self) -> BlueprintSheet:
        return BlueprintSheet(self.silhouette, self.config)

    def summary(self) -> dict[str, float]:
        """Rounded figures as displayed to the user (millimeters and degrees)."""
        metrics = self.metrics
        return {
            "leg_tangent_length": round(metrics.leg_tangent_length),
            "middle_tangent_length": round(metrics.middle_tangent_length),
            "back_tangent_length": round(metrics.back_tangent_length),
            "leg_angle": round(metrics.leg_angle_degrees),
            "back_angle": round(metrics.back_angle_degrees),
            "leg_arc_length": round(metrics.leg_arc_length),
            "back_arc_length": round(metrics.back_arc_length),
            "leg_arc_chord_length": round(metrics.leg_arc_chord_length),
            "back_arc_chord_length": round(metrics.back_arc_chord_length),
            "leg_arc_thickness": round(metrics.leg_arc_thickness),
            "back_arc_thickness": round(metrics.back_arc_thickness),
            "lath_count": self.lath_count,
            "remaining_length": round(self.remaining_length),
        }


def compute_design(controls: ControlPrimitives, config: LayoutConfig) -> Design:
    """
    Run the whole recompute pass.

    Raises:
        InvalidConfigurationError: If a radius or a lath/lintel dimension is not positive,
            or if the lintel thickness does not fit inside the knee arc.
        SilhouetteError: If no silhouette exists for `controls`.
    """
    config.validate()
    silhouette = build_silhouette(controls)
    # Knee arc is measured on its outer face; its inner radius must stay positive.
    knee_radius = silhouette.leg_arc.radius
    if config.lintel_thickness >= knee_radius:
        raise InvalidConfigurationError(
            f"Lintel thickness {config.lintel_thickness!r} must be lower than the knee arc radius {knee_radius!r}."
        )
    laths = layout_silhouette(silhouette, config)
    design = Design(
        controls=controls,
        config=config,
        silhouette=silhouette,
        metrics=SilhouetteMetrics.from_silhouette(silhouette),
        laths=laths,
    )
    logger.debug(f"Design recomputed: {design.lath_count} laths.")
    return design
