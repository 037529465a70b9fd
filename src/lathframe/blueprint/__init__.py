"""
Dimensioned blueprints of the frame pieces.
"""
from lathframe.blueprint.arc_lintel import ArcLintel
from lathframe.blueprint.base import Blueprint, MeasureLayout, MeasureStyle, plan_measure
from lathframe.blueprint.sheet import BlueprintSheet
from lathframe.blueprint.straight_lintel import StraightLintel

__all__ = [
    "ArcLintel",
    "Blueprint",
    "BlueprintSheet",
    "MeasureLayout",
    "MeasureStyle",
    "StraightLintel",
    "plan_measure",
]
