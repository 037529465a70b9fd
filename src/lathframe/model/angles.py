"""Named fractions of a full turn and degree/radian conversions."""
from math import pi

SIXTEENTH_CIRCLE = pi / 8
EIGHTH_CIRCLE = pi / 4
QUARTER_CIRCLE = pi / 2
HALF_CIRCLE = pi
FULL_CIRCLE = pi * 2

RADIAN_TO_DEGREE = 180 / pi
DEGREE_TO_RADIAN = pi / 180


def deg2rad(degrees: float) -> float:
    return degrees * DEGREE_TO_RADIAN


def rad2deg(radians: float) -> float:
    return radians * RADIAN_TO_DEGREE
