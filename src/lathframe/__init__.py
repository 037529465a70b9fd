"""
lathframe: a two-arc, three-tangent frame designer with continuous lath layout
and dimensioned blueprints of the frame pieces.
"""
__version__ = "0.1.0"
