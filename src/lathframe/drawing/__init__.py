"""
The DRAWING layer turns the model into strokes and text.

Everything is expressed through the `DrawingPort` protocol, which mirrors the
2D canvas API: the blueprints and the scene renderer never touch a concrete
surface. Adapters exist for QPainter (desktop), matplotlib (file export) and a
recording port used by headless tests.
"""
from lathframe.drawing.port import DrawCommand, DrawingPort, RecordingPort, TextMetrics

__all__ = ["DrawCommand", "DrawingPort", "RecordingPort", "TextMetrics"]
