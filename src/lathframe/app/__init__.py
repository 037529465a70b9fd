"""
The APP layer is the PySide6 desktop host.

It owns the Qt widgets and the state store; all geometry comes from the
model and controller layers, all drawing goes through the QPainter port.
"""
