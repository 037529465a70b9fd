"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt) or of any drawing surface.
It deals with Circles, Tangents, Arcs and Lath layouts.
"""
