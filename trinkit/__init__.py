"""Game-side vector, matrix and quaternion maths, easing, timing, scenes, HUD and spawn logic."""

__version__ = "0.1.0"