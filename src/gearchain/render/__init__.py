"""Presentation of a gear chain: geometry, readout, matplotlib drawing."""

from .profile import canvas_extent, canvas_size, outer_radius, tooth_polygons
from .readout import format_readout
from .renderer import GearRenderer
from .animation import FrameClock, Stopwatch, animate, save_animation, run_live

__all__ = [
    "canvas_extent",
    "canvas_size",
    "outer_radius",
    "tooth_polygons",
    "format_readout",
    "GearRenderer",
    "FrameClock",
    "Stopwatch",
    "animate",
    "save_animation",
    "run_live",
]
