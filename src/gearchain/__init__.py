"""Kinematic model and renderer for an animated row of meshed gears."""

from .models import ChainSpec, Gear, GearChain, GearState, angle_at_time, rotations_at_time
from .assembly import ChainLayoutSolver, build_chain

__version__ = "0.1.0"

__all__ = [
    "ChainSpec",
    "Gear",
    "GearChain",
    "GearState",
    "angle_at_time",
    "rotations_at_time",
    "ChainLayoutSolver",
    "build_chain",
]
