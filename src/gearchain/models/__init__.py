"""Data models for the gear chain."""

from .spec import ChainSpec, GearStyleSpec, CanvasSpec
from .kinematic import Gear, GearChain, GearState, angle_at_time, rotations_at_time

__all__ = [
    "ChainSpec",
    "GearStyleSpec",
    "CanvasSpec",
    "Gear",
    "GearChain",
    "GearState",
    "angle_at_time",
    "rotations_at_time",
]
