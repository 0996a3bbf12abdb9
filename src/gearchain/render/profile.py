"""Drawable gear geometry in world coordinates."""

from __future__ import annotations

import math

from ..models.kinematic import Gear, GearChain
from ..models.spec import GearStyleSpec

Point = tuple[float, float]


def body_radius(gear: Gear, style: GearStyleSpec) -> float:
    """Radius of the body disc the teeth stand on."""
    return max(gear.radius - style.rim_inset, 0.0)


def outer_radius(gear: Gear, style: GearStyleSpec) -> float:
    """Radius of the tooth tips."""
    return body_radius(gear, style) + style.tooth_depth


def tooth_polygons(gear: Gear, angle: float, style: GearStyleSpec) -> list[list[Point]]:
    """Corners of every tooth rectangle, rotated by ``angle`` about the gear center.

    Tooth ``i`` is centered on the ray at ``angle + i * 2*pi/teeth`` and spans
    ``tooth_depth`` outward from the body disc.
    """
    inner = body_radius(gear, style)
    outer = inner + style.tooth_depth
    half_width = style.tooth_width / 2
    step = 2 * math.pi / gear.teeth

    # Rectangle in the tooth's own frame (radial along +x)
    local = [
        (inner, -half_width),
        (outer, -half_width),
        (outer, half_width),
        (inner, half_width),
    ]

    polygons = []
    for i in range(gear.teeth):
        theta = angle + i * step
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        polygons.append([
            (gear.x + u * cos_t - v * sin_t, gear.y + u * sin_t + v * cos_t)
            for u, v in local
        ])
    return polygons


def canvas_extent(
    chain: GearChain, style: GearStyleSpec, margin: float = 0.0
) -> tuple[float, float, float, float]:
    """Bounding box (xmin, xmax, ymin, ymax) of the whole row, teeth included."""
    xmin = min(gear.x - outer_radius(gear, style) for gear in chain)
    xmax = max(gear.x + outer_radius(gear, style) for gear in chain)
    ymin = min(gear.y - outer_radius(gear, style) for gear in chain)
    ymax = max(gear.y + outer_radius(gear, style) for gear in chain)
    return (xmin - margin, xmax + margin, ymin - margin, ymax + margin)


def canvas_size(chain: GearChain, style: GearStyleSpec, margin: float = 0.0) -> tuple[float, float]:
    """Width and height of a drawing surface that fits the whole row."""
    xmin, xmax, ymin, ymax = canvas_extent(chain, style, margin)
    return (xmax - xmin, ymax - ymin)
