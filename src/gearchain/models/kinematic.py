"""Kinematic model of a meshed gear chain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

TWO_PI = 2 * math.pi

# Relative tolerance used by GearChain.verify
VERIFY_TOLERANCE = 1e-9


def angle_at_time(gear: "Gear", t: float) -> float:
    """Rotation angle of ``gear`` in radians after ``t`` seconds.

    Linear in ``t`` with no wraparound; negative and out-of-order times are valid.
    """
    return gear.angle0 + gear.omega * t


def rotations_at_time(gear: "Gear", t: float) -> float:
    """Number of revolutions completed after ``t`` seconds (signed, unreduced)."""
    return angle_at_time(gear, t) / TWO_PI


@dataclass(frozen=True)
class GearState:
    """Per-frame output for a single gear."""

    index: int
    x: float
    y: float
    radius: float
    teeth: int
    angle: float
    rotations: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "teeth": self.teeth,
            "angle": self.angle,
            "rotations": self.rotations,
        }


@dataclass(frozen=True)
class Gear:
    """A gear placed in the chain."""

    index: int
    teeth: int
    radius: float  # Pitch radius
    x: float
    y: float
    omega: float  # rad/s, positive = counterclockwise
    angle0: float = 0.0
    color: str = "#44ffdd"

    def angle_at_time(self, t: float) -> float:
        return angle_at_time(self, t)

    def rotations_at_time(self, t: float) -> float:
        return rotations_at_time(self, t)

    def state_at(self, t: float) -> GearState:
        """Get position, size and current angle of this gear at time ``t``."""
        angle = angle_at_time(self, t)
        return GearState(
            index=self.index,
            x=self.x,
            y=self.y,
            radius=self.radius,
            teeth=self.teeth,
            angle=angle,
            rotations=angle / TWO_PI,
        )


@dataclass(frozen=True)
class GearChain:
    """Immutable row of meshed gears driven by the first gear."""

    name: str
    module: float
    gears: tuple[Gear, ...]

    def __post_init__(self):
        if not self.gears:
            raise ValueError(f"gear chain '{self.name}' requires at least one gear")

    def __len__(self) -> int:
        return len(self.gears)

    def __iter__(self) -> Iterator[Gear]:
        return iter(self.gears)

    def __getitem__(self, index: int) -> Gear:
        return self.gears[index]

    @property
    def driver(self) -> Gear:
        """The driving gear."""
        return self.gears[0]

    @property
    def total_ratio(self) -> float:
        """Signed speed ratio from the driver to the last gear."""
        return self.ratio(0, len(self.gears) - 1)

    def ratio(self, i: int, j: int) -> float:
        """Signed speed ratio omega_j / omega_i (negative = opposite direction)."""
        gear_i = self.gears[i]
        gear_j = self.gears[j]
        # omega * teeth is conserved along the chain, up to sign
        sign = -1.0 if abs(j - i) % 2 else 1.0
        return sign * gear_i.teeth / gear_j.teeth

    def states_at(self, t: float) -> list[GearState]:
        """Get the state of every gear at time ``t``."""
        return [gear.state_at(t) for gear in self.gears]

    def angles_at(self, t: float) -> list[float]:
        return [angle_at_time(gear, t) for gear in self.gears]

    def verify(self) -> list[str]:
        """Verify the chain is properly meshed. Returns list of errors."""
        errors = []

        for gear in self.gears:
            expected_radius = gear.teeth * self.module / 2
            if not math.isclose(gear.radius, expected_radius, rel_tol=VERIFY_TOLERANCE):
                errors.append(
                    f"Gear {gear.index}: radius {gear.radius} does not match "
                    f"module {self.module} x {gear.teeth} teeth / 2 = {expected_radius}"
                )

        for prev, gear in zip(self.gears, self.gears[1:]):
            center_distance = gear.x - prev.x
            expected_distance = prev.radius + gear.radius
            if not math.isclose(center_distance, expected_distance, rel_tol=VERIFY_TOLERANCE):
                errors.append(
                    f"Gears {prev.index}-{gear.index}: center distance {center_distance} "
                    f"!= pitch radius sum {expected_distance}"
                )
            if gear.y != prev.y:
                errors.append(
                    f"Gears {prev.index}-{gear.index}: not on a single row "
                    f"(y={prev.y} vs y={gear.y})"
                )

            driven = gear.omega * gear.teeth
            driving = -prev.omega * prev.teeth
            if not math.isclose(driven, driving, rel_tol=VERIFY_TOLERANCE, abs_tol=1e-12):
                errors.append(
                    f"Gears {prev.index}-{gear.index}: meshing law violated "
                    f"(omega*teeth {driven} vs {driving})"
                )

        return errors
