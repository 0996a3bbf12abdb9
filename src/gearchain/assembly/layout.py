"""Layout solver for computing gear placements and speeds."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..models.spec import ChainSpec
from ..models.kinematic import Gear, GearChain

logger = logging.getLogger(__name__)


class ChainLayoutSolver:
    """Places gears in a single row and propagates the driving speed.

    The layout runs along the X axis:
    - The driving gear sits at (start_x, start_y)
    - Each following gear is pushed right by the sum of both pitch radii,
      so neighbouring pitch circles touch
    - Speed follows the meshing law: omega_i = -omega_{i-1} * n_{i-1} / n_i
    """

    def __init__(self, spec: ChainSpec):
        self.spec = spec

    def solve(self) -> GearChain:
        """Compute every gear in one pass over the tooth counts."""
        spec = self.spec
        gears: list[Gear] = []
        prev: Optional[Gear] = None

        for index, teeth in enumerate(spec.teeth):
            radius = teeth * spec.module / 2

            if prev is None:
                x = spec.start_x
                omega = spec.driving_omega
            else:
                x = prev.x + prev.radius + radius
                omega = -prev.omega * prev.teeth / teeth

            gear = Gear(
                index=index,
                teeth=teeth,
                radius=radius,
                x=x,
                y=spec.start_y,
                omega=omega,
                angle0=spec.initial_angle(index),
                color=spec.color_for(index),
            )
            logger.debug(
                "gear %d: %d teeth, r=%.3f, x=%.3f, omega=%.4f rad/s",
                index, teeth, radius, x, omega,
            )
            gears.append(gear)
            prev = gear

        chain = GearChain(name=spec.name, module=spec.module, gears=tuple(gears))
        logger.info(
            "Built chain '%s': %d gears, total ratio %.4f",
            chain.name, len(chain), chain.total_ratio,
        )
        return chain


def build_chain(
    teeth: Sequence[int],
    module: float,
    start: tuple[float, float] = (0.0, 0.0),
    driving_omega: float = 2 * math.pi,
    angle0: Optional[Sequence[float]] = None,
    name: str = "gear_chain",
) -> GearChain:
    """Validate the configuration and build the chain.

    Raises:
        ValueError: for an empty chain, a non-positive tooth count or module.
    """
    spec = ChainSpec(
        name=name,
        teeth=list(teeth),
        module=module,
        start_x=start[0],
        start_y=start[1],
        driving_omega=driving_omega,
        angle0=list(angle0) if angle0 is not None else None,
    )
    return ChainLayoutSolver(spec).solve()
