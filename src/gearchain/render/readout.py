"""Text overlay with elapsed time and rotation counts."""

from ..models.kinematic import GearChain


def format_readout(chain: GearChain, t: float) -> list[str]:
    lines = [f"t = {t:.2f} s"]
    for gear in chain:
        lines.append(
            f"gear {gear.index + 1} ({gear.teeth}T): {gear.rotations_at_time(t):.2f} rev"
        )
    return lines
