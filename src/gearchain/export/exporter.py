"""Export functionality for chain manifests and frame states."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable

from ..models.kinematic import GearChain

logger = logging.getLogger(__name__)


class StateExporter:
    """Exports a gear chain and its per-frame states to JSON."""

    def __init__(self, output_dir: Path):
        """Initialize exporter.

        Args:
            output_dir: Directory to write output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export(self, chain: GearChain, times: Iterable[float]) -> Dict[str, Path]:
        """Export the chain manifest and the gear states at each time.

        Args:
            chain: Gear chain to export
            times: Elapsed times to sample

        Returns:
            Dict mapping output name to file path
        """
        outputs: dict[str, Path] = {}
        outputs["chain_manifest.json"] = self._export_manifest(chain)
        outputs["states.json"] = self._export_states(chain, times)
        return outputs

    def _export_manifest(self, chain: GearChain) -> Path:
        """Export the static chain description."""
        path = self.output_dir / "chain_manifest.json"

        manifest: dict[str, Any] = {
            "name": chain.name,
            "module": chain.module,
            "total_ratio": chain.total_ratio,
            "coordinate_frame": {
                "origin": [0, 0],
                "x_axis": [1, 0],
                "y_axis": [0, 1],
                "angle_units": "rad",
                "time_units": "s",
            },
            "gears": [
                {
                    "index": gear.index,
                    "teeth": gear.teeth,
                    "radius": gear.radius,
                    "x": gear.x,
                    "y": gear.y,
                    "omega": gear.omega,
                    "angle0": gear.angle0,
                    "color": gear.color,
                }
                for gear in chain
            ],
        }

        with open(path, "w") as f:
            json.dump(manifest, f, indent=2)

        return path

    def _export_states(self, chain: GearChain, times: Iterable[float]) -> Path:
        """Export the state of every gear for each sampled time."""
        path = self.output_dir / "states.json"

        frames = [
            {"t": t, "gears": [state.to_dict() for state in chain.states_at(t)]}
            for t in times
        ]

        with open(path, "w") as f:
            json.dump({"name": chain.name, "frames": frames}, f, indent=2)

        logger.info("Exported %d frames to %s", len(frames), path)
        return path
