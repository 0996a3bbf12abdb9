"""Tests for JSON state export."""

import json
import math

import pytest

from gearchain.assembly import build_chain
from gearchain.export.exporter import StateExporter


@pytest.fixture
def chain():
    return build_chain([80, 60, 40], module=2.0, start=(200, 200), name="trio")


class TestStateExporter:
    def test_writes_both_files(self, chain, tmp_path):
        outputs = StateExporter(tmp_path / "out").export(chain, [0.0, 0.5])
        assert set(outputs) == {"chain_manifest.json", "states.json"}
        assert all(path.exists() for path in outputs.values())

    def test_manifest(self, chain, tmp_path):
        outputs = StateExporter(tmp_path).export(chain, [0.0])
        manifest = json.loads(outputs["chain_manifest.json"].read_text())
        assert manifest["name"] == "trio"
        assert manifest["module"] == 2.0
        assert manifest["total_ratio"] == pytest.approx(2.0)
        assert [g["teeth"] for g in manifest["gears"]] == [80, 60, 40]
        assert manifest["gears"][1]["x"] == pytest.approx(340.0)

    def test_states(self, chain, tmp_path):
        outputs = StateExporter(tmp_path).export(chain, [0.0, 0.5])
        data = json.loads(outputs["states.json"].read_text())
        assert [frame["t"] for frame in data["frames"]] == [0.0, 0.5]

        second = data["frames"][1]["gears"]
        assert len(second) == 3
        assert second[0]["angle"] == pytest.approx(math.pi)
        assert second[0]["rotations"] == pytest.approx(0.5)
        assert set(second[0]) == {"index", "x", "y", "radius", "teeth", "angle", "rotations"}
