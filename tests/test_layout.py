"""Tests for chain layout solver."""

import logging
import math

import pytest

from gearchain.models.spec import ChainSpec
from gearchain.assembly.layout import ChainLayoutSolver, build_chain

TWO_PI = 2 * math.pi

ROW_TEETH = [50, 40, 60, 45, 70, 35, 55, 42, 65, 30]


@pytest.fixture
def spec_data():
    return {
        "name": "row",
        "teeth": ROW_TEETH,
        "module": 4,
        "start_x": 80,
        "start_y": 160,
        "driving_omega": TWO_PI,
    }


@pytest.fixture
def row_chain(spec_data):
    return ChainLayoutSolver(ChainSpec.model_validate(spec_data)).solve()


class TestRadius:
    """Pitch radius derives from teeth and module."""

    def test_radius_law(self, row_chain):
        for gear, teeth in zip(row_chain, ROW_TEETH):
            assert gear.radius == pytest.approx(teeth * 4 / 2)

    def test_driver_radius(self, row_chain):
        assert row_chain[0].radius == 100


class TestPlacement:
    """Adjacent pitch circles are tangent on a single row."""

    def test_driver_at_start(self, row_chain):
        assert row_chain[0].x == 80
        assert row_chain[0].y == 160

    def test_second_gear_x(self, row_chain):
        assert row_chain[1].x == 260

    def test_center_distance(self, row_chain):
        for prev, gear in zip(row_chain, list(row_chain)[1:]):
            assert gear.x - prev.x == pytest.approx(prev.radius + gear.radius)

    def test_single_row(self, row_chain):
        assert {gear.y for gear in row_chain} == {160}

    def test_positions_increase(self, row_chain):
        xs = [gear.x for gear in row_chain]
        assert xs == sorted(xs)


class TestSpeedPropagation:
    """Angular velocity follows the meshing law."""

    def test_driver_speed(self, row_chain):
        assert row_chain[0].omega == TWO_PI

    def test_meshing_law(self, row_chain):
        for prev, gear in zip(row_chain, list(row_chain)[1:]):
            assert gear.omega * gear.teeth == pytest.approx(-prev.omega * prev.teeth)

    def test_direction_alternates(self, row_chain):
        for i, gear in enumerate(row_chain):
            assert (gear.omega > 0) == (i % 2 == 0)

    def test_three_gear_speeds(self):
        chain = build_chain([80, 60, 40], module=1.0, driving_omega=TWO_PI)
        assert chain[1].omega == pytest.approx(-TWO_PI * 80 / 60)
        assert chain[1].omega == pytest.approx(-8.3776, abs=1e-4)
        assert chain[2].omega == pytest.approx(4 * math.pi)
        assert chain[2].omega == pytest.approx(12.566, abs=1e-3)

    def test_ratio_independent_of_module(self):
        small = build_chain([80, 60, 40], module=0.5)
        large = build_chain([80, 60, 40], module=10.0)
        assert [g.omega for g in small] == pytest.approx([g.omega for g in large])

    def test_chain_verifies(self, row_chain):
        assert row_chain.verify() == []


class TestSingleGear:
    """A one-gear chain has nothing to propagate."""

    def test_single_gear(self):
        chain = build_chain([24], module=2.0, start=(10, 20), driving_omega=1.5)
        assert len(chain) == 1
        assert chain[0].omega == 1.5
        assert chain[0].x == 10
        assert chain[0].radius == 24.0
        assert chain.total_ratio == 1.0
        assert chain.verify() == []


class TestBuildChain:
    """Tests for build_chain validation and options."""

    def test_angle0_applied(self):
        chain = build_chain([20, 30], module=1.0, angle0=[0.1, 0.2])
        assert chain[0].angle0 == 0.1
        assert chain[1].angle0 == 0.2
        assert chain[1].angle_at_time(0.0) == 0.2

    def test_default_angle0(self):
        chain = build_chain([20, 30], module=1.0)
        assert all(gear.angle0 == 0.0 for gear in chain)

    def test_rejects_zero_teeth(self):
        with pytest.raises(ValueError, match="non-positive tooth count"):
            build_chain([20, 0, 30], module=1.0)

    def test_rejects_negative_teeth(self):
        with pytest.raises(ValueError, match="non-positive tooth count"):
            build_chain([20, -3], module=1.0)

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="at least one gear"):
            build_chain([], module=1.0)

    def test_rejects_bad_module(self):
        with pytest.raises(ValueError):
            build_chain([20, 30], module=0.0)

    def test_rejects_infinite_module(self):
        with pytest.raises(ValueError):
            build_chain([20, 30], module=math.inf)

    def test_rejects_nan_driving_omega(self):
        with pytest.raises(ValueError):
            build_chain([20, 30], module=1.0, driving_omega=math.nan)

    def test_colors_assigned(self, spec_data):
        spec_data["colors"] = ["red", "green"]
        chain = ChainLayoutSolver(ChainSpec.model_validate(spec_data)).solve()
        assert chain[0].color == "red"
        assert chain[1].color == "green"
        assert chain[2].color == "red"

    def test_logs_construction(self, spec_data, caplog):
        with caplog.at_level(logging.INFO, logger="gearchain"):
            ChainLayoutSolver(ChainSpec.model_validate(spec_data)).solve()
        assert "Built chain 'row'" in caplog.text
