"""Pydantic models for gear chain specification parsing and validation."""

from __future__ import annotations

import math
from typing import Optional

from matplotlib.colors import is_color_like
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_PALETTE = ["#00e5ff", "#ff4081", "#ffe082", "#44ffdd"]


def _check_color(value: str) -> str:
    if not is_color_like(value):
        raise ValueError(f"'{value}' is not a valid color")
    return value


class GearStyleSpec(BaseModel):
    """Drawing parameters shared by every gear in the chain."""

    model_config = ConfigDict(allow_inf_nan=False)

    rim_inset: float = Field(default=12.0, gt=0, description="Body disc inset from the pitch circle")
    tooth_depth: float = Field(default=14.0, gt=0, description="Radial length of each tooth")
    tooth_width: float = Field(default=6.0, gt=0, description="Tangential width of each tooth")
    hub_radius: float = Field(default=8.0, gt=0, description="Radius of the center hole")
    line_width: float = Field(default=2.0, gt=0, description="Outline width of the body disc")
    body_color: str = Field(default="#202020", description="Fill color of the body disc")
    hub_color: str = Field(default="#000000", description="Fill color of the center hole")
    background: str = Field(default="#111111", description="Canvas background color")

    @field_validator("body_color", "hub_color", "background")
    @classmethod
    def validate_color(cls, value: str) -> str:
        return _check_color(value)


class CanvasSpec(BaseModel):
    """Drawing surface settings."""

    model_config = ConfigDict(allow_inf_nan=False)

    margin: float = Field(default=20.0, ge=0, description="Blank border around the gear row")
    dpi: float = Field(default=100.0, gt=0, description="Pixels per inch for raster output")


class ChainSpec(BaseModel):
    """Top-level specification for a single-row gear chain."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(default="gear_chain", min_length=1, description="Chain identifier")
    teeth: list[int] = Field(description="Tooth count of each gear, driver first")
    module: float = Field(gt=0, description="Shared module (pitch diameter per tooth)")
    start_x: float = Field(default=0.0, description="X of the driving gear center")
    start_y: float = Field(default=0.0, description="Y of every gear center")
    driving_omega: float = Field(
        default=2 * math.pi, description="Angular velocity of the driving gear in rad/s"
    )
    angle0: Optional[list[float]] = Field(default=None, description="Initial angle of each gear")
    colors: Optional[list[str]] = Field(default=None, description="Gear colors, cycled")
    style: GearStyleSpec = Field(default_factory=GearStyleSpec)
    canvas: CanvasSpec = Field(default_factory=CanvasSpec)

    @field_validator("teeth")
    @classmethod
    def validate_teeth(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("gear chain requires at least one gear")
        for index, count in enumerate(value):
            if count < 1:
                raise ValueError(
                    f"gear {index} has non-positive tooth count {count}; "
                    "tooth counts must be >= 1"
                )
        return value

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is None:
            return value
        if not value:
            raise ValueError("colors must not be empty when given")
        for color in value:
            _check_color(color)
        return value

    @model_validator(mode="after")
    def validate_angle0(self) -> "ChainSpec":
        if self.angle0 is not None and len(self.angle0) != len(self.teeth):
            raise ValueError(
                f"angle0 has {len(self.angle0)} entries but the chain has "
                f"{len(self.teeth)} gears"
            )
        return self

    def color_for(self, index: int) -> str:
        """Get the color for the gear at ``index``, cycling the palette."""
        palette = self.colors or DEFAULT_PALETTE
        return palette[index % len(palette)]

    def initial_angle(self, index: int) -> float:
        """Get the initial angle of the gear at ``index``."""
        if self.angle0 is None:
            return 0.0
        return self.angle0[index]
