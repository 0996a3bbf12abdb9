"""Matplotlib renderer for a gear chain."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from matplotlib.artist import Artist
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from ..models.kinematic import GearChain
from ..models.spec import CanvasSpec, GearStyleSpec
from .profile import body_radius, canvas_extent, tooth_polygons
from .readout import format_readout

logger = logging.getLogger(__name__)


class GearRenderer:
    """Draws the chain at any elapsed time.

    One world unit maps to one pixel. Static artists (body discs, hubs) are
    created once; ``render`` only moves the teeth and rewrites the readout.
    """

    def __init__(
        self,
        chain: GearChain,
        style: Optional[GearStyleSpec] = None,
        canvas: Optional[CanvasSpec] = None,
        figure: Optional[Figure] = None,
    ):
        """Initialize renderer.

        Args:
            chain: The gear chain to draw
            style: Drawing parameters. Defaults to GearStyleSpec()
            canvas: Margin and DPI. Defaults to CanvasSpec()
            figure: Figure to draw into. A headless Agg figure is created if omitted.
        """
        self.chain = chain
        self.style = style or GearStyleSpec()
        self.canvas = canvas or CanvasSpec()

        xmin, xmax, ymin, ymax = canvas_extent(chain, self.style, self.canvas.margin)
        self.extent = (xmin, xmax, ymin, ymax)
        width_in = (xmax - xmin) / self.canvas.dpi
        height_in = (ymax - ymin) / self.canvas.dpi

        if figure is None:
            figure = Figure(figsize=(width_in, height_in), dpi=self.canvas.dpi)
            FigureCanvasAgg(figure)
        else:
            figure.set_size_inches(width_in, height_in)
            figure.set_dpi(self.canvas.dpi)
        self.figure = figure
        self.figure.set_facecolor(self.style.background)

        self.axes = self.figure.add_axes([0, 0, 1, 1])
        self.axes.set_xlim(xmin, xmax)
        self.axes.set_ylim(ymin, ymax)
        self.axes.set_aspect("equal")
        self.axes.set_facecolor(self.style.background)
        self.axes.set_axis_off()

        self._teeth: list[PolyCollection] = []
        for gear in chain:
            self.axes.add_patch(Circle(
                (gear.x, gear.y),
                body_radius(gear, self.style),
                facecolor=self.style.body_color,
                edgecolor=gear.color,
                linewidth=self.style.line_width,
                zorder=1,
            ))
            teeth = PolyCollection(
                tooth_polygons(gear, gear.angle0, self.style),
                facecolors=gear.color,
                edgecolors="none",
                zorder=2,
            )
            self.axes.add_collection(teeth)
            self._teeth.append(teeth)
            self.axes.add_patch(Circle(
                (gear.x, gear.y),
                self.style.hub_radius,
                facecolor=self.style.hub_color,
                edgecolor="none",
                zorder=3,
            ))

        self.readout = self.axes.text(
            0.01, 0.99, "",
            transform=self.axes.transAxes,
            ha="left",
            va="top",
            family="monospace",
            fontsize=9,
            color="white",
            zorder=4,
        )
        logger.debug(
            "Renderer ready: %d gears, extent x=[%.1f, %.1f] y=[%.1f, %.1f]",
            len(chain), xmin, xmax, ymin, ymax,
        )

    def render(self, t: float) -> list[Artist]:
        """Redraw every gear at elapsed time ``t``. Returns the changed artists."""
        for gear, teeth in zip(self.chain, self._teeth):
            teeth.set_verts(tooth_polygons(gear, gear.angle_at_time(t), self.style))
        self.readout.set_text("\n".join(format_readout(self.chain, t)))
        return [*self._teeth, self.readout]

    def save_frame(self, t: float, path: Path) -> Path:
        """Render time ``t`` and write it as an image (format from the suffix)."""
        path = Path(path)
        self.render(t)
        self.figure.savefig(str(path), facecolor=self.figure.get_facecolor())
        logger.info("Saved frame t=%.3f to %s", t, path)
        return path
