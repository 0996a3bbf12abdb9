"""Frame scheduling for gear chain animations."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from matplotlib.animation import FuncAnimation, PillowWriter

from .renderer import GearRenderer

logger = logging.getLogger(__name__)


def check_fps(fps: float) -> float:
    if not fps > 0:
        raise ValueError(f"fps must be positive, got {fps}")
    return fps


@dataclass(frozen=True)
class FrameClock:
    """Fixed-rate frame times over a time window."""

    fps: float
    duration: float
    start: float = 0.0

    def __post_init__(self):
        check_fps(self.fps)
        if self.duration < 0:
            raise ValueError(f"duration cannot be negative, got {self.duration}")

    @property
    def frame_count(self) -> int:
        # At least one frame, so a zero duration still renders t=start
        return max(1, int(round(self.duration * self.fps)))

    @property
    def interval_ms(self) -> float:
        return 1000.0 / self.fps

    def times(self) -> Iterator[float]:
        """Yield monotonically increasing elapsed times, one per frame."""
        for i in range(self.frame_count):
            yield self.start + i / self.fps


class Stopwatch:
    """Turns millisecond timestamps into seconds since the first tick."""

    def __init__(self):
        self._origin: Optional[float] = None

    def tick(self, timestamp_ms: float) -> float:
        if self._origin is None:
            self._origin = timestamp_ms
        return (timestamp_ms - self._origin) / 1000.0

    def reset(self) -> None:
        self._origin = None


def animate(renderer: GearRenderer, clock: FrameClock, repeat: bool = False) -> FuncAnimation:
    """Build an animation that renders one frame per clock time."""
    times = list(clock.times())
    return FuncAnimation(
        renderer.figure,
        renderer.render,
        frames=times,
        interval=clock.interval_ms,
        repeat=repeat,
        blit=False,
    )


def save_animation(renderer: GearRenderer, clock: FrameClock, path: Path) -> Path:
    """Render every frame of ``clock`` into an animated GIF."""
    path = Path(path)
    animation = animate(renderer, clock)
    logger.info("Writing %d frames at %.1f fps to %s", clock.frame_count, clock.fps, path)
    animation.save(str(path), writer=PillowWriter(fps=clock.fps))
    return path


def _wall_clock_frames(stopwatch: Stopwatch) -> Iterator[float]:
    while True:
        yield stopwatch.tick(time.perf_counter() * 1000.0)


def run_live(renderer: GearRenderer, fps: float = 60.0) -> FuncAnimation:
    """Animate in real time until the window is closed.

    The renderer must draw into a pyplot-managed figure.
    """
    check_fps(fps)
    import matplotlib.pyplot as plt

    stopwatch = Stopwatch()
    animation = FuncAnimation(
        renderer.figure,
        renderer.render,
        frames=_wall_clock_frames(stopwatch),
        interval=1000.0 / fps,
        cache_frame_data=False,
        blit=False,
    )
    plt.show()
    return animation
