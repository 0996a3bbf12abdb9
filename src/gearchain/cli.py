"""CLI entry point for the gear chain animator."""

import logging
import math
from pathlib import Path

import typer
import yaml

from .logging_config import setup_logging

app = typer.Typer(
    name="gearchain",
    help="Gear chain animator - builds a meshed gear row from a spec and renders it over time",
)

DEFAULT_SPEC = Path("examples/gear_row.yaml")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
    log_file: Path = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Gear chain animator."""
    setup_logging(
        logging.DEBUG if verbose else logging.WARNING,
        str(log_file) if log_file else None,
    )


def _load_spec(spec_file: Path):
    """Load and validate a YAML chain specification, exiting on failure."""
    from .models import ChainSpec

    if not spec_file.exists():
        typer.echo(f"Error: Specification file not found: {spec_file}", err=True)
        raise typer.Exit(1)

    with open(spec_file) as f:
        try:
            spec_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            typer.echo(f"Error: Could not parse {spec_file}: {e}", err=True)
            raise typer.Exit(1)

    try:
        return ChainSpec.model_validate(spec_data or {})
    except ValueError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)


def _build(spec_file: Path):
    from .assembly import ChainLayoutSolver

    spec = _load_spec(spec_file)
    return spec, ChainLayoutSolver(spec).solve()


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to YAML specification file"),
) -> None:
    """Validate specification file without rendering."""
    typer.echo(f"Validating specification from {spec_file}...")
    spec = _load_spec(spec_file)
    typer.echo(f"Specification valid: {spec.name}")
    typer.echo(f"  Gears: {len(spec.teeth)}")
    typer.echo(f"  Teeth: {', '.join(str(n) for n in spec.teeth)}")
    typer.echo(f"  Module: {spec.module}")


@app.command()
def info(
    spec_file: Path = typer.Argument(DEFAULT_SPEC, help="Path to YAML specification file"),
) -> None:
    """Print radius, position and speed of every gear."""
    _, chain = _build(spec_file)

    typer.echo(f"Chain: {chain.name} (module {chain.module})\n")
    typer.echo(f"  {'#':>3} {'teeth':>6} {'radius':>9} {'x':>9} {'y':>9} {'omega':>10} {'rev/s':>8}")
    for gear in chain:
        typer.echo(
            f"  {gear.index + 1:>3} {gear.teeth:>6} {gear.radius:>9.2f} {gear.x:>9.2f} "
            f"{gear.y:>9.2f} {gear.omega:>10.4f} {gear.omega / (2 * math.pi):>8.4f}"
        )
    typer.echo(f"\nTotal ratio: {chain.total_ratio:.4f}")

    errors = chain.verify()
    if errors:
        typer.echo("Meshing check FAILED:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(1)
    typer.echo("Meshing check: OK")


@app.command()
def render(
    spec_file: Path = typer.Argument(DEFAULT_SPEC, help="Path to YAML specification file"),
    time_s: float = typer.Option(0.0, "-t", "--time", help="Elapsed time in seconds"),
    output: Path = typer.Option(Path("frame.png"), "-o", "--output", help="Output image path"),
) -> None:
    """Render a single frame to an image."""
    from .render import GearRenderer

    spec, chain = _build(spec_file)
    renderer = GearRenderer(chain, spec.style, spec.canvas)
    renderer.save_frame(time_s, output)
    typer.echo(f"Frame t={time_s:.2f}s written to {output}")


@app.command()
def animate(
    spec_file: Path = typer.Argument(DEFAULT_SPEC, help="Path to YAML specification file"),
    duration: float = typer.Option(2.0, "-d", "--duration", help="Animation length in seconds"),
    fps: float = typer.Option(30.0, "--fps", help="Frames per second"),
    output: Path = typer.Option(Path("gears.gif"), "-o", "--output", help="Output GIF path"),
) -> None:
    """Render an animated GIF."""
    from .render import FrameClock, GearRenderer, save_animation

    spec, chain = _build(spec_file)
    try:
        clock = FrameClock(fps=fps, duration=duration)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    renderer = GearRenderer(chain, spec.style, spec.canvas)
    typer.echo(f"Rendering {clock.frame_count} frames...")
    save_animation(renderer, clock, output)
    typer.echo(f"Animation written to {output}")


@app.command()
def export(
    spec_file: Path = typer.Argument(DEFAULT_SPEC, help="Path to YAML specification file"),
    duration: float = typer.Option(1.0, "-d", "--duration", help="Sampled time span in seconds"),
    fps: float = typer.Option(10.0, "--fps", help="Samples per second"),
    output_dir: Path = typer.Option(Path("output"), "-o", "--output", help="Output directory"),
) -> None:
    """Export the chain and its per-frame gear states as JSON."""
    from .export import StateExporter
    from .render import FrameClock

    _, chain = _build(spec_file)
    try:
        clock = FrameClock(fps=fps, duration=duration)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    outputs = StateExporter(output_dir).export(chain, clock.times())
    for name, path in outputs.items():
        typer.echo(f"  {name}: {path}")


@app.command()
def show(
    spec_file: Path = typer.Argument(DEFAULT_SPEC, help="Path to YAML specification file"),
    fps: float = typer.Option(60.0, "--fps", help="Target frame rate"),
) -> None:
    """Open a window and animate the chain in real time."""
    import matplotlib.pyplot as plt

    from .render import GearRenderer, run_live
    from .render.animation import check_fps

    spec, chain = _build(spec_file)
    try:
        check_fps(fps)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    renderer = GearRenderer(chain, spec.style, spec.canvas, figure=plt.figure())
    run_live(renderer, fps=fps)


if __name__ == "__main__":
    app()
