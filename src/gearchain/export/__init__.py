"""Export of chain data and per-frame gear states."""

from .exporter import StateExporter

__all__ = ["StateExporter"]
