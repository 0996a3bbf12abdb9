"""Gear chain construction."""

from .layout import ChainLayoutSolver, build_chain

__all__ = ["ChainLayoutSolver", "build_chain"]
