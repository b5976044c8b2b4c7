"""Graph model for package dependency relationships."""

from .model import DependencyGraph, edge_key

__all__ = ["DependencyGraph", "edge_key"]
