"""JSON exporter for dependency graphs (machine-friendly format)."""

import json
from typing import Any, Dict, List, Optional

from graph.model import DependencyGraph


def to_json(
    graph: DependencyGraph,
    module: Optional[str] = None,
    indent: int = 2,
) -> str:
    """
    Convert a dependency graph to JSON format.

    Args:
        graph: The dependency graph to export.
        module: Module name to record alongside the graph.
        indent: JSON indentation level.

    Returns:
        JSON string representation of the graph.
    """
    nodes: List[str] = sorted(graph.nodes)

    edges: List[Dict[str, str]] = [
        {"source": source, "target": target}
        for source, target in sorted(graph.iter_edges())
    ]

    data: Dict[str, Any] = {
        "module": module,
        "nodes": nodes,
        "edges": edges,
    }

    return json.dumps(data, indent=indent)
