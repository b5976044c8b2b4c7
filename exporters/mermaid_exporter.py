"""Mermaid flowchart exporter for dependency graphs."""

import re
from typing import Dict, List, Set

from graph.model import DependencyGraph


def to_mermaid(
    graph: DependencyGraph,
    orientation: str = "LR",
    group_by_directory: bool = False,
) -> str:
    """
    Convert a dependency graph to Mermaid flowchart syntax.

    Args:
        graph: The dependency graph to export.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).
        group_by_directory: If True, group packages by top-level directory.

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    node_ids = _assign_ids(sorted(graph.nodes))

    if group_by_directory:
        lines.extend(_generate_grouped_nodes(graph, node_ids))
    else:
        for node in sorted(graph.nodes):
            lines.append(f'    {node_ids[node]}["{node}"]')
        lines.append("")

    for source, target in sorted(graph.iter_edges()):
        lines.append(f"    {node_ids[source]} --> {node_ids[target]}")

    return "\n".join(lines)


def _assign_ids(nodes: List[str]) -> Dict[str, str]:
    """
    Map each node to a distinct Mermaid ID.

    Paths that sanitize to the same ID, such as ``a-b`` and ``a/b``, get a
    numeric suffix in node order: ``a_b``, ``a_b_2``, ``a_b_3``.
    """
    node_ids: Dict[str, str] = {}
    used: Set[str] = set()
    for node in nodes:
        base = _sanitize_id(node)
        candidate = base
        suffix = 2
        while candidate in used:
            candidate = f"{base}_{suffix}"
            suffix += 1
        used.add(candidate)
        node_ids[node] = candidate
    return node_ids


def _generate_grouped_nodes(graph: DependencyGraph, node_ids: Dict[str, str]) -> List[str]:
    """Generate node definitions inside subgraphs, one per top-level directory."""
    lines = []

    groups: Dict[str, Set[str]] = {}
    for node in graph.nodes:
        top_dir = node.split("/", 1)[0] if node != "." else "root"
        groups.setdefault(top_dir, set()).add(node)

    for group_name in sorted(groups):
        subgraph_id = "group_" + _sanitize_id(group_name)
        lines.append(f"    subgraph {subgraph_id}[{group_name}]")
        for node in sorted(groups[group_name]):
            lines.append(f'        {node_ids[node]}["{node}"]')
        lines.append("    end")
        lines.append("")

    return lines


def _sanitize_id(value: str) -> str:
    """
    Convert a directory path to a valid Mermaid node ID.

    Mermaid IDs can only contain letters, digits, and underscores.
    """
    if value == ".":
        return "root"
    # Replace path separators, dots and hyphens with underscores
    sanitized = re.sub(r"[/\\.\-]", "_", value)
    # Remove any remaining invalid characters
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    return sanitized or "unknown"
