"""Graph data model for directory dependency relationships."""

from typing import Dict, Iterator, List, Set, Tuple, Union


def edge_key(source: str, target: str) -> str:
    """Return the textual form used to deduplicate an edge."""
    return f"{source} -> {target}"


class DependencyGraph:
    """
    A directed graph of package directories.

    Nodes are module-relative directory paths, and edges represent
    'directory imports directory' relationships. Edges are keyed by their
    ``"src -> dst"`` text, so adding the same edge twice has no effect.
    Insertion order is preserved.
    """

    def __init__(self):
        self._edges: Dict[str, Tuple[str, str]] = {}

    @property
    def nodes(self) -> Set[str]:
        """Return every directory that appears in an edge."""
        nodes: Set[str] = set()
        for source, target in self._edges.values():
            nodes.add(source)
            nodes.add(target)
        return nodes

    @property
    def edges(self) -> Dict[str, Set[str]]:
        """Return adjacency list representation of edges."""
        adjacency: Dict[str, Set[str]] = {}
        for source, target in self._edges.values():
            adjacency.setdefault(source, set()).add(target)
        return adjacency

    @property
    def edge_keys(self) -> List[str]:
        """Return the textual edge keys in insertion order."""
        return list(self._edges)

    def add_edge(self, source: str, target: str) -> bool:
        """
        Add a directed edge from source to target.

        Returns:
            True if the edge was not already present.
        """
        key = edge_key(source, target)
        if key in self._edges:
            return False
        self._edges[key] = (source, target)
        return True

    def get_targets(self, source: str) -> Set[str]:
        """Get all directories that the source directory imports."""
        return {target for src, target in self._edges.values() if src == source}

    def get_sources(self, target: str) -> Set[str]:
        """Get all directories that import the target directory."""
        return {source for source, dst in self._edges.values() if dst == target}

    def get_roots(self) -> Set[str]:
        """Get directories that are never imported by another directory."""
        targets = {target for _, target in self._edges.values()}
        return self.nodes - targets

    def iter_edges(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all edges as (source, target) tuples in insertion order."""
        yield from self._edges.values()

    def __len__(self) -> int:
        """Return the number of edges in the graph."""
        return len(self._edges)

    def __contains__(self, edge: Union[str, Tuple[str, str]]) -> bool:
        """Check for an edge given as ``"src -> dst"`` text or a tuple."""
        if isinstance(edge, tuple):
            edge = edge_key(*edge)
        return edge in self._edges

    def __repr__(self) -> str:
        return f"DependencyGraph(nodes={len(self.nodes)}, edges={len(self._edges)})"
