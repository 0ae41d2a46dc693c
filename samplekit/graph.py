"""A directed graph stored as a map from node to its set of successors."""

from __future__ import annotations

from collections import defaultdict


class Graph:
    """A directed graph of string-named nodes."""

    def __init__(self) -> None:
        self._edges: defaultdict[str, set[str]] = defaultdict(set)

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from ``src`` to ``dst``."""
        self._edges[src].add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from ``src`` to ``dst``."""
        edges = self._edges.get(src)
        return edges is not None and dst in edges