"""Undirected graph stored as adjacency lists."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

EXAMPLE_VERTICES = 5
EXAMPLE_EDGES = ((0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4))


class AdjacencyList:
    """Undirected graph; each new neighbour goes to the front of its list."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"numero de vertices invalido: {vertices}")
        self._adjacent: list[deque[int]] = [deque() for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacent):
            raise IndexError(f"vertice invalido: {vertex}")

    def add_edge(self, src: int, dest: int) -> None:
        self._check(src)
        self._check(dest)
        self._adjacent[src].appendleft(dest)
        self._adjacent[dest].appendleft(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacent[vertex])

    def format(self) -> str:
        return "".join(
            f"\n Lista de adjacencia do vertice {vertex}\n"
            + "".join(f"-> {neighbor}" for neighbor in neighbors)
            + "\n"
            for vertex, neighbors in enumerate(self._adjacent)
        )


def example_graph() -> AdjacencyList:
    """The five-vertex graph used in the demonstration."""
    graph = AdjacencyList(EXAMPLE_VERTICES)
    for src, dest in EXAMPLE_EDGES:
        graph.add_edge(src, dest)
    return graph


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Print the example graph and wait for Enter."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(example_graph().format())
    stdout.flush()
    stdin.readline()