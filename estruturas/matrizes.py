"""Graphs stored as adjacency matrices, with the classroom examples."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

SMALL_EDGES = ((0, 1), (0, 2), (1, 2), (2, 3))
LARGE_EDGES = ((0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4))
TITLE = "Matriz de Adjacencia:"


class AdjacencyMatrix:
    """Square 0/1 matrix of edges between ``size`` vertices."""

    def __init__(self, size: int, directed: bool = False) -> None:
        if size < 0:
            raise ValueError(f"numero de vertices invalido: {size}")
        self.size = size
        self.directed = directed
        self._cells: list[list[int]] = [[0] * size for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise IndexError(f"vertice invalido: {vertex}")

    def add_edge(self, origin: int, destination: int) -> None:
        """Mark an edge; undirected graphs also get the opposite one."""
        self._check(origin)
        self._check(destination)
        self._cells[origin][destination] = 1
        if not self.directed:
            self._cells[destination][origin] = 1

    def has_edge(self, origin: int, destination: int) -> bool:
        self._check(origin)
        self._check(destination)
        return self._cells[origin][destination] == 1

    def rows(self) -> list[list[int]]:
        """A copy of the matrix, row by row."""
        return [list(row) for row in self._cells]

    def format(self) -> str:
        return "".join(
            "".join(f"{cell} " for cell in row) + "\n" for row in self._cells
        )


@dataclass(frozen=True)
class _Example:
    size: int
    edges: tuple[tuple[int, int], ...]
    directed: bool
    title: str
    pauses: bool


EXAMPLES: dict[str, _Example] = {
    "adjacencia": _Example(4, SMALL_EDGES, False, "Matriz de Adjacência:", True),
    "nao_direcionado": _Example(4, SMALL_EDGES, False, TITLE, True),
    "direcionado": _Example(4, SMALL_EDGES, True, TITLE, True),
    "grafo": _Example(5, LARGE_EDGES, False, TITLE, True),
    "grafo_aula9": _Example(5, LARGE_EDGES, False, TITLE, False),
}


def _spec(name: str) -> _Example:
    try:
        return EXAMPLES[name]
    except KeyError:
        raise KeyError(f"exemplo desconhecido: {name}") from None


def example(name: str) -> AdjacencyMatrix:
    """Build one of the named demonstration graphs."""
    spec = _spec(name)
    matrix = AdjacencyMatrix(spec.size, directed=spec.directed)
    for origin, destination in spec.edges:
        matrix.add_edge(origin, destination)
    return matrix


def run(name: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Print a named example matrix, waiting for Enter where the demo does."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    spec = _spec(name)
    stdout.write(f"{spec.title}\n")
    stdout.write(example(name).format())
    stdout.flush()
    if spec.pauses:
        stdin.readline()