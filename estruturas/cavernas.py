"""Cave system stored as an adjacency matrix and explored depth first."""

from __future__ import annotations

import random
import sys
from collections import deque
from typing import Iterator, NamedTuple, TextIO

NUM_CAVES = 20

MENU = (
    "\nSistema de Navegacao em Cavernas:\n"
    "1. Inicializar Sistema de Cavernas\n"
    "2. Adicionar Passagem entre Cavernas\n"
    "3. Criar Passagens Aleatorias\n"
    "4. Iniciar Exploracao\n"
    "5. Exibir Nos e Arestas\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)


class Step(NamedTuple):
    """One move of an exploration; ``origin`` is None for the starting cave."""

    origin: int | None
    cave: int


class CaveSystem:
    """Undirected passages between a fixed number of caves."""

    def __init__(self, size: int = NUM_CAVES) -> None:
        if size < 0:
            raise ValueError(f"numero de cavernas invalido: {size}")
        self.size = size
        self._passages: list[list[bool]] = []
        self.reset()

    def _check(self, cave: int) -> None:
        if not 0 <= cave < self.size:
            raise IndexError(f"Caverna invalida: {cave}")

    def reset(self) -> None:
        """Remove every passage."""
        self._passages = [[False] * self.size for _ in range(self.size)]

    def add_passage(self, origin: int, destination: int) -> None:
        self._check(origin)
        self._check(destination)
        self._passages[origin][destination] = True
        self._passages[destination][origin] = True

    def add_random_passages(self, rng: random.Random | None = None) -> None:
        """Give each cave one or two new passages to other, not yet linked caves."""
        rng = random.Random() if rng is None else rng
        for cave in range(self.size):
            for _ in range(rng.randrange(2) + 1):
                row = self._passages[cave]
                if all(row[other] for other in range(self.size) if other != cave):
                    break
                while True:
                    destination = rng.randrange(self.size)
                    if destination != cave and not row[destination]:
                        break
                self.add_passage(cave, destination)

    def explore(self, start: int) -> list[Step]:
        """Depth-first walk from ``start``, neighbours taken in ascending order."""
        self._check(start)
        visited = {start}
        steps = [Step(None, start)]
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(self.size)))]
        while stack:
            cave, candidates = stack[-1]
            for neighbor in candidates:
                if self._passages[cave][neighbor] and neighbor not in visited:
                    visited.add(neighbor)
                    steps.append(Step(cave, neighbor))
                    stack.append((neighbor, iter(range(self.size))))
                    break
            else:
                stack.pop()
        return steps

    def edges(self) -> list[tuple[int, int]]:
        """Every (origin, destination) pair with a passage, row by row."""
        return [
            (origin, destination)
            for origin, row in enumerate(self._passages)
            for destination, linked in enumerate(row)
            if linked
        ]


class _Tokens:
    """Whitespace-separated reader over a text stream."""

    def __init__(self, stdin: TextIO) -> None:
        self._stdin = stdin
        self._pending: deque[str] = deque()

    def _next(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def option(self) -> int | None:
        try:
            return int(self._next())
        except ValueError:
            return None

    def number(self) -> int:
        while True:
            try:
                return int(self._next())
            except ValueError:
                continue

    def pause(self) -> None:
        """Wait for the user to press Enter; end of input does not block."""
        self._pending.clear()
        self._stdin.readline()


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """Interactive menu over a cave system."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    rng = random.Random() if rng is None else rng
    tokens = _Tokens(stdin)
    caves = CaveSystem()
    last = caves.size - 1

    try:
        while True:
            stdout.write(MENU)
            option = tokens.option()
            if option == 1:
                caves.reset()
                stdout.write("Sistema de cavernas inicializado com sucesso!\n")
            elif option == 2:
                stdout.write(
                    f"Digite a caverna de origem e destino da passagem (0 a {last}): "
                )
                origin = tokens.number()
                destination = tokens.number()
                try:
                    caves.add_passage(origin, destination)
                except IndexError:
                    stdout.write("Cavernas invalidas!\n")
                else:
                    stdout.write("Passagem adicionada com sucesso!\n")
            elif option == 3:
                caves.add_random_passages(rng)
                stdout.write("Passagens aleatorias criadas com sucesso!\n")
            elif option == 4:
                stdout.write(
                    f"Digite a caverna inicial para a exploracao (0 a {last}): "
                )
                start = tokens.number()
                try:
                    steps = caves.explore(start)
                except IndexError:
                    stdout.write("Caverna invalida!\n")
                else:
                    stdout.write(f"Iniciando exploracao a partir da caverna {start}\n")
                    for step in steps:
                        if step.origin is not None:
                            stdout.write(f"Passagem de {step.origin} para {step.cave}\n")
                            stdout.flush()
                            tokens.pause()
                        stdout.write(f"Explorando caverna {step.cave}\n")
            elif option == 5:
                stdout.write("Nos e arestas do sistema de cavernas:\n")
                for origin, destination in caves.edges():
                    stdout.write(f"Caverna {origin} -> Caverna {destination}\n")
            elif option == 0:
                stdout.write("Saindo...\n")
                return
            else:
                stdout.write("Opcao invalida!\n")
            stdout.flush()
            tokens.pause()
    except EOFError:
        return