"""Singly linked list of integers with an interactive demonstration menu."""

from __future__ import annotations

import random
from typing import Callable, Iterable, Iterator, TextIO

from estruturas.pilha_urls import _serve, _Store, _streams, _TokenReader

RANDOM_COUNT = 30
RANDOM_LIMIT = 100
POSITION_PROMPT = "Digite a posicao em que deseja inserir (0 para inicio): "
INSERTED_MESSAGE = "Valor inserido com sucesso.\n"


def _menu(*entries: str) -> str:
    """Numbered menu framed the way every integer demonstration shows it."""
    return "\nMenu:\n" + "".join(f"{entry}\n" for entry in entries) + "0. Sair\nEscolha uma opcao: "


MENU = _menu(
    "1. Incluir varios numeros",
    "2. Incluir um numero",
    "3. Incluir 30 numeros aleatorios",
    "4. Exibe a Lista",
)


def _random_values(rng: random.Random | None, count: int) -> list[int]:
    rng = random.Random() if rng is None else rng
    return [rng.randrange(RANDOM_LIMIT) for _ in range(count)]


def _format_chain(values: Iterable[int], separator: str) -> str:
    """Values joined as a chain of nodes ending in NULL."""
    return separator.join([*map(str, values), "NULL"])


class _IntChain(_Store):
    """Integers held in order, with bounds-checked insertion."""

    def _insert_checked(self, value: int, index: int, last: int, requested: int | None = None) -> None:
        if not 0 <= index <= last:
            raise IndexError(f"Posicao invalida: {index if requested is None else requested}")
        self._items.insert(index, value)


class LinkedList(_IntChain):
    """Integer list that grows at its tail."""

    def append(self, value: int) -> None:
        self._items.append(value)

    def insert_at(self, value: int, pos: int) -> None:
        """Insert ``value`` so that it lands at index ``pos``.

        Position 0 always works. Any other position must name a node that
        already has a successor, so a value cannot be placed past the last
        element; negative positions behave like position 1.
        Raises ``IndexError`` when the position is not accepted.
        """
        if pos == 0:
            self._items.appendleft(value)
            return
        self._insert_checked(value, max(pos, 1), len(self._items) - 1, pos)

    def add_random(self, rng: random.Random | None = None, count: int = RANDOM_COUNT) -> None:
        """Append ``count`` random numbers between 0 and 99."""
        self._items.extend(_random_values(rng, count))

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        return _format_chain(self._items, " -> ")


def _ask_numbers(reader: _TokenReader, stdout: TextIO) -> Iterator[int]:
    stdout.write("Quantos numeros voce deseja adicionar? ")
    count = reader.number()
    for number in range(1, count + 1):
        stdout.write(f"Digite o numero {number}: ")
        yield reader.number()


def _ask_insertion(
    reader: _TokenReader, stdout: TextIO, position_prompt: str = POSITION_PROMPT
) -> tuple[int, int]:
    stdout.write("Digite o valor a ser inserido: ")
    value = reader.number()
    stdout.write(position_prompt)
    return value, reader.number()


def _report_insert(
    stdout: TextIO, insert: Callable[[int, int], None], value: int, pos: int, success: str
) -> None:
    try:
        insert(value, pos)
    except IndexError:
        stdout.write("Posicao invalida.\n")
    else:
        stdout.write(success)


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """Interactive menu over a singly linked list."""
    stdin, stdout = _streams(stdin, stdout)
    rng = random.Random() if rng is None else rng
    reader = _TokenReader(stdin)
    values = LinkedList()

    def show() -> None:
        stdout.write(values.format() + "\n")

    def add_many() -> None:
        for number in _ask_numbers(reader, stdout):
            values.append(number)

    def add_one() -> None:
        value, pos = _ask_insertion(reader, stdout)
        _report_insert(stdout, values.insert_at, value, pos, INSERTED_MESSAGE)
        stdout.write("Lista apos insercao na posicao especifica:\n")
        show()

    def add_random() -> None:
        values.add_random(rng)
        stdout.write("Lista apos incluir 30 numeros aleatorios:\n")
        show()

    _serve(reader, stdout, MENU, {1: add_many, 2: add_one, 3: add_random, 4: show})