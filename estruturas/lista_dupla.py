"""Doubly linked list of integers with an interactive demonstration menu."""

from __future__ import annotations

import random
from typing import Iterator, TextIO

from estruturas.lista_dinamica import (
    INSERTED_MESSAGE,
    RANDOM_COUNT,
    _ask_insertion,
    _ask_numbers,
    _format_chain,
    _IntChain,
    _menu,
    _random_values,
    _report_insert,
)
from estruturas.pilha_urls import _serve, _streams, _TokenReader

MENU = _menu(
    "1. Incluir no inicio uma quantidade X de numeros",
    "2. Incluir um numero em uma posicao especifica",
    "3. Incluir 30 numeros aleatorios no inicio",
    "4. Exibir a lista",
)


class DoublyLinkedList(_IntChain):
    """Integer list that grows at its head and can be walked both ways."""

    def push_front(self, value: int) -> None:
        self._items.appendleft(value)

    def insert_at(self, value: int, pos: int) -> None:
        """Insert ``value`` at index ``pos``, from 0 up to the list's length.

        Raises ``IndexError`` for any other position.
        """
        self._insert_checked(value, pos, len(self._items))

    def add_random(self, rng: random.Random | None = None, count: int = RANDOM_COUNT) -> None:
        """Push ``count`` random numbers between 0 and 99 onto the head."""
        self._items.extendleft(_random_values(rng, count))

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        return _format_chain(self._items, " <-> ")


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """Interactive menu over a doubly linked list."""
    stdin, stdout = _streams(stdin, stdout)
    rng = random.Random() if rng is None else rng
    reader = _TokenReader(stdin)
    values = DoublyLinkedList()

    def add_many() -> None:
        for number in _ask_numbers(reader, stdout):
            values.push_front(number)

    def add_one() -> None:
        value, pos = _ask_insertion(reader, stdout)
        _report_insert(stdout, values.insert_at, value, pos, INSERTED_MESSAGE)

    def show() -> None:
        stdout.write(f"Lista duplamente encadeada: {values.format()}\n")

    _serve(
        reader,
        stdout,
        MENU,
        {1: add_many, 2: add_one, 3: lambda: values.add_random(rng), 4: show},
        farewell="Saindo....\n",
        invalid="Opcao invalida. Por favor, escolha uma opcao valida.\n",
    )