"""Linked stack of integers with an interactive demonstration menu."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from estruturas.lista_dinamica import (
    _ask_insertion,
    _format_chain,
    _IntChain,
    _menu,
    _report_insert,
)
from estruturas.pilha_urls import _serve, _streams, _TokenReader

EMPTY_MESSAGE = "Pilha vazia."

MENU = _menu(
    "1. Empilhar elemento",
    "2. Desempilhar elemento",
    "3. Ver elemento no topo",
    "4. Verificar se a pilha esta vazia",
    "5. Exibir todos os elementos da pilha",
    "6. Inserir elemento no meio da pilha",
)


class Stack(_IntChain):
    """Last-in, first-out store of integers; iteration starts at the top."""

    _empty_message = EMPTY_MESSAGE

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(reversed(list(values)))

    def push(self, value: int) -> None:
        self._items.appendleft(value)

    def pop(self) -> int:
        return self._take(self._items.popleft)

    def peek(self) -> int:
        return self._take(lambda: self._items[0])

    def is_empty(self) -> bool:
        return not self._items

    def insert_at(self, value: int, pos: int) -> None:
        """Insert ``value`` at depth ``pos`` counted from the top (0 is the top).

        Raises ``IndexError`` unless ``0 <= pos <= len(self)``.
        """
        self._insert_checked(value, pos, len(self._items))

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        return _format_chain(self._items, " -> ")


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Interactive menu over a linked stack."""
    stdin, stdout = _streams(stdin, stdout)
    reader = _TokenReader(stdin)
    stack = Stack()

    def push() -> None:
        stdout.write("Digite o valor a ser empilhado: ")
        value = reader.number()
        stack.push(value)
        stdout.write(f"Empilhado: {value}\n")

    def report(take, label: str) -> None:
        try:
            value = take()
        except IndexError:
            stdout.write(f"{EMPTY_MESSAGE}\n")
        else:
            stdout.write(f"{label}: {value}\n")

    def check_empty() -> None:
        state = "esta vazia" if stack.is_empty() else "nao esta vazia"
        stdout.write(f"A pilha {state}.\n")

    def show() -> None:
        stdout.write(f"Elementos da pilha: {stack.format()}\n")

    def insert() -> None:
        value, pos = _ask_insertion(reader, stdout, "Digite a posicao em que deseja inserir: ")
        success = f"Empilhado: {value}\n" if pos == 0 else f"Inserido: {value} na posicao {pos}\n"
        _report_insert(stdout, stack.insert_at, value, pos, success)

    _serve(
        reader,
        stdout,
        MENU,
        {
            1: push,
            2: lambda: report(stack.pop, "Elemento desempilhado"),
            3: lambda: report(stack.peek, "Elemento no topo"),
            4: check_empty,
            5: show,
            6: insert,
        },
        farewell="Saindo...\n",
        invalid="Opcao invalida. Tente novamente.\n",
    )