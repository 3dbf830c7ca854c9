"""Linked queue of integers with an interactive demonstration menu."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Iterator, TextIO

EMPTY_MESSAGE = "Fila vazia."
EMPTY_OR_INVALID_MESSAGE = "Fila vazia ou posição inválida."
INVALID_REMOVAL_MESSAGE = "Posição inválida."

MENU = (
    "\nMenu:\n"
    "1. Adicionar elemento à fila\n"
    "2. Remover elemento da fila\n"
    "3. Ver elemento na frente da fila\n"
    "4. Verificar se a fila está vazia\n"
    "5. Exibir todos os elementos da fila\n"
    "6. Inserir elemento no meio da fila\n"
    "7. Remover elemento do meio da fila\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)


class Queue:
    """First-in, first-out store of integers; iteration starts at the front."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: deque[int] = deque(values)

    def enqueue(self, value: int) -> None:
        self._values.append(value)

    def dequeue(self) -> int:
        if not self._values:
            raise IndexError(EMPTY_MESSAGE)
        return self._values.popleft()

    def peek(self) -> int:
        if not self._values:
            raise IndexError(EMPTY_MESSAGE)
        return self._values[0]

    def is_empty(self) -> bool:
        return not self._values

    def insert_at(self, value: int, pos: int) -> None:
        """Insert ``value`` at index ``pos`` (0 is the front).

        Raises ``IndexError`` unless ``0 <= pos <= len(self)``.
        """
        if not 0 <= pos <= len(self._values):
            raise IndexError(f"Posicao invalida: {pos}")
        self._values.insert(pos, value)

    def remove_at(self, pos: int) -> int:
        """Remove and return the value at index ``pos``.

        Raises ``IndexError`` when the queue is empty or ``pos`` is out of range.
        """
        if not self._values or pos < 0:
            raise IndexError(EMPTY_OR_INVALID_MESSAGE)
        if pos == 0:
            return self.dequeue()
        if pos >= len(self._values):
            raise IndexError(INVALID_REMOVAL_MESSAGE)
        value = self._values[pos]
        del self._values[pos]
        return value

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def format(self) -> str:
        return " -> ".join([*map(str, self._values), "NULL"])


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


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Interactive menu over a linked queue."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _Tokens(stdin)
    queue = Queue()

    try:
        while True:
            stdout.write(MENU)
            option = tokens.option()
            if option == 1:
                stdout.write("Digite o valor a ser adicionado: ")
                value = tokens.number()
                queue.enqueue(value)
                stdout.write(f"Adicionado: {value}\n")
            elif option == 2:
                try:
                    value = queue.dequeue()
                except IndexError as error:
                    stdout.write(f"{error}\n")
                else:
                    stdout.write(f"Elemento removido: {value}\n")
            elif option == 3:
                try:
                    value = queue.peek()
                except IndexError as error:
                    stdout.write(f"{error}\n")
                else:
                    stdout.write(f"Elemento na frente da fila: {value}\n")
            elif option == 4:
                if queue.is_empty():
                    stdout.write("A fila esta vazia.\n")
                else:
                    stdout.write("A fila nao esta vazia.\n")
            elif option == 5:
                stdout.write("Elementos da fila: ")
                stdout.write(queue.format() + "\n")
            elif option == 6:
                stdout.write("Digite o valor a ser inserido: ")
                value = tokens.number()
                stdout.write("Digite a posicao em que deseja inserir: ")
                pos = tokens.number()
                try:
                    queue.insert_at(value, pos)
                except IndexError:
                    stdout.write("Posicao invalida.\n")
                else:
                    stdout.write(f"Inserido: {value} na posicao {pos}\n")
            elif option == 7:
                stdout.write("Digite a posicao do elemento a ser removido: ")
                pos = tokens.number()
                try:
                    value = queue.remove_at(pos)
                except IndexError as error:
                    stdout.write(f"{error}\n")
                else:
                    stdout.write(f"Elemento removido da posicao {pos}: {value}\n")
            elif option == 0:
                stdout.write("Saindo...\n")
                return
            else:
                stdout.write("Opcao invalida. Tente novamente.\n")
    except EOFError:
        return