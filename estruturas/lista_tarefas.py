"""Singly linked to-do list with an interactive demonstration menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

TITLE_MAX = 100
DESCRIPTION_MAX = 256

MENU = (
    "\nMenu de Lista de Tarefas:\n"
    "1. Incluir uma tarefa no inicio\n"
    "2. Incluir uma tarefa na posicao X\n"
    "3. Exibir todas as tarefas\n"
    "4. Completar a tarefa\n"
    "5. Alterar a tarefa da posicao X\n"
    "6. Listar a tarefa\n"
    "7. Excluir a tarefa\n"
    "0. Voltar ao menu principal\n"
    "Escolha uma opcao: "
)
SEPARATOR = "\n***********************\n"
INVALID_POSITION = "Posicao invalida."


@dataclass
class Task:
    """One entry of the to-do list."""

    title: str
    description: str
    completed: bool = False


class TaskList:
    """Ordered collection of tasks addressed by position, head first."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    @staticmethod
    def _check(pos: int, upper: int) -> None:
        if not 0 <= pos < upper:
            raise IndexError(f"{INVALID_POSITION} {pos}")

    def add_front(self, title: str, description: str, completed: bool = False) -> Task:
        task = Task(title, description, bool(completed))
        self._tasks.insert(0, task)
        return task

    def insert_at(
        self, title: str, description: str, completed: bool, pos: int
    ) -> Task:
        """Insert a new task at index ``pos``, from 0 up to the list's length."""
        self._check(pos, len(self._tasks) + 1)
        task = Task(title, description, bool(completed))
        self._tasks.insert(pos, task)
        return task

    def update_at(
        self, pos: int, title: str, description: str, completed: bool
    ) -> Task:
        """Replace every field of the task at ``pos``."""
        task = self.get(pos)
        task.title = title
        task.description = description
        task.completed = bool(completed)
        return task

    def get(self, pos: int) -> Task:
        self._check(pos, len(self._tasks))
        return self._tasks[pos]

    def complete(self, title: str) -> Task:
        """Mark the first task with ``title`` as done; ``KeyError`` if none has it."""
        for task in self._tasks:
            if task.title == title:
                task.completed = True
                return task
        raise KeyError(title)

    def remove_at(self, pos: int) -> Task:
        self._check(pos, len(self._tasks))
        return self._tasks.pop(pos)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)


def format_task(task: Task) -> str:
    """Render a task as the menu displays it."""
    return (
        f"Titulo: {task.title}\n"
        f"Descricao: {task.description}\n"
        f"Completada: {'Sim' if task.completed else 'Nao'}\n"
        "------\n"
    )


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.split("\n", 1)[0]


def _read_int(stdin: TextIO) -> int:
    while True:
        tokens = _read_line(stdin).split()
        if not tokens:
            continue
        try:
            return int(tokens[0])
        except ValueError:
            continue


def _read_option(stdin: TextIO) -> int | None:
    tokens: list[str] = []
    while not tokens:
        tokens = _read_line(stdin).split()
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _read_text(stdin: TextIO, limit: int) -> str:
    return _read_line(stdin)[: limit - 1]


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Interactive menu over a to-do list."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tasks = TaskList()
    completed_prompt = "A tarefa esta completa? (0 para nao, 1 para sim): "

    try:
        while True:
            stdout.write(MENU)
            option = _read_option(stdin)
            stdout.write(SEPARATOR)

            if option == 1:
                stdout.write("Digite o titulo da tarefa: ")
                title = _read_text(stdin, TITLE_MAX)
                stdout.write("Digite a descricao da tarefa: ")
                description = _read_text(stdin, DESCRIPTION_MAX)
                stdout.write(completed_prompt)
                completed = _read_int(stdin) != 0
                tasks.add_front(title, description, completed)
            elif option == 2:
                stdout.write("Digite o titulo da tarefa: ")
                title = _read_text(stdin, TITLE_MAX)
                stdout.write("Digite a descricao da tarefa: ")
                description = _read_text(stdin, DESCRIPTION_MAX)
                stdout.write("Digite a posicao em que deseja inserir a tarefa: ")
                pos = _read_int(stdin)
                stdout.write(completed_prompt)
                completed = _read_int(stdin) != 0
                try:
                    tasks.insert_at(title, description, completed, pos)
                except IndexError:
                    stdout.write(f"{INVALID_POSITION}\n")
                else:
                    stdout.write("Tarefa adicionada com sucesso.\n")
            elif option == 3:
                stdout.write("Lista de Tarefas:\n")
                stdout.write("".join(format_task(task) for task in tasks))
            elif option == 4:
                stdout.write("Digite o titulo da tarefa a ser marcada como completa: ")
                title = _read_text(stdin, TITLE_MAX)
                try:
                    tasks.complete(title)
                except KeyError:
                    stdout.write(f"Tarefa '{title}' não encontrada.\n")
                else:
                    stdout.write(f"Tarefa '{title}' marcada como concluída.\n")
            elif option == 5:
                stdout.write("Digite a posicao da tarefa a ser alterada: ")
                pos = _read_int(stdin)
                stdout.write("Digite o novo titulo da tarefa: ")
                title = _read_text(stdin, TITLE_MAX)
                stdout.write("Digite a nova descricao da tarefa: ")
                description = _read_text(stdin, DESCRIPTION_MAX)
                stdout.write(completed_prompt)
                completed = _read_int(stdin) != 0
                try:
                    tasks.update_at(pos, title, description, completed)
                except IndexError:
                    stdout.write(f"{INVALID_POSITION}\n")
                else:
                    stdout.write("Tarefa alterada com sucesso.\n")
            elif option == 6:
                stdout.write("Digite a posicao da tarefa a ser exibida: ")
                pos = _read_int(stdin)
                try:
                    stdout.write(format_task(tasks.get(pos)))
                except IndexError:
                    stdout.write(f"{INVALID_POSITION}\n")
            elif option == 7:
                stdout.write("Digite a posicao da tarefa a ser excluida: ")
                pos = _read_int(stdin)
                try:
                    tasks.remove_at(pos)
                except IndexError:
                    stdout.write(f"{INVALID_POSITION}\n")
                else:
                    stdout.write("Tarefa excluida com sucesso.\n")
            elif option == 0:
                stdout.write("Voltando ao menu principal...\n")
                return
            else:
                stdout.write("Opcao invalida. Por favor, escolha uma opcao valida.\n")

            stdout.write("Pressione Enter para continuar...")
            _read_line(stdin)
    except EOFError:
        return