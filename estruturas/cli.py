"""Lesson menus that start each demonstration."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from estruturas import (
    cavernas,
    fila_dinamica,
    fila_urls,
    lista_adjacencia,
    lista_dinamica,
    lista_dupla,
    lista_tarefas,
    matrizes,
    pilha_dinamica,
    pilha_urls,
)

Action = Callable[[TextIO, TextIO], None]


def _matrix(name: str) -> Action:
    return lambda stdin, stdout: matrizes.run(name, stdin, stdout)


def _plain(function: Callable[..., None]) -> Action:
    return lambda stdin, stdout: function(stdin, stdout)


LESSONS: dict[int, tuple[tuple[str, Action], ...]] = {
    4: (
        ("Exemplo Pilhas", _plain(pilha_urls.run)),
        ("Exemplo Filas", _plain(fila_urls.run)),
    ),
    5: (
        ("Exemplo Lista Dinamica", _plain(lista_dinamica.run)),
        ("Exemplo Lista Duplamente Encadeada", _plain(lista_dupla.run)),
        ("Exemplo Lista de Tarefas", _plain(lista_tarefas.run)),
    ),
    6: (
        ("Exemplo Pilha com Lista Dinamica", _plain(pilha_dinamica.run)),
        ("Exemplo Fila com Lista Dinamica", _plain(fila_dinamica.run)),
    ),
    8: (
        ("Exemplo Matriz Adjacente", _matrix("adjacencia")),
        ("Exemplo Lista Adjacente", _plain(lista_adjacencia.run)),
        ("Exemplo Matriz Adjacente Nao Direcionado", _matrix("nao_direcionado")),
        ("Exemplo Matriz Adjacente Direcionado", _matrix("direcionado")),
        ("Exemplo Adicional Matriz Grafo", _matrix("grafo")),
    ),
    9: (
        ("Exemplo Matriz Adjacente", _matrix("grafo_aula9")),
        ("Exemplo Problema Caverna", _plain(cavernas.run)),
    ),
}


def _read_option(stdin: TextIO) -> int | None:
    tokens: list[str] = []
    while not tokens:
        line = stdin.readline()
        if not line:
            raise EOFError
        tokens = line.split()
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _menu_text(entries: tuple[tuple[str, Action], ...]) -> str:
    lines = "".join(
        f"{number}. {label}\n" for number, (label, _) in enumerate(entries, start=1)
    )
    return f"\nMenu:\n{lines}0. Sair\nEscolha uma opcao: "


def lesson_menu(
    lesson: int, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Run the main menu of one lesson until the user picks 0 or input ends."""
    try:
        entries = LESSONS[lesson]
    except KeyError:
        raise ValueError(f"aula desconhecida: {lesson}") from None
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    menu = _menu_text(entries)

    stdout.write("Iniciando o programa\n")
    try:
        while True:
            stdout.write(menu)
            stdout.flush()
            option = _read_option(stdin)
            if option == 0:
                stdout.write("Saindo do programa. Obrigado!\n")
                return
            if option is not None and 1 <= option <= len(entries):
                entries[option - 1][1](stdin, stdout)
            else:
                stdout.write("Opcao invalida. Por favor, escolha uma opcao valida.\n")
    except EOFError:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: pick a lesson and open its menu."""
    parser = argparse.ArgumentParser(
        prog="estruturas", description="Demonstracoes de estruturas de dados."
    )
    parser.add_argument("lesson", type=int, choices=sorted(LESSONS), help="numero da aula")
    args = parser.parse_args(argv)
    lesson_menu(args.lesson, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())