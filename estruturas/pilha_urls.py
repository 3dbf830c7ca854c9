"""Browser-style navigation history kept on a stack of URLs."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Mapping, TextIO

DEFAULT_HISTORY_FILE = "../urls.txt"
EMPTY_MESSAGE = "Estrutura esta vazia"


def _navigation_menu(load_label: str) -> str:
    return (
        "1 - Navegar para uma URL\n"
        "2 - Exibir URL atual\n"
        "3 - Voltar para uma URL\n"
        "4 - Exibir historico\n"
        f"5 - {load_label}\n"
        "0 - Deseja Sair\n"
    )


MENU = _navigation_menu("Carregar dados")


class _Store:
    """Items held in a deque, with the emptiness checks every container here shares."""

    _empty_message = EMPTY_MESSAGE

    def __init__(self, items: Iterable = ()) -> None:
        self._items: deque = deque(items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def _take(self, take: Callable[[], object]):
        if not self._items:
            raise IndexError(self._empty_message)
        return take()


class _TokenReader:
    """Reads whole lines or whitespace-separated tokens from a text stream."""

    def __init__(self, stdin: TextIO) -> None:
        self._stdin = stdin
        self._pending: deque[str] = deque()

    def line(self) -> str:
        text = self._stdin.readline()
        if not text:
            raise EOFError
        return text.split("\n", 1)[0]

    def _token(self) -> str:
        while not self._pending:
            self._pending.extend(self.line().split())
        return self._pending.popleft()

    def option(self) -> int | None:
        try:
            return int(self._token())
        except ValueError:
            return None

    def number(self) -> int:
        while True:
            try:
                return int(self._token())
            except ValueError:
                continue

    def discard_rest(self) -> None:
        self._pending.clear()


def _streams(stdin: TextIO | None, stdout: TextIO | None) -> tuple[TextIO, TextIO]:
    return (sys.stdin if stdin is None else stdin, sys.stdout if stdout is None else stdout)


def _serve(
    reader: _TokenReader,
    stdout: TextIO,
    menu: str,
    actions: Mapping[int, Callable[[], None]],
    *,
    farewell: str = "",
    invalid: str = "",
    whole_lines: bool = False,
) -> None:
    """Show ``menu`` and dispatch options until 0 is chosen or input runs out."""
    try:
        while True:
            stdout.write(menu)
            option = reader.option()
            if whole_lines:
                reader.discard_rest()
            if option == 0:
                stdout.write(farewell)
                return
            action = actions.get(option)
            if action is None:
                stdout.write(invalid)
            else:
                action()
    except EOFError:
        return


class UrlStack(_Store):
    """Last-in, first-out store of previously visited URLs."""

    def push(self, url: str) -> None:
        self._items.append(url)

    def pop(self) -> str:
        return self._take(self._items.pop)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def format_history(self) -> str:
        """Number the stored URLs starting at the top of the stack."""
        return "".join(f"{number}º {url}\n" for number, url in enumerate(self, start=1))


def is_navigable_url(url: str) -> bool:
    """Rule used when the user types a URL by hand."""
    return "http://" in url and ".com" in url


def is_importable_url(url: str) -> bool:
    """Rule used for URLs read from a history file."""
    has_scheme = "http://" in url or "https://" in url
    has_domain = any(suffix in url for suffix in (".com", ".br", ".org"))
    return has_scheme and has_domain


@dataclass
class LoadResult:
    """Outcome of reading a history file: the new current URL and every line seen."""

    current: str
    entries: list[tuple[str, bool]] = field(default_factory=list)


def _replay(
    path: str | os.PathLike[str], current: str, remember: Callable[[str], None]
) -> LoadResult:
    entries: list[tuple[str, bool]] = []
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        for line in handle:
            url = line.split("\n", 1)[0]
            accepted = is_importable_url(url)
            if accepted:
                if current:
                    remember(current)
                current = url
            entries.append((url, accepted))
    return LoadResult(current, entries)


def load_urls(stack: UrlStack, current: str, path: str | os.PathLike[str]) -> LoadResult:
    """Visit each valid URL in ``path`` in turn, stacking the previous current one.

    Raises ``OSError`` when the file cannot be opened.
    """
    return _replay(path, current, stack.push)


class _Browser:
    """Current URL plus the history store it falls back to."""

    def __init__(
        self,
        stdout: TextIO,
        remember: Callable[[str], None],
        recall: Callable[[], str],
        is_empty: Callable[[], bool],
    ) -> None:
        self.stdout = stdout
        self.current = ""
        self._remember = remember
        self._recall = recall
        self._is_empty = is_empty

    def show(self, url: str) -> None:
        self.stdout.write(f"Voce esta acessando {url}\n\n")

    def navigate(self, reader: _TokenReader, prompt: str) -> None:
        self.stdout.write(prompt)
        url = reader.line()
        if not is_navigable_url(url):
            self.stdout.write("URL invalida\n")
            return
        if self.current:
            self._remember(self.current)
        self.current = url
        self.show(url)

    def go_back(self) -> None:
        if self._is_empty():
            self.stdout.write(f"{EMPTY_MESSAGE}\n")
        else:
            self.current = self._recall()
            self.show(self.current)


def _browse(
    stdin: TextIO,
    browser: _Browser,
    *,
    menu: str,
    prompt: str,
    extra: Mapping[int, Callable[[], None]],
    farewell: str,
) -> None:
    reader = _TokenReader(stdin)
    actions = {
        1: lambda: browser.navigate(reader, prompt),
        2: lambda: browser.show(browser.current),
        3: browser.go_back,
        **extra,
    }
    _serve(
        reader,
        browser.stdout,
        menu,
        actions,
        farewell=farewell,
        invalid="Opcao Invalida\n",
        whole_lines=True,
    )


def _write_cwd(stdout: TextIO) -> None:
    try:
        stdout.write(f"Diretorio de trabalho atual: {os.getcwd()}\n")
    except OSError as error:
        stdout.write(f"getcwd() error: {error}\n")


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    history_file: str | os.PathLike[str] = DEFAULT_HISTORY_FILE,
) -> None:
    """Interactive navigation menu backed by a URL stack."""
    stdin, stdout = _streams(stdin, stdout)
    stack = UrlStack()
    browser = _Browser(stdout, stack.push, stack.pop, stack.is_empty)

    def show_history() -> None:
        stdout.write("\nImprimindo o conteudo da pilha\n")
        stdout.write(stack.format_history())

    def load() -> None:
        _write_cwd(stdout)
        try:
            result = load_urls(stack, browser.current, history_file)
        except OSError:
            stdout.write(f"Erro ao abrir o arquivo {os.fspath(history_file)}.\n")
        else:
            browser.current = result.current
            for url, accepted in result.entries:
                if accepted:
                    browser.show(url)
                else:
                    stdout.write(f"URL invalida: {url}\n")
        if stack.is_empty():
            stdout.write(f"{EMPTY_MESSAGE}\n")
        else:
            stack.pop()

    _browse(
        stdin,
        browser,
        menu=MENU,
        prompt="Informe sua URL\n",
        extra={4: show_history, 5: load},
        farewell="Saindo...\n",
    )