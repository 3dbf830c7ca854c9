"""Browser-style navigation history kept in a queue of URLs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, TextIO

from estruturas.pilha_urls import (
    DEFAULT_HISTORY_FILE,
    _Browser,
    _browse,
    _navigation_menu,
    _replay,
    _Store,
    _streams,
)

MENU = _navigation_menu("Importar Historico de Navegacao")


class UrlQueue(_Store):
    """First-in, first-out store of previously visited URLs."""

    def enqueue(self, url: str) -> None:
        self._items.append(url)

    def dequeue(self) -> str:
        return self._take(self._items.popleft)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def format(self) -> str:
        """Numbered listing, front first, framed by blank lines."""
        body = "".join(f"{number} - {url}\n" for number, url in enumerate(self, start=1))
        return f"\n{body}\n"


def import_history(queue: UrlQueue, current: str, path: str | os.PathLike[str]) -> str:
    """Visit each valid URL in ``path``, queueing the previous current one.

    Returns the new current URL. Raises ``OSError`` when the file cannot be opened.
    """
    return _replay(path, current, queue.enqueue).current


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    history_file: str | os.PathLike[str] = DEFAULT_HISTORY_FILE,
) -> None:
    """Interactive navigation menu backed by a URL queue."""
    stdin, stdout = _streams(stdin, stdout)
    queue = UrlQueue()
    browser = _Browser(stdout, queue.enqueue, queue.dequeue, queue.is_empty)

    def show_history() -> None:
        stdout.write("\nImprimindo o conteudo da fila\n")
        stdout.write(queue.format())

    def load() -> None:
        try:
            browser.current = import_history(queue, browser.current, history_file)
        except OSError:
            stdout.write(f"Erro ao abrir o arquivo {Path(history_file).name}\n")

    _browse(
        stdin,
        browser,
        menu=MENU,
        prompt="Informar uma url\n",
        extra={4: show_history, 5: load},
        farewell="Saindo....",
    )