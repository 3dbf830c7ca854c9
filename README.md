# estruturas

Interactive console programs for classic data structures. All menus and
messages are in Portuguese. The programs are grouped into lessons:

| Lesson | Programs |
|--------|----------|
| 4 | browsing history kept in a URL stack; browsing history kept in a URL queue |
| 5 | singly linked list of integers; doubly linked list of integers; linked to-do list |
| 6 | stack of integers; queue of integers |
| 8 | adjacency matrices (undirected and directed) and an adjacency list |
| 9 | an adjacency matrix; depth-first exploration of a cave system |

## Installation

```
pip install .
```

## Usage

Open the menu of a lesson by giving its number:

```
estruturas 4
```

Valid lesson numbers are 4, 5, 6, 8 and 9. Each lesson shows a numbered
menu; type the option number and press Enter. Option `0` leaves a menu.
The program also stops when input ends.

Option 5 of the URL stack and URL queue programs reads a history file,
`../urls.txt` relative to the current directory, with one URL per line.
Lines that contain `http://` or `https://` and one of `.com`, `.br` or
`.org` are visited in turn. URLs typed by hand must contain `http://` and
`.com`.

## Library use

The structures can also be used directly from Python:

```python
from estruturas.pilha_dinamica import Stack
from estruturas.lista_adjacencia import example_graph
from estruturas.cavernas import CaveSystem

stack = Stack()
stack.push(3)
stack.push(7)
print(stack.format())        # 7 -> 3 -> NULL

graph = example_graph()
print(graph.neighbors(1))    # most recently added neighbour first

caves = CaveSystem(4)
caves.add_passage(0, 1)
caves.add_passage(1, 3)
print(caves.explore(0))      # depth-first steps from cave 0
```

Modules:

- `estruturas.pilha_urls` — `UrlStack`, `is_navigable_url`, `is_importable_url`, `load_urls`
- `estruturas.fila_urls` — `UrlQueue`, `import_history`
- `estruturas.lista_dinamica` — `LinkedList`
- `estruturas.lista_dupla` — `DoublyLinkedList`
- `estruturas.lista_tarefas` — `Task`, `TaskList`, `format_task`
- `estruturas.pilha_dinamica` — `Stack`
- `estruturas.fila_dinamica` — `Queue`
- `estruturas.lista_adjacencia` — `AdjacencyList`, `example_graph`
- `estruturas.matrizes` — `AdjacencyMatrix`, `example` (names `adjacencia`,
  `nao_direcionado`, `direcionado`, `grafo`, `grafo_aula9`)
- `estruturas.cavernas` — `CaveSystem`
- `estruturas.cli` — `lesson_menu`, `main`

Each of these modules (other than `cli`) also has a `run` function that
starts its interactive menu on given input and output streams. Operations
on an empty structure or at an invalid position raise `IndexError`;
`TaskList.complete` raises `KeyError` for an unknown title.

## Limitations

Everything lives in memory: lists, tasks, histories and cave systems are
lost when a menu is left. Nothing is written to disk; the only file read is
the URL history file.

## Tests

```
pip install .[test]
pytest
```