import io

import pytest

from estruturas.pilha_dinamica import Stack, run


def _session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_push_pop_is_last_in_first_out():
    stack = Stack()
    for v in [1, 2, 3]:
        stack.push(v)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


@pytest.mark.parametrize("operation", [Stack.pop, Stack.peek])
def test_empty_stack_raises(operation):
    with pytest.raises(IndexError, match="Pilha vazia."):
        operation(Stack())


def test_peek_does_not_remove():
    stack = Stack([4, 7])
    assert stack.peek() == 7
    assert len(stack) == 2


def test_iteration_starts_at_top():
    inputs = [1, 2, 3]
    assert list(Stack(inputs)) == list(reversed(inputs))


def test_insert_at_zero_is_a_push():
    stack = Stack([1, 2])
    stack.insert_at(9, 0)
    assert stack.peek() == 9


def test_insert_at_bottom():
    stack = Stack([1, 2])
    stack.insert_at(9, 2)
    assert list(stack)[-1] == 9
    assert len(stack) == 3


@pytest.mark.parametrize("pos", [-1, 3])
def test_insert_at_invalid_position(pos):
    stack = Stack([1, 2])
    with pytest.raises(IndexError):
        stack.insert_at(9, pos)
    assert list(stack) == [2, 1]


@pytest.mark.parametrize(("initial", "expected"), [([1, 2], "2 -> 1 -> NULL"), ([], "NULL")])
def test_format(initial, expected):
    assert Stack(initial).format() == expected


@pytest.mark.parametrize(
    ("script", "expected"),
    [
        (
            "1\n4\n1\n6\n5\n3\n0\n",
            ["Empilhado: 4\n", "Elementos da pilha: 6 -> 4 -> NULL\n", "Elemento no topo: 6\n"],
        ),
        ("2\n4\n0\n", ["Pilha vazia.\n", "A pilha esta vazia.\n"]),
        (
            "1\n1\n1\n2\n6\n7\n1\n6\n8\n9\n0\n",
            ["Inserido: 7 na posicao 1\n", "Posicao invalida.\n"],
        ),
        ("x\n0\n", ["Opcao invalida. Tente novamente.\n"]),
    ],
)
def test_run_messages(script, expected):
    text = _session(script)
    assert all(message in text for message in expected)
    assert text.endswith("Saindo...\n")