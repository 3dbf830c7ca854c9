import io

import pytest

from estruturas.fila_dinamica import Queue, run


def test_fifo_order():
    queue = Queue()
    for value in (3, 1, 4):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [3, 1, 4]
    assert queue.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(IndexError, match="Fila vazia."):
        Queue().dequeue()


def test_peek_does_not_remove():
    queue = Queue([8, 9])
    assert queue.peek() == 8
    assert len(queue) == 2


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_format_empty_and_filled():
    assert Queue().format() == "NULL"
    assert Queue([1, 2]).format() == "1 -> 2 -> NULL"


@pytest.mark.parametrize("pos", [0, 1, 2, 3])
def test_insert_at_valid_positions(pos):
    queue = Queue([10, 20, 30])
    queue.insert_at(99, pos)
    values = list(queue)
    assert values[pos] == 99
    assert len(values) == 4


@pytest.mark.parametrize("pos", [-1, 4, 10])
def test_insert_at_invalid_positions(pos):
    queue = Queue([10, 20, 30])
    with pytest.raises(IndexError):
        queue.insert_at(99, pos)
    assert list(queue) == [10, 20, 30]


def test_insert_at_end_then_enqueue_keeps_order():
    queue = Queue([1])
    queue.insert_at(2, 1)
    queue.enqueue(3)
    assert list(queue) == [1, 2, 3]


def test_insert_at_front_of_empty_queue():
    queue = Queue()
    queue.insert_at(5, 0)
    assert queue.peek() == 5


def test_remove_at_middle_and_last():
    queue = Queue([10, 20, 30])
    assert queue.remove_at(1) == 20
    assert queue.remove_at(1) == 30
    queue.enqueue(40)
    assert list(queue) == [10, 40]


def test_remove_at_zero_is_dequeue():
    queue = Queue([10, 20])
    assert queue.remove_at(0) == 10
    assert list(queue) == [20]


def test_remove_at_empty_or_negative():
    with pytest.raises(IndexError, match="Fila vazia ou posição inválida."):
        Queue().remove_at(0)
    with pytest.raises(IndexError, match="Fila vazia ou posição inválida."):
        Queue([1]).remove_at(-1)


def test_remove_at_past_end():
    queue = Queue([1, 2])
    with pytest.raises(IndexError, match="Posição inválida."):
        queue.remove_at(2)
    assert list(queue) == [1, 2]


def test_run_session():
    stdin = io.StringIO("1\n5\n1\n7\n6\n6\n1\n5\n7\n1\n2\n2\n0\n")
    stdout = io.StringIO()
    run(stdin, stdout)
    output = stdout.getvalue()
    assert "Adicionado: 5\n" in output
    assert "Inserido: 6 na posicao 1\n" in output
    assert "Elementos da fila: 5 -> 6 -> 7 -> NULL\n" in output
    assert "Elemento removido da posicao 1: 6\n" in output
    assert "Elemento removido: 5\n" in output
    assert output.endswith("Saindo...\n")


def test_run_reports_empty_queue():
    stdout = io.StringIO()
    run(io.StringIO("2\n3\n4\n0\n"), stdout)
    output = stdout.getvalue()
    assert output.count("Fila vazia.\n") == 2
    assert "A fila esta vazia.\n" in output


def test_run_invalid_option_and_eof():
    stdout = io.StringIO()
    run(io.StringIO("9\n"), stdout)
    assert "Opcao invalida. Tente novamente.\n" in stdout.getvalue()