import io

import pytest

from estruturas.lista_tarefas import Task, TaskList, format_task, run


def titles(tasks):
    return [task.title for task in tasks]


def test_add_front_puts_newest_first():
    tasks = TaskList()
    tasks.add_front("a", "da", False)
    tasks.add_front("b", "db", True)
    assert titles(tasks) == ["b", "a"]
    assert len(tasks) == 2
    assert tasks.get(0).completed is True


def test_insert_at_valid_positions():
    tasks = TaskList([Task("a", "x"), Task("c", "x")])
    tasks.insert_at("b", "x", False, 1)
    tasks.insert_at("d", "x", False, 3)
    tasks.insert_at("z", "x", False, 0)
    assert titles(tasks) == ["z", "a", "b", "c", "d"]


@pytest.mark.parametrize("pos", [-1, 3, 10])
def test_insert_at_invalid_position(pos):
    tasks = TaskList([Task("a", "x"), Task("b", "x")])
    with pytest.raises(IndexError):
        tasks.insert_at("n", "x", False, pos)
    assert titles(tasks) == ["a", "b"]


def test_insert_into_empty_list_only_at_zero():
    tasks = TaskList()
    with pytest.raises(IndexError):
        tasks.insert_at("n", "x", False, 1)
    tasks.insert_at("n", "x", False, 0)
    assert titles(tasks) == ["n"]


def test_update_at_changes_fields():
    tasks = TaskList([Task("a", "old"), Task("b", "old")])
    tasks.update_at(1, "B", "new", True)
    assert tasks.get(1) == Task("B", "new", True)
    assert tasks.get(0) == Task("a", "old", False)


@pytest.mark.parametrize("pos", [-1, 2])
def test_update_and_get_reject_missing_positions(pos):
    tasks = TaskList([Task("a", "x"), Task("b", "x")])
    with pytest.raises(IndexError):
        tasks.update_at(pos, "t", "d", False)
    with pytest.raises(IndexError):
        tasks.get(pos)


def test_complete_marks_first_match():
    tasks = TaskList([Task("a", "1"), Task("a", "2")])
    done = tasks.complete("a")
    assert done.description == "1"
    assert [task.completed for task in tasks] == [True, False]


def test_complete_unknown_title_raises():
    tasks = TaskList([Task("a", "x")])
    with pytest.raises(KeyError):
        tasks.complete("missing")


def test_remove_at():
    tasks = TaskList([Task("a", "x"), Task("b", "x"), Task("c", "x")])
    removed = tasks.remove_at(1)
    assert removed.title == "b"
    assert titles(tasks) == ["a", "c"]
    tasks.remove_at(0)
    assert titles(tasks) == ["c"]


@pytest.mark.parametrize("pos", [-1, 1, 5])
def test_remove_at_invalid(pos):
    tasks = TaskList([Task("a", "x")])
    with pytest.raises(IndexError):
        tasks.remove_at(pos)
    assert len(tasks) == 1


def test_remove_from_empty_raises():
    with pytest.raises(IndexError):
        TaskList().remove_at(0)


def test_format_task():
    assert format_task(Task("Comprar", "pao", True)) == (
        "Titulo: Comprar\nDescricao: pao\nCompletada: Sim\n------\n"
    )
    assert "Completada: Nao\n" in format_task(Task("t", "d", False))


def test_run_add_and_list():
    stdin = io.StringIO("1\nEstudar\nGrafos\n0\n\n3\n\n0\n")
    stdout = io.StringIO()
    run(stdin, stdout)
    output = stdout.getvalue()
    assert format_task(Task("Estudar", "Grafos", False)) in output
    assert output.endswith("Voltando ao menu principal...\n")


def test_run_complete_and_missing():
    stdin = io.StringIO("1\nLer\nLivro\n0\n\n4\nLer\n\n4\nNada\n\n3\n\n0\n")
    stdout = io.StringIO()
    run(stdin, stdout)
    output = stdout.getvalue()
    assert "Tarefa 'Ler' marcada como concluída." in output
    assert "Tarefa 'Nada' não encontrada." in output
    assert format_task(Task("Ler", "Livro", True)) in output


def test_run_invalid_positions():
    stdin = io.StringIO("7\n0\n\n6\n3\n\n0\n")
    stdout = io.StringIO()
    run(stdin, stdout)
    assert stdout.getvalue().count("Posicao invalida.\n") == 2


def test_run_stops_at_end_of_input():
    stdout = io.StringIO()
    run(io.StringIO("9\n"), stdout)
    assert "Opcao invalida. Por favor, escolha uma opcao valida.\n" in stdout.getvalue()