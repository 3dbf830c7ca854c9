import io
import os

import pytest

from estruturas.pilha_urls import (
    MENU,
    UrlStack,
    is_importable_url,
    is_navigable_url,
    load_urls,
    run,
)


def _run(text, history_file="does-not-exist.txt"):
    out = io.StringIO()
    run(io.StringIO(text), out, history_file)
    return out.getvalue()


def test_push_pop_is_lifo():
    stack = UrlStack()
    for url in ["http://a.com", "http://b.com", "http://c.com"]:
        stack.push(url)
    assert [stack.pop() for _ in range(3)] == ["http://c.com", "http://b.com", "http://a.com"]
    assert stack.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        UrlStack().pop()


def test_len_and_iteration_top_first():
    stack = UrlStack()
    stack.push("http://a.com")
    stack.push("http://b.com")
    assert len(stack) == 2
    assert list(stack) == ["http://b.com", "http://a.com"]
    assert not stack.is_empty()


def test_format_history_numbers_from_top():
    stack = UrlStack(["http://a.com", "http://b.com"])
    assert stack.format_history() == "1º http://b.com\n2º http://a.com\n"


def test_format_history_empty():
    assert UrlStack().format_history() == ""


@pytest.mark.parametrize(
    "url, expected",
    [
        ("http://site.com", True),
        ("https://site.com", False),
        ("http://site.org", False),
        ("ftp://site.com", False),
    ],
)
def test_is_navigable_url(url, expected):
    assert is_navigable_url(url) is expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://site.org", True),
        ("http://site.br", True),
        ("http://site.com", True),
        ("site.com", False),
        ("http://site.net", False),
    ],
)
def test_is_importable_url(url, expected):
    assert is_importable_url(url) is expected


def test_load_urls_stacks_previous_current(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://a.com\nbad\nhttps://b.org\n", encoding="utf-8")
    stack = UrlStack()
    result = load_urls(stack, "", path)
    assert result.current == "https://b.org"
    assert list(stack) == ["http://a.com"]
    assert result.entries == [
        ("http://a.com", True),
        ("bad", False),
        ("https://b.org", True),
    ]


def test_load_urls_pushes_nonempty_start(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://a.com\n", encoding="utf-8")
    stack = UrlStack()
    result = load_urls(stack, "http://start.com", path)
    assert result.current == "http://a.com"
    assert list(stack) == ["http://start.com"]


def test_load_urls_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_urls(UrlStack(), "", tmp_path / "missing.txt")


def test_run_navigate_and_back():
    out = _run("1\nhttp://a.com\n1\nhttp://b.com\n3\n2\n0\n")
    assert out.count("Voce esta acessando http://a.com\n\n") == 3
    assert out.endswith("Saindo...\n")


def test_run_rejects_invalid_url():
    out = _run("1\nhttps://a.com\n0\n")
    assert "URL invalida\n" in out
    assert "Voce esta acessando" not in out


def test_run_back_on_empty_stack():
    out = _run("3\n0\n")
    assert "Estrutura esta vazia\n" in out


def test_run_invalid_option():
    out = _run("9\nx\n0\n")
    assert out.count("Opcao Invalida\n") == 2


def test_run_stops_at_end_of_input():
    out = _run("")
    assert out == MENU


def test_run_history_listing():
    out = _run("1\nhttp://a.com\n1\nhttp://b.com\n4\n0\n")
    assert "\nImprimindo o conteudo da pilha\n1º http://a.com\n" in out


def test_run_load_file_then_drops_top(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://a.com\nbad\nhttp://b.org\n", encoding="utf-8")
    out = _run("5\n2\n3\n0\n", history_file=path)
    assert f"Diretorio de trabalho atual: {os.getcwd()}\n" in out
    assert "URL invalida: bad\n" in out
    assert out.count("Voce esta acessando http://b.org\n\n") == 2
    assert "Estrutura esta vazia\n" in out


def test_run_load_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    out = _run("5\n0\n", history_file=missing)
    assert f"Erro ao abrir o arquivo {missing}.\n" in out