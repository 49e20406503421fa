# tests/test_printer.py
# trie rendering and the query driver

import io

import pytest

from cooccurrence_trie.context.tokenizer import simple_tokenize
from cooccurrence_trie.core.corpus_builder import CorpusBuilder
from cooccurrence_trie.core.printer import QueryStatus, print_trie, query, run_queries


@pytest.fixture
def corpus_root(quiet_log):
    return CorpusBuilder(log=quiet_log).build(simple_tokenize("the cat sat. the dog ran. Hello. cart."))


def test_print_trie_letter_order(make_trie):
    out = io.StringIO()
    print_trie(make_trie("b", "ab", "a", "b"), out)
    assert out.getvalue() == "a (1)\nab (1)\nb (2)\n"


def test_print_trie_label(make_trie):
    out = io.StringIO()
    print_trie(make_trie("cat"), out, label="- ")
    assert out.getvalue() == "- cat (1)\n"


def test_print_empty_trie():
    out = io.StringIO()
    print_trie(None, out)
    assert out.getvalue() == ""


def test_print_defaults_to_stdout(make_trie, capsys):
    print_trie(make_trie("cat"))
    assert capsys.readouterr().out == "cat (1)\n"


def test_query_found(corpus_root):
    out = io.StringIO()
    assert query(corpus_root, "cat", out) is QueryStatus.FOUND
    assert out.getvalue() == "- sat (1)\n- the (1)\n"


@pytest.mark.parametrize("word", ["xyz", "car", "ca", "cat,", "", "Cat"])
def test_query_invalid(corpus_root, word):
    out = io.StringIO()
    assert query(corpus_root, word, out) is QueryStatus.INVALID
    assert out.getvalue() == "(INVALID STRING)\n"


def test_query_empty(corpus_root):
    out = io.StringIO()
    assert query(corpus_root, "hello", out) is QueryStatus.EMPTY
    assert out.getvalue() == "(EMPTY)\n"


def test_query_against_empty_trie():
    out = io.StringIO()
    assert query(None, "xyz", out) is QueryStatus.INVALID


def test_run_queries(corpus_root):
    out = io.StringIO()
    run_queries(corpus_root, ["!", "The", "xyz", "HELLO"], out)
    assert out.getvalue() == (
        "cart (1)\n"
        "cat (1)\n"
        "dog (1)\n"
        "hello (1)\n"
        "ran (1)\n"
        "sat (1)\n"
        "the (2)\n"
        "The\n"
        "- cat (1)\n"
        "- dog (1)\n"
        "- ran (1)\n"
        "- sat (1)\n"
        "xyz\n"
        "(INVALID STRING)\n"
        "HELLO\n"
        "(EMPTY)\n"
    )


def test_run_queries_custom_label(corpus_root):
    out = io.StringIO()
    run_queries(corpus_root, ["sat"], out, label="  * ")
    assert out.getvalue() == "sat\n  * cat (1)\n  * the (1)\n"
