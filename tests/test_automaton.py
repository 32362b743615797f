from itertools import product

import pytest

from algokit.automaton import Dfa, Step


@pytest.fixture
def ends_in_one():
    return Dfa({"A": ("A", "B"), "B": ("A", "B")}, initial="A", finals={"B"})


@pytest.fixture
def even_zeros():
    return Dfa({"E": ("O", "E"), "O": ("E", "O")}, initial="E", finals={"E"})


def all_words(max_length):
    for length in range(max_length + 1):
        for letters in product("01", repeat=length):
            yield "".join(letters)


def test_step_follows_table(ends_in_one):
    assert ends_in_one.step("A", "0") == "A"
    assert ends_in_one.step("A", "1") == "B"
    assert ends_in_one.step("B", "0") == "A"


def test_non_zero_symbol_reads_as_one(ends_in_one):
    assert ends_in_one.step("A", "x") == ends_in_one.step("A", "1")


def test_step_unknown_state(ends_in_one):
    with pytest.raises(ValueError):
        ends_in_one.step("Z", "0")


@pytest.mark.parametrize("word", list(all_words(6)))
def test_ends_in_one_language(ends_in_one, word):
    assert ends_in_one.accepts(word) == word.endswith("1")


@pytest.mark.parametrize("word", list(all_words(6)))
def test_even_zeros_language(even_zeros, word):
    assert even_zeros.accepts(word) == (word.count("0") % 2 == 0)


def test_trace_is_chained(even_zeros):
    word = "0110100"
    steps = even_zeros.trace(word)
    assert len(steps) == len(word)
    assert steps[0].state == even_zeros.initial
    assert "".join(step.symbol for step in steps) == word
    for earlier, later in zip(steps, steps[1:]):
        assert earlier.next_state == later.state


def test_trace_of_empty_word(even_zeros):
    assert even_zeros.trace("") == []


def test_step_text():
    assert str(Step("A", "1", "B")) == "A -> 1 -> B"


def test_rejects_unknown_initial():
    with pytest.raises(ValueError):
        Dfa({"A": ("A", "A")}, initial="B")


def test_rejects_unknown_final():
    with pytest.raises(ValueError):
        Dfa({"A": ("A", "A")}, initial="A", finals={"Q"})


def test_rejects_unknown_target():
    with pytest.raises(ValueError):
        Dfa({"A": ("A", "C")}, initial="A")


def test_rejects_wrong_row_length():
    with pytest.raises(ValueError):
        Dfa({"A": ("A",)}, initial="A")