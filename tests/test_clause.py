import pytest

from clause import LIT, NOT, AND, OR, T, F, evaluate, tostr, get_signals, get_positions
from sigtable import SignalTable


@pytest.fixture
def signals():
    return SignalTable(["A", "B", "C"])


def nbhd(cells):
    return {offset : set(cell) for (offset, cell) in cells.items()}


def test_constants():
    assert evaluate(T, {})
    assert not evaluate(F, {})
    assert F == NOT(T)


def test_literal_looks_at_its_position():
    assert evaluate(LIT(0), nbhd({0 : [0]}))
    assert not evaluate(LIT(0), nbhd({0 : [1]}))
    assert evaluate(LIT(1, -1), nbhd({-1 : [1], 0 : []}))
    assert not evaluate(LIT(1, 1), nbhd({0 : [1], 1 : []}))


def test_literal_time_offset_is_not_consulted():
    assert evaluate(LIT(0, 0, 3), nbhd({0 : [0]}))


def test_literal_outside_neighborhood_raises():
    with pytest.raises(IndexError):
        evaluate(LIT(0, 2), [set(), set()])


def test_conjunction_and_disjunction():
    a, b = LIT(0), LIT(1)
    both = nbhd({0 : [0, 1]})
    only_a = nbhd({0 : [0]})
    neither = nbhd({0 : [2]})
    assert evaluate(AND(a, b), both)
    assert not evaluate(AND(a, b), only_a)
    assert evaluate(OR(a, b), only_a)
    assert not evaluate(OR(a, b), neither)
    assert evaluate(NOT(a), neither)


def test_nested_same_op_is_flattened():
    a, b, c = LIT(0), LIT(1), LIT(2)
    assert AND(AND(a, b), c).inputs == (a, b, c)
    assert OR(a, OR(b, c)).inputs == (a, b, c)
    # different ops are kept as children
    assert AND(OR(a, b), c).inputs == (OR(a, b), c)


def test_single_input_degenerates():
    a = LIT(0)
    assert AND(a) is a
    assert OR(a) is a
    assert AND() == T
    assert OR() == F


def test_double_negation_collapses():
    a = LIT(0, 1)
    assert NOT(NOT(a)) is a
    assert NOT(NOT(AND(a, LIT(1)))) == AND(a, LIT(1))


def test_clauses_are_immutable():
    a = LIT(0)
    with pytest.raises(AttributeError):
        a.op = "!"


def test_tostr(signals):
    a, b, c = (signals.intern(name) for name in "ABC")
    assert tostr(LIT(a), signals) == "A"
    assert tostr(LIT(a, -1), signals) == "-1.A"
    assert tostr(LIT(a, 2, 1), signals) == "1/2.A"
    assert tostr(LIT(a, 0, 1), signals) == "1/A"
    assert tostr(NOT(LIT(a)), signals) == "-A"
    assert tostr(NOT(LIT(a, 1)), signals) == "1.-A"
    assert tostr(AND(LIT(a), NOT(LIT(b))), signals) == "(A -B)"
    assert tostr(OR(LIT(a), AND(LIT(b), LIT(c))), signals) == "[A (B C)]"
    assert tostr(NOT(OR(LIT(a), LIT(b))), signals) == "-[A B]"
    assert tostr(F, signals) == "[]"


def test_get_signals_and_positions():
    c = AND(LIT(0, -1), OR(NOT(LIT(1, 2)), LIT(0)), NOT(T))
    assert get_signals(c) == {0, 1}
    assert get_positions(c) == {-1, 0, 2}
    assert get_signals(T) == set()
