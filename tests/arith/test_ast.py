import pytest

from arith.ast import If, IsZero, Pred, Succ, TrueTm, Zero, children, numeral, to_int


def test_children_follow_positional_order() -> None:
    term = If(TrueTm(), Zero(), Succ(Zero()))
    assert children(term) == (TrueTm(), Zero(), Succ(Zero()))
    assert children(Pred(Zero())) == (Zero(),)
    assert children(Zero()) == ()


def test_terms_are_immutable() -> None:
    term = Succ(Zero())
    with pytest.raises(AttributeError):
        term.arg = TrueTm()  # type: ignore[misc]


def test_structural_equality() -> None:
    assert IsZero(Succ(Zero())) == IsZero(Succ(Zero()))
    assert IsZero(Succ(Zero())) != IsZero(Zero())


def test_child_must_be_a_term() -> None:
    with pytest.raises(TypeError, match="Succ.arg must be a term"):
        Succ(0)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="If.else_ must be a term"):
        If(TrueTm(), Zero(), None)  # type: ignore[arg-type]


def test_numeral_round_trip() -> None:
    assert numeral(0) == Zero()
    assert numeral(2) == Succ(Succ(Zero()))
    assert to_int(numeral(5)) == 5


def test_to_int_rejects_non_numerals() -> None:
    assert to_int(Succ(TrueTm())) is None
    assert to_int(Pred(Zero())) is None


def test_numeral_rejects_negative() -> None:
    with pytest.raises(ValueError):
        numeral(-1)
