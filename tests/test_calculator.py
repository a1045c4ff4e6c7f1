import pytest

from structkit.calculator import calculate


def test_precedence_example():
    assert calculate("3+2*2") == 7


def test_division_with_spaces():
    assert calculate(" 3/2 ") == 1


def test_mixed_with_spaces():
    assert calculate(" 3+5 / 2 ") == 5


def test_single_number():
    assert calculate("42") == 42
    assert calculate("  42") == 42


def test_empty_is_zero():
    assert calculate("") == calculate("0")


def test_spaces_do_not_matter():
    assert calculate("12 * 3 - 4 / 2") == calculate("12*3-4/2")


def test_multiplication_commutes():
    assert calculate("6*7") == calculate("7*6")


def test_division_truncates_toward_zero():
    assert calculate("0-7/2") == -calculate("7/2")


def test_subtraction_undoes_addition():
    assert calculate("25+17-17") == 25


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("1/0")


def test_invalid_character():
    with pytest.raises(ValueError):
        calculate("1+a")