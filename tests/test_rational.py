import pytest

from mxlcore.rational import Rational


def test_valid_when_denominator_nonzero():
    assert Rational(30000, 1001).is_valid()
    assert Rational(0, 1).is_valid()


def test_invalid_when_denominator_zero():
    assert not Rational(30000, 0).is_valid()
    assert not Rational(0, 0).is_valid()


def test_equal_by_cross_product():
    assert Rational(1, 2) == Rational(2, 4)
    assert Rational(60000, 1001) == Rational(120000, 2002)


def test_not_equal():
    assert Rational(60000, 1001) != Rational(30000, 1001)
    assert not (Rational(1, 2) == Rational(1, 3))


def test_comparison_with_other_type_is_false():
    assert (Rational(1, 1) == 1) is False


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Rational(1, 2))


def test_string_form():
    assert str(Rational(48000, 1)) == "48000/1"


def test_frozen():
    rate = Rational(25, 1)
    with pytest.raises(AttributeError):
        rate.numerator = 50
    assert rate.numerator == 25
    assert str(rate) == "25/1"