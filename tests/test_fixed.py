import pytest

from fixpoint.fixed import Fixed


def test_default_is_zero():
    value = Fixed()
    assert value.raw == 0
    assert value.to_float() == 0.0
    assert value.to_int() == 0


@pytest.mark.parametrize("raw", [-1000, -1, 0, 1, 255, 256, 123456])
def test_from_raw_round_trip(raw):
    assert Fixed.from_raw(raw).raw == raw


def test_from_raw_rejects_non_int():
    with pytest.raises(TypeError):
        Fixed.from_raw(1.5)


@pytest.mark.parametrize("number", [-7, 0, 10, 42, 1234])
def test_int_constructor_round_trip(number):
    value = Fixed(number)
    assert value.to_int() == number
    assert value.to_float() == float(number)
    assert int(value) == number
    assert float(value) == float(number)


def test_int_prints_without_fraction():
    assert str(Fixed(10)) == "10"


def test_copy_constructor():
    original = Fixed(42.42)
    copy = Fixed(original)
    assert copy.raw == original.raw
    copy.increment()
    assert copy.raw == original.raw + 1


def test_float_constructor_output():
    assert str(Fixed(1234.4321)) == "1234.43"
    assert str(Fixed(42.42)) == "42.4219"
    assert Fixed(1234.4321).to_int() == 1234
    assert Fixed(42.42).to_int() == 42


@pytest.mark.parametrize("number", [0.5, 10.02, 10.03, 5.05, 1234.4321])
def test_float_constructor_symmetric(number):
    assert Fixed(-number).raw == -Fixed(number).raw


def test_float_close_to_input():
    for number in (0.1, 3.14159, 42.42, 1234.4321):
        assert abs(Fixed(number).to_float() - number) <= 0.5 / 256


def test_non_finite_rejected():
    with pytest.raises(ValueError):
        Fixed(float("nan"))
    with pytest.raises(ValueError):
        Fixed(float("inf"))


def test_bad_type_rejected():
    with pytest.raises(TypeError):
        Fixed("10")


def test_to_int_floors_negative():
    assert Fixed.from_raw(-1).to_int() == -1


def test_comparisons():
    a = Fixed(10.02)
    b = Fixed(10.03)
    assert (a >= b) is False
    assert a < b
    assert a <= b
    assert b > a
    assert a != b
    assert a == Fixed(10.02)
    assert Fixed(3) == 3


def test_compare_with_unrelated_type():
    assert (Fixed(1) == "1") is False
    with pytest.raises(TypeError):
        Fixed(1) < "1"


def test_hash_consistent_with_equality():
    assert hash(Fixed(7)) == hash(Fixed(7.0))
    assert len({Fixed(7), Fixed(7.0), Fixed(8)}) == 2


def test_add_and_sub():
    assert Fixed(1) + Fixed(2) == Fixed(3)
    assert Fixed(5) - Fixed(2) == Fixed(3)
    a = Fixed(10.02)
    b = Fixed(10.03)
    assert (a + b).raw == a.raw + b.raw
    assert (a - b).raw == a.raw - b.raw


def test_mul():
    assert Fixed(3) * Fixed(4) == Fixed(12)
    assert str(Fixed(5.05) * Fixed(2)) == "10.1016"


def test_division_divides_right_by_left():
    assert Fixed(2) / Fixed(8) == Fixed(4)
    assert Fixed(8) / Fixed(2) == Fixed(0.25)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Fixed(0) / Fixed(5)


def test_increment_and_decrement():
    start = -3
    d = Fixed.from_raw(start)
    assert d.increment() is d
    assert d.raw == start + 1
    assert d.decrement() is d
    assert d.raw == start


def test_post_increment_returns_previous():
    start = -2
    d = Fixed.from_raw(start)
    old = d.post_increment()
    assert old.raw == start
    assert d.raw == start + 1
    assert old is not d


def test_post_decrement_returns_previous():
    start = 5
    d = Fixed.from_raw(start)
    old = d.post_decrement()
    assert old.raw == start
    assert d.raw == start - 1


def test_min_and_max():
    a = Fixed(10.02)
    f = Fixed(5.05) * Fixed(2)
    assert Fixed.min(a, f) is a
    assert Fixed.min(f, a) is a
    assert Fixed.max(a, f) is f
    assert Fixed.max(f, a) is f


def test_min_max_tie_returns_first():
    one = Fixed(3)
    two = Fixed(3)
    assert Fixed.min(one, two) is one
    assert Fixed.max(one, two) is one


def test_repr_round_trip():
    value = Fixed(42.42)
    assert repr(value) == f"Fixed.from_raw({value.raw})"