from minnow.types import INT_MIN, INT_MAX, fits_int32, wrap_int32, truncating_div


def test_fits_int32():
    assert fits_int32(INT_MAX)
    assert fits_int32(INT_MIN)
    assert not fits_int32(INT_MAX + 1)
    assert not fits_int32(INT_MIN - 1)


def test_wrap_int32():
    assert wrap_int32(5) == 5
    assert wrap_int32(-5) == -5
    assert wrap_int32(INT_MAX + 1) == INT_MIN
    assert wrap_int32(INT_MIN - 1) == INT_MAX
    assert wrap_int32(2 ** 32) == 0


def test_truncating_div():
    assert truncating_div(7, 2) == 3
    assert truncating_div(-7, 2) == -3
    assert truncating_div(7, -2) == -3
    assert truncating_div(-7, -2) == 3
    assert truncating_div(INT_MIN, -1) == INT_MIN
