"""Integer helpers for Minnow.

Minnow has a single value type: a signed 32-bit integer. Python ints are
unbounded, so arithmetic results are folded back into that range here and
integer literals are range checked before they reach the AST.
"""

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def fits_int32(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def wrap_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range (two's complement)."""
    value &= 0xFFFFFFFF
    if value > INT_MAX:
        value -= 0x100000000
    return value


def truncating_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's ``//`` floors, so ``-7 // 2`` is ``-4``; Minnow follows the C
    convention and yields ``-3``. The caller is responsible for rejecting a
    zero divisor.
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return wrap_int32(quotient)
