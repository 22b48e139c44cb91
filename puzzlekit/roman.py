"""Conversion between integers and Roman numerals."""

from itertools import pairwise

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# (one, five, ten) symbols for units, tens, hundreds and thousands.
_PLACES = (("I", "V", "X"), ("X", "L", "C"), ("C", "D", "M"), ("M", "", ""))

MAX_ROMAN = 3999


def _digit(digit: int, one: str, five: str, ten: str) -> str:
    if digit == 9:
        return one + ten
    if digit == 4:
        return one + five
    if digit >= 5:
        return five + one * (digit - 5)
    return one * digit


def to_roman(num: int) -> str:
    """Return the Roman numeral for ``num``; zero gives an empty string."""
    if not 0 <= num <= MAX_ROMAN:
        raise ValueError(f"cannot write {num} as a Roman numeral")
    parts = []
    for symbols in _PLACES:
        num, digit = divmod(num, 10)
        parts.append(_digit(digit, *symbols))
        if num == 0:
            break
    return "".join(reversed(parts))


def from_roman(numeral: str) -> int:
    """Return the value of a Roman numeral, subtracting a symbol smaller than its successor."""
    try:
        values = [_VALUES[symbol] for symbol in numeral]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    if not values:
        return 0
    total = values[-1]
    for current, following in pairwise(values):
        total += -current if current < following else current
    return total