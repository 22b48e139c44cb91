"""String puzzles: common prefixes, run-length coding and palindromes."""

from collections import Counter
from functools import reduce
from itertools import groupby, takewhile
from string import ascii_lowercase


def _common_prefix(a: str, b: str) -> str:
    return "".join(x for x, _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string in ``strs``."""
    strs = list(strs)
    if not strs:
        raise ValueError("need at least one string")
    return reduce(_common_prefix, strs)


def run_length_encode(text: str) -> str:
    """Encode each run of equal characters as its length followed by the character."""
    return "".join(f"{len(list(run))}{char}" for char, run in groupby(text))


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence, starting from "1"."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = run_length_encode(term)
    return term


def thousand_separator(n: int) -> str:
    """Write a non-negative integer with a dot between each group of three digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    return f"{n:,}".replace(",", ".")


def longest_palindrome(words) -> int:
    """Length of the longest palindrome built by joining two-letter lowercase words."""
    counts = Counter()
    for word in words:
        if len(word) != 2 or any(ch not in ascii_lowercase for ch in word):
            raise ValueError(f"not a two-letter lowercase word: {word!r}")
        counts[word] += 1

    length = 0
    has_odd_centre = False
    for word, count in counts.items():
        first, second = word
        if first == second:
            length += (count // 2) * 4
            has_odd_centre = has_odd_centre or count % 2 == 1
        elif first < second:
            length += min(count, counts[second + first]) * 4
    if has_odd_centre:
        length += 2
    return length