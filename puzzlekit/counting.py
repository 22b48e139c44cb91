"""Counting puzzles over integer sequences."""

from collections import Counter
from itertools import accumulate, combinations, takewhile
from operator import mul


def count_even_digit_numbers(nums) -> int:
    """Count the numbers that have an even number of decimal digits."""
    return sum(1 for n in nums if len(str(abs(n))) % 2 == 0)


def count_good_triplets(arr, a, b, c) -> int:
    """Count triplets i < j < k whose pairwise differences are within a, b and c."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def count_equal_divisible_pairs(nums, k) -> int:
    """Count index pairs i < j with equal values whose product i * j divides by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    return sum(
        1
        for (i, x), (j, y) in combinations(enumerate(nums), 2)
        if x == y and (i * j) % k == 0
    )


def distinct_averages(nums) -> int:
    """Count distinct averages of repeatedly pairing the smallest and largest values."""
    ordered = sorted(nums)
    half = len(ordered) // 2
    return len({low + high for low, high in zip(ordered[:half], reversed(ordered))})


def count_subarrays_product_less_than(nums, k) -> int:
    """Count contiguous subarrays whose running product stays below ``k``."""
    nums = list(nums)
    return sum(
        sum(1 for _ in takewhile(lambda product: product < k, accumulate(nums[start:], mul)))
        for start in range(len(nums))
    )


def time_to_buy_tickets(tickets, k) -> int:
    """Seconds until the person at position ``k`` has bought all their tickets."""
    tickets = list(tickets)
    if not 0 <= k < len(tickets):
        raise IndexError("k is not a position in the queue")
    wanted = tickets[k]
    if wanted <= 0:
        return 0
    return sum(
        max(0, min(count, wanted if i <= k else wanted - 1))
        for i, count in enumerate(tickets)
    )


def can_split_array(nums) -> bool:
    """Whether the values 1..100 split into two equal halves of distinct elements."""
    counts = Counter(nums)
    if any(not 1 <= value <= 100 for value in counts):
        raise ValueError("values must lie between 1 and 100")
    if any(count > 2 for count in counts.values()):
        return False
    singles = sum(1 for count in counts.values() if count == 1)
    return singles % 2 == 0