"""Puzzles over integer sequences: triplets, matrices, intersections and more."""

from collections import Counter
from itertools import accumulate, combinations, permutations


def max_triplet_value_brute(nums) -> int:
    """Largest (nums[i] - nums[j]) * nums[k] over i < j < k, checking every triplet; at least 0."""
    return max(
        [0, *((x - y) * z for x, y, z in combinations(nums, 3))]
    )


def max_triplet_value(nums) -> int:
    """Largest (nums[i] - nums[j]) * nums[k] over i < j < k in linear time; at least 0."""
    nums = list(nums)
    if len(nums) < 3:
        return 0
    prefix_max = list(accumulate(nums, max))
    suffix_max = list(accumulate(reversed(nums), max))[::-1]
    candidates = (
        (before - middle) * after
        for before, middle, after in zip(prefix_max, nums[1:-1], suffix_max[2:])
    )
    return max([0, *candidates])


def find_even_numbers(digits) -> list[int]:
    """Sorted distinct even three-digit numbers built from three of the given digits."""
    return sorted(
        {
            a * 100 + b * 10 + c
            for a, b, c in permutations(digits, 3)
            if a != 0 and c % 2 == 0
        }
    )


def find_matrix(nums) -> list[list[int]]:
    """Split ``nums`` into as few rows of distinct values as possible.

    Row ``r`` holds every value occurring more than ``r`` times, in order of first appearance.
    """
    counts = Counter(nums)
    rows = max(counts.values(), default=0)
    return [[value for value, count in counts.items() if count > r] for r in range(rows)]


def generate_key(num1, num2, num3) -> int:
    """Digit-wise minimum of the last four digits of three numbers, zero-padded."""
    numbers = (num1, num2, num3)
    if any(n < 0 for n in numbers):
        raise ValueError("numbers must not be negative")
    padded = [f"{n % 10000:04d}" for n in numbers]
    return int("".join(min(column) for column in zip(*padded)))


def intersection(nums1, nums2) -> list[int]:
    """Sorted distinct values present in both sequences."""
    return sorted(set(nums1) & set(nums2))


def find_content_children(greed, sizes) -> int:
    """Number of children who can each get a cookie at least as large as their greed."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content < len(children) and children[content] <= size:
            content += 1
    return content


def max_count(m, n, ops) -> int:
    """Cells of an ``m`` by ``n`` matrix holding the maximum after the range additions ``ops``."""
    ops = list(ops)
    if not ops:
        return m * n
    return min(op[0] for op in ops) * min(op[1] for op in ops)


def trap(height) -> int:
    """Units of rain water trapped between the bars of the given heights."""
    height = list(height)
    if not height:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(left, right) - h for left, right, h in zip(left_max, right_max, height))


def triangle_type(nums) -> str:
    """Classify three side lengths as "none", "equilateral", "isosceles" or "scalene"."""
    sides = list(nums)
    if len(sides) != 3:
        raise ValueError("a triangle needs exactly three sides")
    x, y, z = sorted(sides)
    if x + y <= z:
        return "none"
    distinct = len(set(sides))
    if distinct == 1:
        return "equilateral"
    if distinct == 2:
        return "isosceles"
    return "scalene"