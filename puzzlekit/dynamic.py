"""Dynamic-programming puzzles."""


def most_points(questions) -> int:
    """Most points earned answering questions in order, where solving [points, skip] skips the next ``skip``."""
    questions = list(questions)
    n = len(questions)
    best = [0] * (n + 1)
    for i in reversed(range(n)):
        points, brainpower = questions[i]
        solve = points + best[min(n, i + brainpower + 1)]
        best[i] = max(solve, best[i + 1])
    return best[0]


def can_partition(nums) -> bool:
    """Whether ``nums`` splits into two subsets of equal sum."""
    nums = list(nums)
    if len(nums) < 2:
        return False
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    if max(nums) > target:
        return False
    reachable = 1
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> target & 1)