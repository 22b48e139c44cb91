import pytest

from puzzlekit.dynamic import can_partition, most_points


def test_most_points_example():
    assert most_points([[1, 1], [2, 2], [3, 3], [4, 4], [5, 5]]) == 7


def test_most_points_empty():
    assert most_points([]) == 0


def test_most_points_no_skips_takes_everything():
    questions = [[3, 0], [4, 0], [5, 0]]
    assert most_points(questions) == sum(p for p, _ in questions)


def test_most_points_bounds():
    questions = [[3, 2], [4, 3], [4, 4], [2, 5]]
    result = most_points(questions)
    assert result >= max(p for p, _ in questions)
    assert result <= sum(p for p, _ in questions)


def test_can_partition_example():
    assert can_partition([1, 2, 3, 5]) is False


@pytest.mark.parametrize("nums", [[1, 5, 11], [2, 3], [7, 7, 1]])
def test_can_partition_doubled_list(nums):
    assert can_partition(nums + nums) is True


def test_can_partition_single_and_odd():
    assert can_partition([4]) is False
    assert can_partition([1, 2, 4]) is False
    assert can_partition([]) is False


def test_can_partition_element_too_large():
    assert can_partition([1, 1, 10]) is False