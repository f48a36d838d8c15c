"""Assorted small exercises: squares, random numbers, grid paths, square roots."""

import math
import random
from itertools import accumulate


def count_distinct_squares(nums):
    """Count the distinct squares met while walking inwards from both ends of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    result = 1
    left, right = 0, len(nums) - 1
    current = nums[left] * nums[left]
    while left < right:
        left_square = nums[left] * nums[left]
        right_square = nums[right] * nums[right]
        if left_square > right_square:
            if current != left_square:
                result += 1
                current = left_square
            left += 1
        else:
            # The right-hand check compares against the index itself.
            if current != right:
                result += 1
                current = right_square
            right -= 1
    return result


def rand7(rng=None):
    """Return a uniform integer in 1..7."""
    source = random if rng is None else rng
    return source.randint(1, 7)


def rand10(rng=None):
    """Return a uniform integer in 1..10 built only from :func:`rand7`."""
    while True:
        total = (rand7(rng) - 1) * 7 + rand7(rng)
        if total <= 10:
            return total % 10 + 1


def unique_paths(m, n):
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def integer_sqrt(x):
    """Return the floor of the square root of ``x``; 0 for negative input."""
    if x < 0:
        return 0
    return math.isqrt(x)