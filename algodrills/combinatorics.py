"""Backtracking enumerations: permutations, subsets, combination sums, brackets."""

from itertools import permutations


def permute(nums):
    """Return every ordering of ``nums``, positions taken in index order."""
    return [list(order) for order in permutations(nums)]


def subsets(nums):
    """Return every subset of ``nums`` in depth-first order."""
    result = []

    def extend(start, path):
        result.append(list(path))
        for index in range(start, len(nums)):
            path.append(nums[index])
            extend(index + 1, path)
            path.pop()

    extend(0, [])
    return result


def combination_sum(candidates, target):
    """Return every multiset of ``candidates`` summing to ``target``, reuse allowed."""
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    result = []

    def extend(start, remaining, path):
        if remaining == 0:
            result.append(list(path))
            return
        for index in range(start, len(candidates)):
            candidate = candidates[index]
            if candidate <= remaining:
                path.append(candidate)
                extend(index, remaining - candidate, path)
                path.pop()

    extend(0, target, [])
    return result


def generate_parenthesis(n):
    """Return every well-formed string of ``n`` bracket pairs."""
    result = []

    def extend(path, opened, closed):
        if len(path) == 2 * n:
            result.append(path)
            return
        if opened < n:
            extend(path + "(", opened + 1, closed)
        if closed < opened:
            extend(path + ")", opened, closed + 1)

    extend("", 0, 0)
    return result