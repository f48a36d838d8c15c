"""Dynamic-programming and grid-search exercises."""

import math

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def change(amount, coins):
    """Return the number of coin combinations that make up ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coins must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def climb_stairs(n):
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def coin_change(coins, amount):
    """Return the fewest coins that make up ``amount``, or -1 if impossible."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coins must not be negative")
    fewest = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if total - coin >= 0:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] == math.inf else fewest[amount]


def find_length(nums1, nums2):
    """Return the length of the longest contiguous run common to both sequences."""
    longest = 0
    previous = [0] * (len(nums2) + 1)
    for a in nums1:
        current = [0] * (len(nums2) + 1)
        for j, b in enumerate(nums2, start=1):
            if a == b:
                current[j] = previous[j - 1] + 1
                longest = max(longest, current[j])
        previous = current
    return longest


def exist(board, word):
    """Return True if ``word`` can be traced through adjacent, unrepeated board cells."""
    rows = len(board)
    if not rows:
        return False
    cols = len(board[0])

    def search(x, y, index, used):
        if index == len(word):
            return True
        if not (0 <= x < rows and 0 <= y < cols):
            return False
        if (x, y) in used or board[x][y] != word[index]:
            return False
        used.add((x, y))
        found = any(search(x + dx, y + dy, index + 1, used) for dx, dy in _STEPS)
        used.discard((x, y))
        return found

    return any(search(x, y, 0, set()) for x in range(rows) for y in range(cols))


def longest_common_subsequence(text1, text2):
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindrome(s):
    """Return the longest palindromic substring; among equals, the last one found."""
    n = len(s)
    if n < 2:
        return s
    is_pal = [[i == j for j in range(n)] for i in range(n)]
    start, best = 0, 1
    for i in range(n - 1):
        if s[i] == s[i + 1]:
            is_pal[i][i + 1] = True
            start, best = i, 2
    for size in range(3, n + 1):
        for i in range(n - size + 1):
            j = i + size - 1
            if s[i] == s[j] and is_pal[i + 1][j - 1]:
                is_pal[i][j] = True
                start, best = i, size
    return s[start:start + best]