"""Bracket-matching exercises."""

_PAIRS = {"(": ")", "[": "]", "{": "}"}


def is_valid(s):
    """Return True if every bracket in ``s`` is closed in the right order."""
    stack = []
    for char in s:
        if char in _PAIRS:
            stack.append(char)
        elif not stack or _PAIRS[stack.pop()] != char:
            return False
    return not stack


def longest_valid_parentheses(s):
    """Return the length of the longest well-formed run of parentheses in ``s``."""
    stack = [-1]
    longest = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            longest = max(longest, index - stack[-1])
        else:
            stack.append(index)
    return longest