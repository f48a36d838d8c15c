"""String exercises: arithmetic on digits, parsing, windows and edit distance."""

import re
from collections import Counter
from itertools import zip_longest

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ATOI_PREFIX = re.compile(r" *([+-]?)([0-9]*)")
_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)


def _int_or_zero(text):
    return int(text) if _INTEGER.fullmatch(text) else 0


def add_strings(num1, num2):
    """Add two non-negative decimal strings; characters that are not digits count as 0."""
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(_int_or_zero(a) + _int_or_zero(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def _truncating_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(s):
    """Evaluate non-negative integers joined by + - * /, division truncating toward zero."""
    stack = []
    number = 0
    sign = "+"
    last = len(s) - 1
    for index, ch in enumerate(s):
        is_digit = "0" <= ch <= "9"
        if is_digit:
            number = number * 10 + int(ch)
        if (not is_digit and ch != " ") or index == last:
            if sign == "+":
                stack.append(number)
            elif sign == "-":
                stack.append(-number)
            elif sign == "*":
                stack[-1] *= number
            elif sign == "/":
                stack[-1] = _truncating_div(stack[-1], number)
            sign = ch
            number = 0
    return sum(stack)


def compare_version(version1, version2):
    """Return 1, -1 or 0 as ``version1`` is newer than, older than or equal to ``version2``."""
    parts1 = [_int_or_zero(part) for part in version1.split(".")]
    parts2 = [_int_or_zero(part) for part in version2.split(".")]
    for a, b in zip(parts1, parts2):
        if a > b:
            return 1
        if b > a:
            return -1
    if any(parts1[len(parts2):]):
        return 1
    if any(parts2[len(parts1):]):
        return -1
    return 0


def decode_string(s):
    """Expand ``k[text]`` groups, which may nest, into ``text`` repeated k times."""
    stack = []
    current = ""
    count = 0
    for ch in s:
        if "0" <= ch <= "9":
            count = count * 10 + int(ch)
        elif ch == "[":
            stack.append((current, count))
            current = ""
            count = 0
        elif ch == "]":
            if not stack:
                raise ValueError("unmatched ']'")
            previous, repeat = stack.pop()
            current = previous + current * repeat
        else:
            current += ch
    return current


def length_of_longest_substring(s):
    """Return the length of the longest substring without a repeated character."""
    if len(s) <= 1:
        return len(s)
    last_seen = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        seen = last_seen.get(ch)
        if seen is not None and seen >= left:
            left = seen + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring_brute(s):
    """Return the longest repeat-free substring length by checking every substring."""
    if len(s) <= 1:
        return len(s)
    return max(
        end - start
        for start in range(len(s))
        for end in range(start + 1, len(s) + 1)
        if len(set(s[start:end])) == end - start
    )


def min_distance(word1, word2):
    """Return the fewest inserts, deletes and replacements turning ``word1`` into ``word2``."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def min_window(s, t):
    """Return the shortest (first found) substring of ``s`` holding every character of ``t``."""
    if not s or not t:
        return ""
    need = Counter(t)
    window = Counter()
    satisfied = 0
    left = 0
    start, size = 0, len(s) + 1
    for right, ch in enumerate(s, start=1):
        if ch in need:
            window[ch] += 1
            if window[ch] == need[ch]:
                satisfied += 1
        while satisfied == len(need):
            if right - left < size:
                start, size = left, right - left
            outgoing = s[left]
            left += 1
            if outgoing in need:
                if window[outgoing] == need[outgoing]:
                    satisfied -= 1
                window[outgoing] -= 1
    if size == len(s) + 1:
        return ""
    return s[start:start + size]


def my_atoi(s):
    """Parse a leading signed integer after spaces, clamped to the 32-bit signed range."""
    sign_text, digits = _ATOI_PREFIX.match(s).groups()
    sign = -1 if sign_text == "-" else 1
    value = 0
    for ch in digits:
        digit = int(ch)
        if value > (_INT32_MAX - digit) // 10:
            return _INT32_MAX if sign == 1 else _INT32_MIN
        value = value * 10 + digit
    return sign * value


def _is_octet(part):
    if len(part) > 1 and part[0] == "0":
        return False
    return 0 <= _int_or_zero(part) <= 255


def restore_ip_addresses(s):
    """Return every dotted IPv4 address that can be formed by splitting ``s`` into four parts."""
    addresses = []

    def extend(start, parts):
        if len(parts) == 4 and start == len(s):
            addresses.append(".".join(parts))
            return
        if len(parts) == 4 or start == len(s):
            return
        for size in range(1, 4):
            if start + size > len(s):
                break
            part = s[start:start + size]
            if _is_octet(part):
                parts.append(part)
                extend(start + size, parts)
                parts.pop()

    extend(0, [])
    return addresses


def reverse_words(s):
    """Return the words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))