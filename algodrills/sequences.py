"""Exercises over integer sequences: scans, windows, dynamic programming, sums."""

from bisect import bisect_left
from collections import Counter


def daily_temperatures(temperatures):
    """For each day, return how many days until a warmer one, or 0 if none follows."""
    waits = [0] * len(temperatures)
    pending = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def first_missing_positive(nums):
    """Return the smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    return next(
        candidate
        for candidate in range(1, len(nums) + 2)
        if candidate not in present
    )


def length_of_lis(nums):
    """Return the length of the longest strictly increasing subsequence."""
    tails = []
    for value in nums:
        if not tails or value > tails[-1]:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)


def length_of_lis_dp(nums):
    """Return the length of the longest strictly increasing subsequence, quadratically."""
    lengths = []
    for index, value in enumerate(nums):
        lengths.append(
            1
            + max(
                (
                    lengths[earlier]
                    for earlier in range(index)
                    if nums[earlier] < value
                ),
                default=0,
            )
        )
    return max(lengths, default=0)


def longest_consecutive(nums):
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def majority_element(nums):
    """Return the first value seen more than ``len(nums) // 2`` times, or -1."""
    threshold = len(nums) // 2
    counts = Counter()
    for value in nums:
        counts[value] += 1
        if counts[value] > threshold:
            return value
    return -1


def max_profit(prices):
    """Return the best profit from a single buy followed by a later sell, or 0."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def max_profit_multi(prices):
    """Return the best profit when any number of non-overlapping trades is allowed."""
    return sum(
        max(today - yesterday, 0) for yesterday, today in zip(prices, prices[1:])
    )


def max_sub_array(nums):
    """Return the largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = 0
    best = nums[0]
    for value in nums:
        running = max(running + value, value)
        best = max(best, running)
    return best


def merge_sorted(nums1, m, nums2, n):
    """Copy the first ``n`` of ``nums2`` after the first ``m`` of ``nums1`` and sort ``nums1`` in place."""
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("lists are too short for the given counts")
    nums1[m:m + n] = nums2[:n]
    nums1.sort()


def min_sub_array_len(target, nums):
    """Return the shortest length of a contiguous slice summing to at least ``target``, or 0."""
    if target <= 0:
        raise ValueError("target must be positive")
    shortest = None
    left = 0
    window = 0
    for right, value in enumerate(nums):
        window += value
        while window >= target:
            size = right - left + 1
            if shortest is None or size < shortest:
                shortest = size
            window -= nums[left]
            left += 1
    return 0 if shortest is None else shortest


def next_permutation(nums):
    """Rearrange ``nums`` in place into the next lexicographic permutation, wrapping to the first."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        -1,
    )
    if pivot >= 0:
        swap = next(
            j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot]
        )
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = sorted(nums[pivot + 1:])


def rob(nums):
    """Return the largest total of values taken with no two adjacent."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(before + value, best)
    return best


def three_sum(nums):
    """Return every distinct triple summing to zero; sorts ``nums`` in place."""
    nums.sort()
    triples = []
    for i in range(len(nums) - 2):
        first = nums[i]
        if first > 0:
            break
        if i > 0 and first == nums[i - 1]:
            continue
        left, right = i + 1, len(nums) - 1
        while left < right:
            total = first + nums[left] + nums[right]
            if total == 0:
                triples.append([first, nums[left], nums[right]])
                while left < right and nums[left] == nums[left + 1]:
                    left += 1
                while left < right and nums[right] == nums[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total > 0:
                right -= 1
            else:
                left += 1
    return triples


def two_sum(nums, target):
    """Return ``[j, i]`` with ``nums[i] + nums[j] == target`` and ``i != j``, or None."""
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [partner, index]
    return None