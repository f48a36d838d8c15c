"""Selection, sorting and binary-search exercises."""

import math


def find_kth_largest(nums, k):
    """Return the k-th largest value, partitioning ``nums`` in place."""
    lo, hi = 0, len(nums) - 1
    while True:
        if lo > hi:
            raise ValueError("k is out of range")
        i, j = lo, hi
        pivot = nums[lo]
        while i < j:
            while i < j and nums[j] < pivot:
                j -= 1
            if i < j:
                nums[i], nums[j] = nums[j], nums[i]
                i += 1
            while i < j and nums[i] > pivot:
                i += 1
            if i < j:
                nums[i], nums[j] = nums[j], nums[i]
                j -= 1
        rank = i - lo + 1
        if rank == k:
            return pivot
        if rank < k:
            k -= rank
            lo = i + 1
        else:
            hi = i - 1


def quick_select(nums, start, end, k):
    """Return the k-th largest value of ``nums[start:end + 1]`` by absolute position k - 1."""
    target = k - 1
    while True:
        if not start <= target <= end:
            raise ValueError("k is out of range")
        i, j = start, end
        base = nums[start]
        while i < j:
            while i < j and nums[j] <= base:
                j -= 1
            while i < j and nums[i] >= base:
                i += 1
            if i < j:
                nums[i], nums[j] = nums[j], nums[i]
        nums[i], nums[start] = nums[start], nums[i]
        if i == target:
            return nums[i]
        if target > i:
            start = j + 1
        else:
            end = i - 1


def _partition_sort(nums, start, end, stays_right, stays_left):
    pending = [(start, end)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        i, j = lo, hi
        base = nums[lo]
        while i < j:
            while i < j and stays_right(nums[j], base):
                j -= 1
            while i < j and stays_left(nums[i], base):
                i += 1
            if i < j:
                nums[i], nums[j] = nums[j], nums[i]
        nums[i], nums[lo] = nums[lo], nums[i]
        pending.append((lo, i - 1))
        pending.append((i + 1, hi))


def quick_sort(nums, start, end):
    """Sort ``nums[start:end + 1]`` ascending in place."""
    _partition_sort(
        nums,
        start,
        end,
        lambda value, base: value >= base,
        lambda value, base: value <= base,
    )


def sort_descending(nums):
    """Sort ``nums`` descending in place."""
    _partition_sort(
        nums,
        0,
        len(nums) - 1,
        lambda value, base: value <= base,
        lambda value, base: value >= base,
    )


def find_median_sorted_arrays(nums1, nums2):
    """Return the median of two sorted lists as a float."""
    if len(nums2) < len(nums1):
        nums1, nums2 = nums2, nums1
    x, y = len(nums1), len(nums2)
    if x + y == 0:
        raise ValueError("both arrays are empty")
    lo, hi = 0, x
    while lo <= hi:
        mid_x = (lo + hi) // 2
        mid_y = (x + y + 1) // 2 - mid_x
        max_x = nums1[mid_x - 1] if mid_x else -math.inf
        max_y = nums2[mid_y - 1] if mid_y else -math.inf
        min_x = nums1[mid_x] if mid_x != x else math.inf
        min_y = nums2[mid_y] if mid_y != y else math.inf
        if max_x <= min_y and max_y <= min_x:
            if (x + y) % 2 == 0:
                return (max(max_x, max_y) + min(min_x, min_y)) / 2.0
            return float(max(max_x, max_y))
        if max_x > min_y:
            hi = mid_x - 1
        else:
            lo = mid_x + 1
    raise ValueError("not sorted arrays")


def find_peak_element(nums):
    """Return the index of an element greater than its right neighbour chain."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[mid + 1]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search(nums, target):
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def search_rotated(nums, target):
    """Return the index of ``target`` in a rotated sorted list of distinct values, or -1."""
    if not nums:
        return -1
    if len(nums) == 1:
        return 0 if nums[0] == target else -1
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        else:
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
    return -1