"""Linked list restructuring: reversals, merges, sorting and pair swaps."""

from algodrills.linked_list import ListNode, length


def reverse_list(head):
    """Reverse the list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_list_recursive(head):
    """Reverse the list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    last = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return last


def reverse_k_group(head, k):
    """Reverse every complete group of ``k`` nodes in place, leaving a short tail as is."""
    if k < 1:
        raise ValueError("k must be positive")
    dummy = ListNode(0, head)
    before = dummy
    while True:
        tail = before
        for _ in range(k):
            tail = tail.next
            if tail is None:
                return dummy.next
        after = tail.next
        first = before.next
        previous, current = after, first
        while previous is not tail:
            current.next, previous, current = previous, current, current.next
        before.next = tail
        before = first


def merge_two_lists(list1, list2):
    """Splice two sorted lists into one; on ties the node from ``list2`` comes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists):
    """Merge any number of sorted lists, folding them in one at a time."""
    merged = None
    for head in lists:
        merged = merge_two_lists(merged, head)
    return merged


def reorder_list(head):
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None:
        return
    size = length(head)
    first_tail = head
    for _ in range(size // 2 - 1):
        first_tail = first_tail.next
    second = reverse_list(first_tail.next)
    first_tail.next = None
    first = head
    while first is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        if first_next is None:
            break
        second.next = first_next
        first, second = first_next, second_next


def reverse_between(head, left, right):
    """Reverse the nodes at 1-based positions ``left`` to ``right`` and return the head."""
    if head is None or left == right:
        return head
    size = length(head)
    if not 1 <= left <= right <= size:
        raise ValueError(f"positions must satisfy 1 <= left <= right <= {size}")
    dummy = ListNode(0, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    start = before.next
    end = start
    for _ in range(right - left):
        end = end.next
    after = end.next
    end.next = None
    before.next = reverse_list(start)
    start.next = after
    return dummy.next


def sort_list(head):
    """Merge-sort the list and return the new head."""
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return merge_two_lists(sort_list(head), sort_list(right))


def swap_pairs(head):
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None and current.next.next is not None:
        first = current.next
        second = first.next
        first.next = second.next
        second.next = first
        current.next = second
        current = first
    return dummy.next