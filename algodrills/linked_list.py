"""Singly linked list nodes and exercises on them: sums, cycles, duplicates, lookups."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self):
        return f"ListNode(val={self.val!r})"


def from_values(values):
    """Build a linked list from an iterable of values and return its head, or None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head):
    seen = set()
    while head is not None:
        if id(head) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(head))
        yield head
        head = head.next


def to_values(head):
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1, l2):
    """Add two numbers stored as little-endian digit lists and return the sum as a new list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry > 0:
        tail.next = ListNode(carry)
    return dummy.next


def has_cycle(head):
    """Return True if following ``next`` from ``head`` revisits a node."""
    seen = set()
    while head is not None:
        if id(head) in seen:
            return True
        seen.add(id(head))
        head = head.next
    return False


def has_cycle_two_pointer(head):
    """Return True if the list loops, using slow and fast pointers."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head):
    """Return the node where the cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def delete_duplicates(head):
    """Keep one node of each run of equal values in a sorted list, in place."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head


def delete_all_duplicates(head):
    """Remove every node whose value repeats in a sorted list, in place."""
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None and current.next.next is not None:
        if current.next.val == current.next.next.val:
            repeated = current.next.val
            while current.next is not None and current.next.val == repeated:
                current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def get_intersection_node(head_a, head_b):
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def is_palindrome(head):
    """Return True if the list's values read the same in both directions."""
    values = to_values(head)
    return values == values[::-1]


def length(head):
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def remove_nth_from_end(head, n):
    """Unlink the n-th node from the end (1-based) and return the new head."""
    size = length(head)
    if not 1 <= n <= size:
        raise ValueError(f"n must be between 1 and {size}")
    dummy = ListNode(0, head)
    current = dummy
    for _ in range(size - n):
        current = current.next
    current.next = current.next.next
    return dummy.next