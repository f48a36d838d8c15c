"""Binary tree property checks: symmetry, balance, paths, ancestors and more."""

import math
from collections import deque
from itertools import islice

from algodrills.trees import TreeNode

__all__ = [
    "TreeNode",
    "is_symmetric",
    "is_symmetric_iterative",
    "diameter_of_binary_tree",
    "has_path_sum",
    "invert_tree",
    "is_balanced",
    "height",
    "is_complete_tree",
    "is_valid_bst",
    "kth_smallest",
    "lowest_common_ancestor",
    "max_depth",
    "max_path_sum",
    "path_sum",
    "sum_numbers",
]


def _mirrored(a, b):
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and _mirrored(a.left, b.right) and _mirrored(a.right, b.left)


def is_symmetric(root):
    """Return True if the tree is a mirror image of itself."""
    return _mirrored(root, root)


def is_symmetric_iterative(root):
    """Compare mirrored node pairs breadth first.

    The scan stops with True at the first pair of positions that are both empty.
    """
    pairs = deque([(root, root)])
    while pairs:
        a, b = pairs.popleft()
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        if a.val != b.val:
            return False
        pairs.append((a.left, b.right))
        pairs.append((a.right, b.left))
    return True


def diameter_of_binary_tree(root):
    """Return the number of edges on the longest path between any two nodes."""
    longest = 0

    def depth(node):
        nonlocal longest
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        longest = max(longest, left + right)
        return max(left, right) + 1

    depth(root)
    return longest


def has_path_sum(root, target_sum):
    """Return True if some root-to-leaf path sums to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target_sum == root.val
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def invert_tree(root):
    """Swap the children of every node in place and return the root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def height(root):
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root):
    """Return True if every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(height(root.left) - height(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def is_complete_tree(root):
    """Return True if every level is full except possibly the last, filled from the left."""
    queue = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True


def is_valid_bst(root):
    """Return True if the tree is a binary search tree with strictly ordered values."""

    def within(node, low, high):
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, -math.inf, math.inf)


def _inorder_values(node):
    if node is None:
        return
    yield from _inorder_values(node.left)
    yield node.val
    yield from _inorder_values(node.right)


def kth_smallest(root, k):
    """Return the k-th value in inorder (1-based), or -1 if there is none."""
    if k < 1:
        return -1
    return next(islice(_inorder_values(root), k - 1, None), -1)


def lowest_common_ancestor(root, p, q):
    """Return the deepest node having both ``p`` and ``q`` as descendants (by identity)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def max_depth(root):
    """Return the depth of the tree, counting nodes."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def max_path_sum(root):
    """Return the largest sum along any path through the tree."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = -math.inf

    def gain(node):
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def path_sum(root, target_sum):
    """Return every root-to-leaf path, as a list of values, that sums to ``target_sum``."""
    paths = []
    path = []

    def walk(node, remaining):
        if node is None:
            return
        path.append(node.val)
        if remaining == node.val and node.left is None and node.right is None:
            paths.append(list(path))
        walk(node.left, remaining - node.val)
        walk(node.right, remaining - node.val)
        path.pop()

    walk(root, target_sum)
    return paths


def sum_numbers(root):
    """Sum the numbers spelled by the digits on each root-to-leaf path."""

    def walk(node, current):
        if node is None:
            return 0
        current = current * 10 + node.val
        if node.left is None and node.right is None:
            return current
        return walk(node.left, current) + walk(node.right, current)

    return walk(root, 0)