"""Binary tree nodes, traversals and construction from traversal orders."""

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder(node):
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _preorder(node):
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _children(node, right_first=False):
    pair = (node.right, node.left) if right_first else (node.left, node.right)
    return [child for child in pair if child is not None]


def inorder_traversal(root):
    """Return the values of the tree in left, node, right order."""
    return list(_inorder(root))


def preorder_traversal(root):
    """Return the values of the tree in node, left, right order."""
    return list(_preorder(root))


def preorder_traversal_iterative(root):
    """Return the preorder values of the tree using an explicit stack."""
    if root is None:
        return []
    values = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def level_order(root):
    """Return the breadth-first values, each node as its own one-element list."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        levels.append([node.val])
        queue.extend(_children(node))
    return levels


def level_order_grouped(root):
    """Return the values of the tree grouped by depth, left to right."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(_children(node))
        levels.append(level)
    return levels


def zigzag_level_order(root):
    """Return values by depth, enqueuing children right-first and left-first on alternate levels."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    right_first = True
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(_children(node, right_first))
        right_first = not right_first
        levels.append(level)
    return levels


def right_side_view(root):
    """Return the rightmost value at each depth of the tree."""
    return [level[-1] for level in level_order_grouped(root)]


def build_tree(preorder, inorder):
    """Rebuild a tree from its preorder and inorder value sequences."""
    if not preorder or not inorder:
        return None
    root_val = preorder[0]
    try:
        split = inorder.index(root_val)
    except ValueError:
        raise ValueError(f"value {root_val!r} missing from inorder sequence") from None
    if split + 1 > len(preorder):
        raise ValueError("preorder and inorder sequences do not match")
    root = TreeNode(root_val)
    root.left = build_tree(preorder[1:split + 1], inorder[:split])
    root.right = build_tree(preorder[split + 1:], inorder[split + 1:])
    return root