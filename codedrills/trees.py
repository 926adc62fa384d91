"""Binary tree node and the drills that operate on binary trees."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        try:
            left = next(items)
            right_missing = False
            if left is not None:
                node.left = TreeNode(left)
                queue.append(node.left)
            right = next(items)
        except StopIteration:
            right_missing = True
        if right_missing:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Delete ``key`` from a binary search tree and return the new root."""
    if root is None:
        return None
    if root.val > key:
        root.left = delete_node(root.left, key)
        return root
    if root.val < key:
        root.right = delete_node(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    parent, successor = root, root.right
    while successor.left is not None:
        parent, successor = successor, successor.left
    if parent is root:
        parent.right = successor.right
    else:
        parent.left = successor.right
    root.val = successor.val
    return root


def leaf_values(root: Optional[TreeNode]) -> list[int]:
    """Return the leaf values from left to right."""
    leaves: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            leaves.append(node.val)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return leaves


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether both trees have the same leaf value sequence."""
    return leaf_values(root1) == leaf_values(root2)


def longest_zigzag(root: Optional[TreeNode]) -> int:
    """Length in edges of the longest alternating left/right downward path."""
    best = 0
    # Each entry: node, whether the next zigzag step goes left, path length so far.
    stack = [(root, True, 0)] if root is not None else []
    while stack:
        node, go_left, depth = stack.pop()
        best = max(best, depth)
        if go_left:
            steps = [(node.left, False, depth + 1), (node.right, True, 1)]
        else:
            steps = [(node.right, True, depth + 1), (node.left, False, 1)]
        stack.extend(step for step in steps if step[0] is not None)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node having both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to ``target_sum``."""
    prefixes: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = prefixes[running - target_sum]
        prefixes[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        prefixes[running] -= 1
        return found

    return walk(root, 0)


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node