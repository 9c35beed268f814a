"""Binary tree construction, traversal and measurement."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_level_order(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where -1 marks a missing child.

    Building stops as soon as the values run out.
    """
    it = iter(values)
    first = next(it, None)
    if first is None or first == NULL_MARKER:
        return None

    root = TreeNode(first)
    pending = deque([root])
    while pending:
        current = pending.popleft()

        left_val = next(it, None)
        if left_val is None:
            break
        if left_val != NULL_MARKER:
            current.left = TreeNode(left_val)
            pending.append(current.left)

        right_val = next(it, None)
        if right_val is None:
            break
        if right_val != NULL_MARKER:
            current.right = TreeNode(right_val)
            pending.append(current.right)

    return root


def level_order_lines(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values of each level, top to bottom."""
    levels: list[list[int]] = []
    current = [root] if root else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def format_tree(root: Optional[TreeNode]) -> str:
    """Render the tree level by level as printable text."""
    if root is None:
        return "Tree is empty\n"
    lines = ["".join(f"{v} " for v in level) for level in level_order_lines(root)]
    # The level below the leaves holds only empty slots and shows as a blank line.
    lines.append("")
    return "\nTree (Level Order):\n" + "".join(line + "\n" for line in lines)


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting empty slots between end nodes."""
    if root is None:
        return 0
    max_width = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        first = level[0][1]
        last = level[-1][1]
        max_width = max(max_width, last - first + 1)
        next_level: list[tuple[TreeNode, int]] = []
        for node, index in level:
            index -= first
            if node.left:
                next_level.append((node.left, 2 * index + 1))
            if node.right:
                next_level.append((node.right, 2 * index + 2))
        level = next_level
    return max_width


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Group values by column, left to right; within a column by depth, then value."""
    if root is None:
        return []
    columns: dict[int, dict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    todo = deque([(root, 0, 0)])
    while todo:
        node, x, y = todo.popleft()
        columns[x][y].append(node.val)
        if node.left:
            todo.append((node.left, x - 1, y + 1))
        if node.right:
            todo.append((node.right, x + 1, y + 1))

    return [
        [val for depth in sorted(rows) for val in sorted(rows[depth])]
        for _, rows in sorted(columns.items())
    ]


def _parents(root: Optional[TreeNode]) -> dict[TreeNode, TreeNode]:
    parents: dict[TreeNode, TreeNode] = {}
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                stack.append(child)
    return parents


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Return the values of all nodes exactly k edges away from target.

    Nodes are marked as visited by value, so values are expected to be unique.
    """
    parents = _parents(root)
    frontier = [target]
    visited = {target.val}
    for _ in range(k):
        if not frontier:
            break
        next_frontier: list[TreeNode] = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour.val not in visited:
                    next_frontier.append(neighbour)
                    visited.add(neighbour.val)
        frontier = next_frontier
    return [node.val for node in frontier]


def build_from_preorder_inorder(
    preorder: list[int], inorder: list[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder sequences."""
    order = iter(preorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        root_val = next(order)
        split = inorder.index(root_val, start)
        node = TreeNode(root_val)
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(preorder) - 1)


def build_from_inorder_postorder(
    inorder: list[int], postorder: list[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder sequences."""

    def build(in_start: int, in_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if in_start > in_end:
            return None
        node = TreeNode(postorder[post_end])
        split = inorder.index(node.val, in_start, in_end + 1)
        left_size = split - in_start
        right_size = in_end - split
        node.left = build(in_start, split - 1, post_start, post_start + left_size - 1)
        node.right = build(split + 1, in_end, post_end - right_size, post_end - 1)
        return node

    n = len(postorder)
    return build(0, n - 1, 0, n - 1)


def _read_ints(stream) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def main(argv: Optional[list[str]] = None) -> int:
    """Build a tree from level-order values and report on it."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree from level-order values (-1 for a missing node)."
    )
    parser.add_argument("values", nargs="*", type=int, help="level-order values")
    args = parser.parse_args(argv)

    print("Enter values in level order (-1 for NULL):")
    values: Iterable[int] = args.values if args.values else _read_ints(sys.stdin)
    root = build_level_order(values)

    sys.stdout.write(format_tree(root))
    print(f"width of binary tree{width_of_binary_tree(root)}")
    print("\nVertical Traversal:")
    for column in vertical_traversal(root):
        print("".join(f"{v} " for v in column))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())