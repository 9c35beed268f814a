# algokit

A small collection of well-known algorithm exercises, written as plain
Python functions that take and return built-in types. It has no
dependencies beyond the standard library.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### `algokit.trees`

- `TreeNode(val=0, left=None, right=None)` — a dataclass node that compares
  and hashes by identity.
- `build_level_order(values)` — builds a tree from level-order values, where
  `-1` marks a missing child; building stops when the values run out.
- `build_from_preorder_inorder(preorder, inorder)` and
  `build_from_inorder_postorder(inorder, postorder)` — rebuild a tree from
  two traversals.
- `level_order_lines(root)` — the values of each level as lists.
- `format_tree(root)` — the tree as printable text, one level per line
  (`"Tree is empty\n"` for an empty tree).
- `width_of_binary_tree(root)` — the widest level, counting the empty slots
  between its end nodes; `0` for an empty tree.
- `vertical_traversal(root)` — values grouped by column from left to right;
  inside a column ordered by depth, then by value.
- `distance_k(root, target, k)` — values of the nodes exactly `k` edges from
  `target` (node values are expected to be unique).

### `algokit.graphs`

- `update_matrix(mat)` — distance from each cell to the nearest `0`.
- `minimum_effort_path(heights)` — the smallest possible largest height step
  on a path from the top-left to the bottom-right cell.
- `find_cheapest_price(n, flights, src, dst, k)` — cheapest price with at most
  `k` stops, or `-1`.
- `can_finish(num_courses, prerequisites)` — `True` when the prerequisite
  pairs `[course, required]` contain no cycle.
- `count_paths(n, roads)` — number of shortest paths from node `0` to node
  `n - 1` over undirected roads, modulo 10^9 + 7.
- `network_delay_time(times, n, k)` — time for a signal from node `k` to reach
  all nodes `1..n`, or `-1` if some node is unreachable.
- `find_ladders(begin_word, end_word, word_list)` — every shortest
  one-letter-at-a-time transformation sequence.

### `algokit.structures`

- `StackQueue` — a first-in first-out queue built on two stacks, with
  `push(value)`, `front()`, `pop()` and `len()`. `front()` and `pop()` raise
  `IndexError` on an empty queue.

### `algokit.backtracking`

- `subsets(nums)` — every subset.
- `subsets_with_dup(nums)` — every distinct subset when values repeat.
- `combination_sum2(candidates, target)` — distinct combinations, each
  candidate used at most once, summing to `target`.
- `generate_parenthesis(n)` — every well-formed string of `n` pairs.
- `word_exists(board, word)` — whether `word` can be traced through
  adjacent cells, each used at most once.

### `algokit.numeric`

- `is_prime(n)` and `factorize(n)` — primality and prime factors in
  non-decreasing order.
- `coin_change(coins, amount)` — fewest coins for `amount`, or `-1`.
- `coin_change_ways(amount, coins)` — number of coin combinations. Both coin
  functions raise `ValueError` for no coins or non-positive coins.
- `divide(dividend, divisor)` — integer division truncating toward zero,
  clamped to the signed 32-bit range; raises `ZeroDivisionError` for a zero
  divisor.
- `min_eating_speed(piles, h)` — smallest speed that finishes all piles in
  `h` hours; raises `ValueError` for no piles.
- `smallest_balanced_index(nums)` — first index whose left-hand sum equals
  the product of the values to its right, or `-1`.

## Examples

```python
from algokit.trees import build_level_order, width_of_binary_tree
from algokit.graphs import network_delay_time
from algokit.backtracking import generate_parenthesis
from algokit.numeric import coin_change, factorize
from algokit.structures import StackQueue

root = build_level_order([1, 3, 2, 5, 3, -1, 9])
width_of_binary_tree(root)       # 4

network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)   # 2
generate_parenthesis(3)          # ['((()))', '(()())', '(())()', '()(())', '()()()']
coin_change([1, 2, 5], 11)       # 3
factorize(60)                    # [2, 2, 3, 5]

q = StackQueue()
q.push(1)
q.push(2)
q.pop()                          # 1
```

## Command line

```
algokit-tree 1 3 2 5 3 -1 9
echo "1 3 2 5 3 -1 9" | algokit-tree
```

Builds a tree from level-order values (`-1` for a missing child), given as
arguments or, when there are none, read from standard input up to the first
token that is not an integer. It prints the tree one level per line, its
width, and its vertical traversal one column per line.

## Tests

```
pytest
```