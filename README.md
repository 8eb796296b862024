# algoset

A collection of classic algorithm exercises written as plain Python
functions: linked lists, queues and stacks, a max-heap, binary trees, grid
searches, graph algorithms and a little number theory. It has no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `algoset.linked_list`

- `ListNode(val=0, next=None)` – a singly linked list node; iterating over a
  node yields the values from it to the end of the list.
- `from_values(values)` / `to_values(head)` – build a list from values and
  read it back (`to_values(None)` is `[]`).
- `merge_two_lists(list1, list2)` – merge two sorted lists by relinking their
  nodes; on equal values the node from `list2` comes first.

### `algoset.queues`

- `interleave(items)` – interleave the first half with the second half; with
  an odd number of items the last one is dropped.
- `reverse_first_k(items, k)` – reverse the first `k` items; raises
  `ValueError` if `k` is outside `0..len(items)`.
- `card_rotation(n)` – the deck order of cards `1..n` such that, moving `i`
  cards to the bottom before dealing card `i`, the cards come out in order.
- `circular_tour(petrol, distance)` – the index of the pump from which a full
  circle can be driven, or `None`.
- `max_of_subarrays(values, k)` – the maximum of every window of size `k`.
- `first_negatives(values, k)` – the first negative value of every window of
  size `k`, or `0` when a window has none.
- `first_non_repeating(stream)` – for every prefix of a character stream, its
  first non-repeated character or `#`, as one string (`"aabc"` gives
  `"a#bb"`).
- `pairwise_destruction(words)` – how many words remain after equal
  neighbours cancel out.
- `reverse_stack(stack)` – the stack reversed end to end.
- `MaxHeap(values=())` – a priority queue with `push(value)`, `pop()`,
  `top()` and `len()`; `pop` and `top` raise `IndexError` when empty.

The window functions raise `ValueError` for a window size below 1.

### `algoset.trees`

- `TreeNode(val=0, left=None, right=None, next=None)` – a binary tree node.
- `build_tree(values)` – build a tree from level-order values, `None`
  marking a missing child.
- `level_order`, `zigzag_level_order`, `sorted_levels`,
  `reverse_level_order` – the node values of each level as lists of lists.
  `reverse_level_order` gives the deepest level first, each level right to
  left.
- `is_symmetric(root)`, `has_path_sum(root, target_sum)`.
- `diameter(root)` – the number of edges on the longest path.
- `can_split_by_edge(root)` – whether removing one edge leaves two trees of
  equal size.
- `generate_trees(inorder)` – every tree with the given inorder traversal.
- `populate_next(root)` – set each node's `next` to its inorder successor.
- `complete_tree_from_list(head)` – build a complete binary tree from a
  `ListNode` list given in level order.

### `algoset.grids`

- `solve_surrounded(board)` – turn, in place, every `'O'` region that does
  not touch the border into `'X'`.
- `word_exists(board, word)` – whether the word runs through orthogonally
  adjacent cells, each used at most once.
- `pacific_atlantic(heights)` – the `(row, col)` cells, in row-major order,
  whose water reaches both the top/left and the bottom/right edges.
- `count_components(grid)` / `num_islands(grid)` – the number of
  orthogonally connected regions of `1` / `'1'` cells.
- `shortest_path_binary_matrix(grid)` – the number of cells on the shortest
  8-directional path of `0` cells from the top-left to the bottom-right
  corner, or `None`.
- `rotten_oranges(grid)` – the minutes until no fresh orange (`1`) is left
  next to rotten ones (`2`), or `None` if some never rot.

### `algoset.graphs`

- `is_bipartite(graph)` – two-colourability of an adjacency-list graph.
- `can_finish(num_courses, prerequisites)` – whether the `(course, required)`
  pairs contain no cycle.
- `network_delay_time(times, n, k)` – the time for a signal from node `k`
  to reach all nodes `1..n` over directed `(source, target, delay)` edges,
  or `None` if some node is unreachable.
- `reachable_cities(n, roads, start, fuel)` – how many cities `0..n-1` are
  reachable from `start` within `fuel` over two-way `(a, b, cost)` roads.
- `vaccine_times(n, roads)` – for each village `1..n`, the time for the
  vaccine to arrive when prime-numbered villages hold it from the start and a
  road between `u` and `v` takes `max(u, v)`; unreached villages map to
  `None`.
- `ladder_length(begin_word, end_word, word_list)` – the number of words in
  the shortest one-letter-at-a-time ladder, or `0`.
- `GraphNode(val=0, neighbors=[])` and `clone_graph(node)` – deep copy of a
  graph.

Node numbers outside their range raise `ValueError`.

### `algoset.number_theory`

- `restricted_pacman(m, n)` – `(m - 1) * (n - 1) // 2` for coprime `m` and
  `n`; raises `ValueError` otherwise.
- `square_free_part(x)`, `is_perfect_square(x)`, `is_prime(x)`.
- `smallest_square_subsequence(values)` – the length (1, 2 or 3) of the
  shortest subsequence whose product is a perfect square, or `None` if no
  subsequence of those lengths works.

## Examples

```python
from algoset.linked_list import from_values, to_values, merge_two_lists
from algoset.queues import MaxHeap
from algoset.grids import num_islands
from algoset.graphs import network_delay_time

merged = merge_two_lists(from_values([1, 3, 5]), from_values([2, 4, 6]))
print(to_values(merged))            # [1, 2, 3, 4, 5, 6]

heap = MaxHeap([23, 14, 22, 10, 9, 6])
print(heap.top())                   # 23
print(len(heap))                    # 6

grid = [
    ["1", "1", "0", "0", "0"],
    ["1", "1", "0", "0", "0"],
    ["0", "0", "1", "0", "0"],
    ["0", "0", "0", "1", "1"],
]
print(num_islands(grid))            # 3

times = [[2, 1, 1], [2, 3, 1], [3, 4, 1]]
print(network_delay_time(times, 4, 2))  # 2
```

## Command line

`algoset-square` reads a count followed by that many integers from standard
input and prints the length of the shortest subsequence whose product is a
perfect square, or `-1` if there is none:

```
echo "3 2 3 6" | algoset-square
```

This prints `3`. It is the only command; everything else is used as a
library.