# algokit

A small library of classic algorithms and data structures, written in plain
Python with no third-party dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `two_sum`, `max_area`, `max_profit`, `running_sum`, `majority_element`, `rotate`, `minimum_deletions`, `remove_duplicates`, `missing_number`, `max_frequency_elements`, `intersection`, `next_greater_element`, `max_subarray`, `pivot_index`, `asteroid_collision` |
| `algokit.strings` | `is_palindrome`, `is_valid_parentheses` |
| `algokit.searching` | `search_rotated`, `search_rotated_with_duplicates`, `search_matrix`, `min_eating_speed`, `can_eat_in_time`, `MAX_SPEED` |
| `algokit.matrices` | `row_with_maximum_ones`, `rotate_image`, `spiral_order`, `set_zeroes` |
| `algokit.sorting` | `sort_colors`, `merge_sorted`, `merge_sort` |
| `algokit.linked_lists` | `ListNode`, `reverse_list`, `merge_sorted_lists`, `delete_node`, `delete_duplicates`, `middle_node` |
| `algokit.trees` | `TreeNode`, `is_same_tree`, `is_symmetric`, `level_order`, `max_depth`, `has_path_sum`, `preorder`, `inorder`, `postorder`, `right_side_view`, `build_tree`, `diameter` |
| `algokit.containers` | `MinStack`, `StackQueue`, `DirectHashMap`, `SinglyLinkedList`, `CircularQueue` |

The package's `__init__` does not import the modules; import from each
module directly.

## Examples

```python
from algokit.arrays import two_sum, max_subarray
from algokit.strings import is_valid_parentheses

two_sum([2, 7, 11, 15], 9)                      # [0, 1]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
is_valid_parentheses("([]{})")                  # True
```

Binary trees can be built from `[parent, child, is_left]` descriptions, where
`is_left` equal to 1 places the child on the left:

```python
from algokit.trees import build_tree, inorder, level_order

root = build_tree([[20, 15, 1], [20, 17, 0], [50, 20, 1], [50, 80, 0], [80, 19, 1]])
level_order(root)  # [[50], [20, 80], [15, 17, 19]]
inorder(root)      # [15, 20, 17, 50, 19, 80]
```

`ListNode` is iterable, yielding the values from that node to the end of the
list, so `list(head)` turns a linked list into a Python list.

Containers behave like ordinary Python objects:

```python
from algokit.containers import MinStack, CircularQueue

stack = MinStack()
for value in (5, 3, 7):
    stack.push(value)
stack.get_min()  # 3
len(stack)       # 3

queue = CircularQueue(2)
queue.enqueue(1)
queue.enqueue(2)
queue.is_full()  # True
queue.front()    # 1
```

## Behaviour worth knowing

- `rotate`, `rotate_image`, `set_zeroes`, `sort_colors`, `merge_sorted` and
  `remove_duplicates` modify the list they are given. `merge_sort` sorts its
  list in place and also returns it.
- Functions that need at least one value (`max_profit`, `majority_element`,
  `minimum_deletions`, `max_subarray`) raise `ValueError` on empty input.
- `MinStack.pop`, `top` and `get_min`, and `StackQueue.pop` and `peek`, raise
  `IndexError` when the container is empty.
- `DirectHashMap` accepts keys from 0 to `DirectHashMap.MAX_KEY` (1,000,000)
  and raises `ValueError` for others; absent keys read as -1.
- `SinglyLinkedList.get` returns -1 for an index out of range, and
  out-of-range inserts and deletes do nothing. `CircularQueue.front` and
  `rear` return -1 when the queue is empty.
- `min_eating_speed` searches speeds up to `MAX_SPEED` and raises
  `ValueError` if none of them is fast enough.
- `build_tree` raises `ValueError` when the descriptions have no root or
  reach a node more than once; `delete_node` raises `ValueError` for the last
  node of a list.

## What it does not do

algokit is a library only: it has no command-line tool, and it does not read
or write files.