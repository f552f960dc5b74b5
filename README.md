# dsakit

A collection of classic data structures and algorithms written in plain
Python, with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `randomized_quicksort` |
| `dsakit.searching` | `binary_search`, `interpolation_search`, `min_max`, `HashTable` (linear probing) |
| `dsakit.expressions` | `infix_to_postfix`, `evaluate_postfix`, `ExpressionError` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `ArrayQueue`, `LinkedQueue`, `PriorityQueue`, `QueueOverflowError`, `QueueUnderflowError` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` |
| `dsakit.doubly_circular_list` | `DoublyCircularLinkedList` |
| `dsakit.polynomial` | `Polynomial`, `Term` (two-variable polynomials in x and y) |
| `dsakit.bst` | `BinarySearchTree`, `Node` |
| `dsakit.heap` | `MaxHeap` |
| `dsakit.graphs` | `AdjacencyList`, `breadth_first_search`, `depth_first_search`, `incidence_matrix`, `vertex_label` |
| `dsakit.shortest_paths` | `dijkstra`, `path_to`, `floyd_warshall`, `floyd_warshall_steps` |
| `dsakit.spanning_trees` | `kruskal`, `prim` |
| `dsakit.backtracking` | `hamiltonian_cycle`, `n_queens`, `render_board` |
| `dsakit.greedy` | `select_activities`, `fractional_knapsack`, `schedule_jobs`, `Activity`, `Job` |
| `dsakit.dynamic` | `knapsack`, `matrix_chain_order` |

## Examples

Sorting returns a new list and leaves the input alone:

```python
from dsakit.sorting import merge_sort

merge_sort([5, 2, 9, 1])          # [1, 2, 5, 9]
```

Searching returns an index, or `None` when the value is absent:

```python
from dsakit.searching import binary_search, min_max

binary_search([1, 3, 5, 7], 5)    # 2
binary_search([1, 3, 5, 7], 4)    # None
min_max([4, 9, 1, 7])             # (1, 9)
```

Converting and evaluating expressions of single-character tokens:

```python
from dsakit.expressions import infix_to_postfix, evaluate_postfix

infix_to_postfix("(a+b)*c")       # "ab+c*"
evaluate_postfix("23*4+")         # 10.0
```

Stacks and queues raise exceptions on overflow and underflow:

```python
from dsakit.stacks import ArrayStack

stack = ArrayStack(capacity=10)
stack.push(1)
stack.push(2)
stack.pop()                       # 2
```

The linked lists raise `IndexError` when empty and `ValueError` when a
value they are asked to find is not in the list:

```python
from dsakit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.insert_after(2, 5)
str(items)                        # "1->2->5->3->end"
```

A binary search tree:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()                    # [20, 30, 40, 50, 70]
tree.delete(30)
40 in tree                        # True
```

Graph algorithms take adjacency or cost matrices as nested lists. For
`dijkstra` and `kruskal` a zero entry means "no edge"; `prim` and the
Floyd-Warshall functions take entries as given, so use `math.inf` for a
missing edge there.

```python
from dsakit.shortest_paths import dijkstra, path_to
from dsakit.spanning_trees import prim

costs = [[0, 4, 1], [4, 0, 2], [1, 2, 0]]
distances, predecessors = dijkstra(costs, 0)   # [0, 3, 1], [None, 2, 0]
path_to(predecessors, 0, 1)                    # [0, 2, 1]
prim(costs, 0)                                 # ([(0, 2, 1), (2, 1, 2)], 3)
```

Backtracking and dynamic programming:

```python
from dsakit.backtracking import n_queens, render_board
from dsakit.dynamic import knapsack

list(n_queens(4))                 # [(1, 3, 0, 2), (2, 0, 3, 1)]
print(render_board((1, 3, 0, 2)))
# . Q . .
# . . . Q
# Q . . .
# . . Q .

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
```

Each module's docstrings describe the exact inputs, results and the
exceptions raised for invalid operations.

## What this package does not do

`dsakit` is a library only. It has no command-line program and no
interactive menus: the structures and algorithms are used by importing
them from Python code. Nothing is stored between runs.