"""Classic data structures and algorithms: sorting, searching, stacks, queues,
linked lists, trees, heaps, graphs, greedy, backtracking and dynamic programming."""

__version__ = "0.1.0"