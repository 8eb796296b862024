"""Classic algorithms on linked lists, queues, heaps, trees, grids and graphs."""

__version__ = "0.1.0"

__all__ = ["graphs", "grids", "linked_list", "number_theory", "queues", "trees"]