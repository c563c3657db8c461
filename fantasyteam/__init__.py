"""Fantasy football line-up selection with greedy, exhaustive and GRASP search."""

__version__ = "0.1.0"