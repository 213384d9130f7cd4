"""Classic algorithms and data structures: sorting, searching, numeric and string
algorithms, graph traversal and spanning forests, tree ancestor queries, and
singly and circular linked lists."""

__version__ = "0.1.0"