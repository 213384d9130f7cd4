"""Ancestor queries on rooted trees by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class AncestorTable:
    """Jump table answering ancestor, lowest-common-ancestor and distance queries.

    Nodes are numbered ``1..vertex_count``.
    """

    def __init__(
        self, vertex_count: int, edges: Iterable[tuple[int, int]], root: int = 1
    ) -> None:
        if vertex_count < 1:
            raise ValueError("a tree needs at least one node")
        self._size = vertex_count
        edge_list = list(edges)
        if len(edge_list) != vertex_count - 1:
            raise ValueError("a tree on n nodes has exactly n - 1 edges")
        self._check(root)

        adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
        for a, b in edge_list:
            self._check(a)
            self._check(b)
            adjacency[a].append(b)
            adjacency[b].append(a)

        parent: list[int | None] = [None] * (vertex_count + 1)
        depths = [0] * (vertex_count + 1)
        visited = [False] * (vertex_count + 1)
        visited[root] = True
        stack = [root]
        reached = 1
        while stack:
            node = stack.pop()
            for child in adjacency[node]:
                if not visited[child]:
                    visited[child] = True
                    reached += 1
                    parent[child] = node
                    depths[child] = depths[node] + 1
                    stack.append(child)
        if reached != vertex_count:
            raise ValueError("edges do not connect every node")

        self._root = root
        self._depth = depths
        self._up: list[list[int | None]] = [parent]
        for _ in range(1, max(1, vertex_count.bit_length())):
            previous = self._up[-1]
            self._up.append([None if p is None else previous[p] for p in previous])

    @classmethod
    def from_parent_links(
        cls, vertex_count: int, links: Iterable[tuple[int, int]]
    ) -> AncestorTable:
        """Build from ``(parent, child)`` pairs; the one node without a parent is the root."""
        pairs = list(links)
        children: set[int] = set()
        for _, child in pairs:
            if child in children:
                raise ValueError(f"node {child} has more than one parent")
            children.add(child)
        roots = [node for node in range(1, vertex_count + 1) if node not in children]
        if len(roots) != 1:
            raise ValueError("parent links must describe exactly one root")
        return cls(vertex_count, pairs, roots[0])

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._size:
            raise ValueError(f"node {node} is outside 1..{self._size}")

    def _lift(self, node: int, steps: int) -> int | None:
        current: int | None = node
        for level, row in enumerate(self._up):
            if steps >> level & 1:
                current = row[current]
                if current is None:
                    break
        return current

    def depth(self, node: int) -> int:
        """Number of edges between ``node`` and the root."""
        self._check(node)
        return self._depth[node]

    def lca(self, a: int, b: int) -> int:
        """Deepest node that is an ancestor of both ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if self._depth[a] > self._depth[b]:
            a, b = b, a
        lifted = self._lift(b, self._depth[b] - self._depth[a])
        assert lifted is not None
        b = lifted
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a, b = row[a], row[b]
        top = self._up[0][a]
        assert top is not None
        return top

    def distance(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        meet = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[meet]

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """The node ``k`` steps above ``node``, or None if that passes the root."""
        self._check(node)
        if k < 0:
            raise ValueError("k must not be negative")
        if k > self._depth[node]:
            return None
        return self._lift(node, k)