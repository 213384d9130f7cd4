"""Graph algorithms: breadth-first traversal, topological order, minimum spanning forest."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int

    def __lt__(self, other: Edge) -> bool:
        return self.weight < other.weight


def bfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Breadth-first order of every vertex of the graph.

    ``adjacency[i]`` lists the neighbours of vertex ``i``. Each unvisited
    vertex, taken in index order, starts a new traversal, so vertices in
    other components are reached too.
    """
    neighbours = [list(adjacent) for adjacent in adjacency]
    size = len(neighbours)
    for adjacent in neighbours:
        for vertex in adjacent:
            if not 0 <= vertex < size:
                raise ValueError(f"vertex {vertex} is outside 0..{size - 1}")

    visited = [False] * size
    order: list[int] = []
    for start in range(size):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in neighbours[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append(nxt)
    return order


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices ``1..vertex_count`` so every edge ``(x, y)`` has x before y.

    Uses Kahn's algorithm with a first-in first-out queue. Raises
    ``ValueError`` if the graph has a cycle.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    successors: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}
    indegree = dict.fromkeys(successors, 0)
    for x, y in edges:
        for vertex in (x, y):
            if vertex not in successors:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        successors[x].append(y)
        indegree[y] += 1

    queue = deque(v for v, degree in indegree.items() if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in successors[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != vertex_count:
        raise ValueError("graph has a cycle")
    return order


def kruskal(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> tuple[int, list[Edge]]:
    """Minimum spanning forest of vertices ``0..vertex_count-1``.

    Returns the total weight and the chosen edges in the order they were
    taken (ascending weight; equal weights keep their input order).
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")

    leader = list(range(vertex_count))

    def find(vertex: int) -> int:
        root = vertex
        while leader[root] != root:
            root = leader[root]
        while leader[vertex] != root:
            leader[vertex], vertex = root, leader[vertex]
        return root

    cost = 0
    chosen: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        a, b = find(edge.u), find(edge.v)
        if a != b:
            leader[a] = b
            cost += edge.weight
            chosen.append(edge)
    return cost, chosen