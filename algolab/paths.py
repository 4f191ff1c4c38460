"""Shortest paths, minimum spanning trees and a disjoint-set forest."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

WeightedEdge = tuple[int, int, int]


class DisjointSet:
    """Union-find with path compression and union by size; sets are created on first use."""

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}
        self._size: dict[int, int] = {}

    def find(self, v: int) -> int:
        """Return the representative of v's set."""
        if v not in self._parent:
            self._parent[v] = v
            self._size[v] = 1
            return v
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; return False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def bellman_ford(
    vertex_count: int, edges: Iterable[WeightedEdge], source: int
) -> list[int | None]:
    """Return distances from source along directed edges; None marks unreachable vertices."""
    edge_list = list(edges)
    dist: list[int | None] = [None] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, w in edge_list:
            du = dist[u]
            if du is None:
                continue
            dv = dist[v]
            if dv is None or du + w < dv:
                dist[v] = du + w
    return dist


def dijkstra(
    vertex_count: int, edges: Iterable[WeightedEdge], source: int
) -> list[int | None]:
    """Return distances over an undirected graph with vertices 1..vertex_count.

    Entry i-1 belongs to vertex i; None marks unreachable vertices.
    Weights must not be negative.
    """
    graph: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for u, v, w in edges:
        if w < 0:
            raise ValueError("edge weights must not be negative")
        graph[u].append((v, w))
        graph[v].append((u, w))
    dist: list[float] = [math.inf] * (vertex_count + 1)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, w in graph[node]:
            candidate = d + w
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return [None if math.isinf(d) else int(d) for d in dist[1:]]


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances; math.inf marks a missing edge."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for row_i in dist:
            via = row_i[k]
            if math.isinf(via):
                continue
            for j in range(n):
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    return dist


def kruskal(edges: Iterable[WeightedEdge]) -> tuple[list[tuple[int, int]], int]:
    """Return the minimum spanning forest's edges (in the order taken) and its total weight."""
    ordered = sorted((w, u, v) for u, v, w in edges)
    sets = DisjointSet()
    chosen: list[tuple[int, int]] = []
    cost = 0
    for w, u, v in ordered:
        if sets.union(u, v):
            chosen.append((u, v))
            cost += w
    return chosen, cost


def has_cycle_dsu(edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether an undirected edge list contains a cycle, using union-find."""
    sets = DisjointSet()
    cycle = False
    for u, v in edges:
        if not sets.union(u, v):
            cycle = True
    return cycle