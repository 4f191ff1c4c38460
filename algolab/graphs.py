"""Graph representations and traversals: adjacency, BFS, components, cycles, colouring, ordering."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def adjacency_list(vertex_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return the undirected adjacency list of vertices 0..vertex_count-1."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def format_adjacency_list(adjacency: Sequence[Sequence[int]]) -> str:
    """Render an adjacency list, one block per vertex, neighbours chained with arrows."""
    blocks = []
    for vertex, neighbours in enumerate(adjacency):
        chain = "".join(f"->{x}" for x in neighbours)
        blocks.append(f"\n Adjacency list of vertex {vertex}\n head{chain}\n")
    return "".join(blocks)


def adjacency_matrix(vertex_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return the undirected 0/1 adjacency matrix of vertices numbered 1..vertex_count.

    Row and column i-1 belong to vertex i.
    """
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for x, y in edges:
        if not (1 <= x <= vertex_count and 1 <= y <= vertex_count):
            raise ValueError(f"edge ({x}, {y}) is outside vertices 1..{vertex_count}")
        matrix[x - 1][y - 1] = 1
        matrix[y - 1][x - 1] = 1
    return matrix


def bfs_order(edges: Iterable[Edge], start: int) -> list[int]:
    """Return the vertices of an undirected graph in breadth-first order from start."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def component_sizes(vertex_count: int, edges: Iterable[Edge]) -> list[int]:
    """Return the size of each connected component, in order of its lowest vertex."""
    adjacency = adjacency_list(vertex_count, edges)
    visited = [False] * vertex_count
    sizes: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [root]
        size = 0
        while stack:
            node = stack.pop()
            size += 1
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        sizes.append(size)
    return sizes


def cross_group_pairs(vertex_count: int, edges: Iterable[Edge]) -> int:
    """Return how many unordered pairs of vertices lie in different components."""
    sizes = component_sizes(vertex_count, edges)
    return sum(size * (vertex_count - size) for size in sizes) // 2


def has_undirected_cycle(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Tell whether an undirected graph contains a cycle."""
    adjacency = adjacency_list(vertex_count, edges)
    visited = [False] * vertex_count
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if visited[neighbour]:
                    return True
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
    return False


def has_directed_cycle(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Tell whether a directed graph contains a cycle."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
    visited = [False] * vertex_count
    on_path = [False] * vertex_count
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if on_path[neighbour]:
                    return True
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False


def is_bipartite(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the undirected graph can be two-coloured."""
    adjacency = adjacency_list(vertex_count, edges)
    colour: list[int | None] = [None] * vertex_count
    for root in range(vertex_count):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = colour[node] ^ 1
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def topological_order(vertex_count: int, edges: Iterable[Edge]) -> list[int]:
    """Return a topological order of a directed graph (Kahn's algorithm).

    Raises ValueError when the graph has a cycle.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    indegree = [0] * vertex_count
    for u, v in edges:
        adjacency[u].append(v)
        indegree[v] += 1
    queue = deque(v for v in range(vertex_count) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    if len(order) != vertex_count:
        raise ValueError("graph has a cycle")
    return order