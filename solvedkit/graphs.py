"""Directed graphs as adjacency lists: components and topological order."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]


def inverse_graph(graph: Graph) -> list[list[int]]:
    """Return the graph with every edge reversed."""
    reversed_graph: list[list[int]] = [[] for _ in graph]
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            reversed_graph[v].append(u)
    return reversed_graph


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Strongly connected components, found with two depth-first passes."""
    visited = [False] * len(graph)
    finished: list[int] = []

    def visit(node: int) -> None:
        visited[node] = True
        for nxt in graph[node]:
            if not visited[nxt]:
                visit(nxt)
        finished.append(node)

    for node in range(len(graph)):
        if not visited[node]:
            visit(node)

    transposed = inverse_graph(graph)
    visited = [False] * len(graph)
    components: list[list[int]] = []

    def collect(node: int, component: list[int]) -> None:
        visited[node] = True
        for nxt in transposed[node]:
            if not visited[nxt]:
                component.append(nxt)
                collect(nxt, component)

    for node in reversed(finished):
        if not visited[node]:
            component = [node]
            components.append(component)
            collect(node, component)
    return components


def _course_graph(
    num_courses: int, prerequisites: Sequence[Sequence[int]]
) -> tuple[list[list[int]], list[int]]:
    if num_courses < 0:
        raise ValueError("number of courses must not be negative")
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    in_degree = [0] * num_courses
    for course, required in prerequisites:
        for node in (course, required):
            if not 0 <= node < num_courses:
                raise ValueError(f"course {node} is outside 0..{num_courses - 1}")
        graph[required].append(course)
        in_degree[course] += 1
    return graph, in_degree


def _kahn(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> tuple[list[int], bool]:
    graph, in_degree = _course_graph(num_courses, prerequisites)
    total_edges = sum(len(edges) for edges in graph)
    ready = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    removed = 0
    while ready:
        node = ready.popleft()
        order.append(node)
        for nxt in graph[node]:
            removed += 1
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                ready.append(nxt)
    return order, removed == total_edges


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Whether all courses can be taken; pairs are ``[course, required]``."""
    return _kahn(num_courses, prerequisites)[1]


def can_finish_dfs(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Same as ``can_finish``, detecting cycles with a depth-first search."""
    graph, _ = _course_graph(num_courses, prerequisites)
    checked = [False] * num_courses
    on_path = [False] * num_courses

    def has_cycle(node: int) -> bool:
        checked[node] = True
        on_path[node] = True
        for nxt in graph[node]:
            if not checked[nxt]:
                if has_cycle(nxt):
                    return True
            elif on_path[nxt]:
                return True
        on_path[node] = False
        return False

    return not any(not checked[node] and has_cycle(node) for node in range(num_courses))


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """An order to take every course in, or an empty list if none exists."""
    order, complete = _kahn(num_courses, prerequisites)
    return order if complete else []