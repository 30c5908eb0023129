"""Graph problems: shortest paths, components, bipartition and cycles."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("graph must have at least one node")


def _undirected(n: int, edges: Iterable[Edge]) -> dict[int, list[int]]:
    _check_size(n)
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _weighted(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    _check_size(n)
    checked = []
    for a, b, weight in edges:
        _check_node(n, a)
        _check_node(n, b)
        checked.append((a, b, weight))
    return checked


def high_score(n: int, edges: Iterable[WeightedEdge]) -> int:
    """Largest score of a walk from room 1 to room ``n``; -1 if it is unbounded.

    Each edge ``(a, b, x)`` is a one-way tunnel adding ``x`` to the score.
    Raises ValueError when room ``n`` cannot be reached.
    """
    tunnels = [(a, b, -score) for a, b, score in _weighted(n, edges)]
    if n == 1 and tunnels and tunnels[0][2] < 0:
        return -1
    dist: dict[int, float] = {node: math.inf for node in range(1, n + 1)}
    dist[1] = 0
    for _ in range(n - 1):
        for a, b, weight in tunnels:
            if dist[a] != math.inf and dist[a] + weight < dist[b]:
                dist[b] = dist[a] + weight
    for _ in range(n - 1):
        for a, b, weight in tunnels:
            if dist[a] != math.inf and dist[b] > dist[a] + weight:
                dist[b] = -math.inf
    if dist[n] == -math.inf:
        return -1
    if dist[n] == math.inf:
        raise ValueError(f"room {n} is not reachable from room 1")
    return int(-dist[n])


def building_teams(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Split pupils into teams 1 and 2 so that friends differ, or None if impossible.

    The lowest-numbered pupil of each friendship group is placed in team 1.
    """
    adjacency = _undirected(n, edges)
    team: dict[int, int] = {}
    for start in adjacency:
        if start in team:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in team:
                    team[neighbour] = 3 - team[node]
                    queue.append(neighbour)
                elif team[neighbour] == team[node]:
                    return None
    return [team[node] for node in adjacency]


def connecting_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Fewest new roads joining all cities, linking consecutive components.

    Each component is represented by its lowest-numbered city.
    """
    adjacency = _undirected(n, edges)
    seen: set[int] = set()
    representatives = []
    for start in adjacency:
        if start in seen:
            continue
        representatives.append(start)
        seen.add(start)
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return list(zip(representatives, representatives[1:]))


def message_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Shortest chain of computers from 1 to ``n``, or None if there is none."""
    adjacency = _undirected(n, edges)
    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if n not in parent:
        return None
    route = []
    current: int | None = n
    while current is not None:
        route.append(current)
        current = parent[current]
    route.reverse()
    return route


def round_trip(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """A cycle as a list of cities starting and ending at the same city, or None."""
    adjacency = _undirected(n, edges)
    parent: dict[int, int | None] = {}
    for root in adjacency:
        if root in parent:
            continue
        parent[root] = None
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in parent:
                    parent[neighbour] = node
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
                if neighbour != parent[node]:
                    cycle = [neighbour]
                    current = node
                    while current != neighbour:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(neighbour)
                    cycle.reverse()
                    return cycle
            else:
                stack.pop()
    return None


def shortest_routes(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Shortest distance from city 1 to each city over one-way flights.

    Entry ``i`` is the distance to city ``i + 1``; None where it is unreachable.
    """
    adjacency: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for a, b, cost in _weighted(n, edges):
        adjacency[a].append((b, cost))
    dist: dict[int, int] = {1: 0}
    done: set[int] = set()
    heap = [(0, 1)]
    while heap:
        distance, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for neighbour, cost in adjacency[node]:
            candidate = distance + cost
            if candidate < dist.get(neighbour, math.inf):
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return [dist.get(node) for node in range(1, n + 1)]


def all_pairs_shortest(n: int, edges: Iterable[WeightedEdge]) -> dict[Edge, int]:
    """Shortest distances between every pair of cities over two-way roads.

    Maps ``(a, b)`` to the distance; unreachable pairs are absent.
    """
    roads = _weighted(n, edges)
    dist = [[math.inf] * n for _ in range(n)]
    for a, b, length in roads:
        dist[a - 1][b - 1] = min(dist[a - 1][b - 1], length)
        dist[b - 1][a - 1] = min(dist[b - 1][a - 1], length)
    for i, row in enumerate(dist):
        row[i] = 0
    for k in range(n):
        through_k = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(through_k):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return {
        (i + 1, j + 1): int(distance)
        for i, row in enumerate(dist)
        for j, distance in enumerate(row)
        if distance != math.inf
    }