"""Graph exercises: colouring, cycles, shortest paths, word ladders, cloning."""

from __future__ import annotations

import heapq
import string
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from algoset.number_theory import is_prime

Adjacency = dict[int, list[tuple[int, int]]]


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return True if the nodes can be two-coloured with no edge inside a colour.

    ``graph[i]`` lists the neighbours of node ``i``. Every connected
    component is checked.
    """
    colour: dict[int, int] = {}
    for start in range(len(graph)):
        if start in colour:
            continue
        colour[start] = 1
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if neighbour not in colour:
                    colour[neighbour] = -colour[node]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if every course can be taken.

    Each prerequisite is a pair ``(course, required)``; the courses can all be
    finished exactly when these dependencies contain no cycle.
    """
    edges: set[tuple[int, int]] = set()
    for course, required in prerequisites:
        for node in (course, required):
            if not 0 <= node < num_courses:
                raise ValueError(f"course {node} is out of range")
        edges.add((required, course))

    dependants: dict[int, list[int]] = defaultdict(list)
    indegree = [0] * num_courses
    for required, course in edges:
        dependants[required].append(course)
        indegree[course] += 1

    ready = deque(node for node in range(num_courses) if indegree[node] == 0)
    taken = 0
    while ready:
        node = ready.popleft()
        taken += 1
        for course in dependants[node]:
            indegree[course] -= 1
            if indegree[course] == 0:
                ready.append(course)
    return taken == num_courses


def _shortest_distances(adjacency: Adjacency, sources: Iterable[int]) -> dict[int, int]:
    """Return the shortest distance to every node reachable from ``sources``."""
    distances: dict[int, int] = {}
    frontier = [(0, source) for source in sources]
    heapq.heapify(frontier)
    while frontier:
        dist, node = heapq.heappop(frontier)
        if node in distances:
            continue
        distances[node] = dist
        for nxt, weight in adjacency.get(node, ()):
            if nxt not in distances:
                heapq.heappush(frontier, (dist + weight, nxt))
    return distances


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} is outside {low}..{high}")


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int | None:
    """Return how long a signal from node ``k`` takes to reach all ``n`` nodes.

    Nodes are numbered from 1; each of ``times`` is a directed edge
    ``(source, target, delay)``. ``None`` is returned if some node is never
    reached.
    """
    _check_node(k, 1, n)
    adjacency: Adjacency = defaultdict(list)
    for source, target, delay in times:
        _check_node(source, 1, n)
        _check_node(target, 1, n)
        adjacency[source].append((target, delay))
    distances = _shortest_distances(adjacency, [k])
    if len(distances) < n:
        return None
    return max(distances.values())


def reachable_cities(
    n: int, roads: Iterable[Sequence[int]], start: int, fuel: int
) -> int:
    """Count the cities, numbered from 0, reachable from ``start`` within ``fuel``.

    Each road ``(a, b, cost)`` can be driven both ways.
    """
    _check_node(start, 0, n - 1)
    adjacency: Adjacency = defaultdict(list)
    for a, b, cost in roads:
        _check_node(a, 0, n - 1)
        _check_node(b, 0, n - 1)
        adjacency[a].append((b, cost))
        adjacency[b].append((a, cost))
    distances = _shortest_distances(adjacency, [start])
    return sum(1 for dist in distances.values() if dist <= fuel)


def vaccine_times(n: int, roads: Iterable[Sequence[int]]) -> dict[int, int | None]:
    """Return the time the vaccine needs to reach each village 1..n.

    Villages with a prime number hold the vaccine from the start. Travelling
    a road between ``u`` and ``v`` takes ``max(u, v)``. Villages it never
    reaches map to ``None``.
    """
    adjacency: Adjacency = defaultdict(list)
    for u, v in roads:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
        cost = max(u, v)
        adjacency[u].append((v, cost))
        adjacency[v].append((u, cost))
    sources = [village for village in range(1, n + 1) if is_prime(village)]
    distances = _shortest_distances(adjacency, sources)
    return {village: distances.get(village) for village in range(1, n + 1)}


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder to ``end_word``.

    Each step changes one letter to a lower-case letter and must land on a
    word of ``word_list``; the final step may land on ``end_word`` directly.
    Returns 0 when no ladder exists.
    """
    unvisited = set(word_list)
    level = [begin_word]
    length = 1
    while level:
        following = []
        for word in level:
            for index in range(len(word)):
                prefix, suffix = word[:index], word[index + 1 :]
                for letter in string.ascii_lowercase:
                    candidate = prefix + letter + suffix
                    if candidate == end_word:
                        return length + 1
                    if candidate in unvisited:
                        unvisited.discard(candidate)
                        following.append(candidate)
        level = following
        length += 1
    return 0


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[int, GraphNode] = {id(node): GraphNode(node.val)}
    stack = [node]
    while stack:
        original = stack.pop()
        copy = copies[id(original)]
        for neighbour in original.neighbors:
            key = id(neighbour)
            if key not in copies:
                copies[key] = GraphNode(neighbour.val)
                stack.append(neighbour)
            copy.neighbors.append(copies[key])
    return copies[id(node)]