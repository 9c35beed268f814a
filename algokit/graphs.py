"""Grid and graph searches: BFS, Dijkstra and cycle detection."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from string import ascii_lowercase
from typing import Sequence

MOD = 10**9 + 7

_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _neighbours(r: int, c: int, rows: int, cols: int):
    for dr, dc in _DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return, for every cell, the distance to the nearest zero cell."""
    rows, cols = len(mat), len(mat[0])
    result = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(mat):
        for c, value in enumerate(row):
            if value == 0:
                result[r][c] = 0
                queue.append((r, c))

    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if result[nr][nc] == -1:
                result[nr][nc] = result[r][c] + 1
                queue.append((nr, nc))
    return result


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least possible largest height step from top-left to bottom-right."""
    rows, cols = len(heights), len(heights[0])
    best = [[math.inf] * cols for _ in range(rows)]
    best[0][0] = 0
    heap: list[tuple[int, int, int]] = [(0, 0, 0)]
    while heap:
        effort, r, c = heapq.heappop(heap)
        for nr, nc in _neighbours(r, c, rows, cols):
            new_effort = max(effort, abs(heights[r][c] - heights[nr][nc]))
            if best[nr][nc] > new_effort:
                best[nr][nc] = new_effort
                heapq.heappush(heap, (new_effort, nr, nc))
    return int(best[rows - 1][cols - 1])


def find_cheapest_price(
    n: int,
    flights: Sequence[Sequence[int]],
    src: int,
    dst: int,
    k: int,
) -> int:
    """Return the cheapest price from src to dst with at most k stops, or -1."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, cost in flights:
        adjacency[u].append((v, cost))

    distance = [math.inf] * n
    distance[src] = 0
    frontier: list[tuple[int, int]] = [(src, 0)]
    level = 0
    while frontier and level <= k:
        next_frontier: list[tuple[int, int]] = []
        for u, d in frontier:
            for v, cost in adjacency[u]:
                if distance[v] > d + cost:
                    distance[v] = d + cost
                    next_frontier.append((v, d + cost))
        frontier = next_frontier
        level += 1

    return -1 if distance[dst] == math.inf else int(distance[dst])


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return True if every course can be taken, i.e. the prerequisites have no cycle."""
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adjacency[required].append(course)

    unvisited, in_progress, done = 0, 1, 2
    state = [unvisited] * num_courses
    for start in range(num_courses):
        if state[start] != unvisited:
            continue
        state[start] = in_progress
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if state[child] == in_progress:
                    return False
                if state[child] == unvisited:
                    state[child] = in_progress
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                state[node] = done
                stack.pop()
    return True


def count_paths(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Count shortest paths from node 0 to node n-1, modulo 10**9 + 7."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, time in roads:
        adjacency[u].append((v, time))
        adjacency[v].append((u, time))

    shortest = [math.inf] * n
    ways = [0] * n
    shortest[0] = 0
    ways[0] = 1
    heap: list[tuple[int, int]] = [(0, 0)]
    while heap:
        current, node = heapq.heappop(heap)
        for neighbour, time in adjacency[node]:
            candidate = current + time
            if candidate < shortest[neighbour]:
                shortest[neighbour] = candidate
                ways[neighbour] = ways[node]
                heapq.heappush(heap, (candidate, neighbour))
            elif candidate == shortest[neighbour]:
                ways[neighbour] = (ways[neighbour] + ways[node]) % MOD
    return ways[n - 1]


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal from node k to reach all nodes 1..n, or -1."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in times:
        adjacency[u].append((v, w))

    dist = [math.inf] * (n + 1)
    dist[k] = 0
    heap: list[tuple[int, int]] = [(0, k)]
    while heap:
        distance, node = heapq.heappop(heap)
        for next_node, weight in adjacency[node]:
            if dist[next_node] > distance + weight:
                dist[next_node] = distance + weight
                heapq.heappush(heap, (dist[next_node], next_node))

    slowest = max(dist[1:], default=-math.inf)
    if slowest == math.inf:
        return -1
    return int(slowest)


def find_ladders(
    begin_word: str, end_word: str, word_list: Sequence[str]
) -> list[list[str]]:
    """Return every shortest transformation sequence from begin_word to end_word."""
    remaining = set(word_list)
    queue: deque[list[str]] = deque([[begin_word]])
    used_on_level = [begin_word]
    level = 0
    ladders: list[list[str]] = []

    while queue:
        path = queue.popleft()
        if len(path) > level:
            level += 1
            remaining.difference_update(used_on_level)
            used_on_level.clear()

        word = path[-1]
        if word == end_word and (not ladders or len(ladders[0]) == len(path)):
            ladders.append(path)

        for i in range(len(word)):
            for letter in ascii_lowercase:
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in remaining:
                    queue.append(path + [candidate])
                    used_on_level.append(candidate)
    return ladders