"""Shortest signal times in a weighted directed network."""

import heapq
import math
from collections import defaultdict


def shortest_times(times, n, k) -> dict[int, float]:
    """Shortest time from node ``k`` to each node 1..n; unreachable nodes get infinity."""
    if not 1 <= k <= n:
        raise ValueError(f"source node {k} is not between 1 and {n}")
    graph = defaultdict(list)
    for u, v, w in times:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge {u}->{v} leaves the nodes 1..{n}")
        graph[u].append((v, w))

    dist: dict[int, float] = dict.fromkeys(range(1, n + 1), math.inf)
    dist[k] = 0
    heap = [(0, k)]
    while heap:
        time, u = heapq.heappop(heap)
        if time > dist[u]:
            continue
        for v, w in graph[u]:
            candidate = time + w
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def network_delay_time(times, n, k) -> int:
    """Time for a signal from ``k`` to reach every node, or -1 if some node is unreachable."""
    worst = max(shortest_times(times, n, k).values())
    return -1 if worst == math.inf else int(worst)