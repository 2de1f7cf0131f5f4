"""A* pathfinding over any PathGraph."""
from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING

from tick_terrain.types import N, PathResult

if TYPE_CHECKING:
    from tick_terrain.types import PathGraph

logger = logging.getLogger(__name__)


def pathfind(graph: PathGraph[N], start: N, goal: N) -> PathResult[N]:
    """Cheapest route from start to goal, both inclusive.

    The heuristic only orders the frontier. A node is reopened whenever a
    cheaper way to it turns up, and the search keeps draining entries
    that could still beat the best goal cost found, so the result is the
    minimum-cost route even where graph.estimated_cost overestimates.
    """
    if graph.same_point(start, goal):
        return PathResult(path=[start], cost=0.0, found=True)

    open_set: list[tuple[float, int, float, N]] = [(0.0, 0, 0.0, start)]
    came_from: dict[N, N] = {}
    g_score: dict[N, float] = {start: 0.0}
    counter = 1

    best: N | None = None
    best_cost = float("inf")
    expanded = 0

    while open_set:
        _, _, g, current = heapq.heappop(open_set)
        # Stale entry, or cannot improve on the goal already reached.
        if g > g_score[current] or g >= best_cost:
            continue
        if graph.same_point(current, goal):
            best, best_cost = current, g
            continue
        expanded += 1

        for neighbor in graph.neighbors(current):
            tentative = g + graph.neighbor_cost(current, neighbor)
            if tentative < g_score.get(neighbor, float("inf")) and tentative < best_cost:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                h = graph.estimated_cost(neighbor, goal)
                heapq.heappush(open_set, (tentative + h, counter, tentative, neighbor))
                counter += 1

    if best is None:
        logger.debug(f"No route after expanding {expanded} nodes")
        return PathResult()

    current = best
    path: list[N] = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return PathResult(path=path, cost=best_cost, found=True)
