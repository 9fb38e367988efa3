"""Degree of a node in a graph given as a sorted list of edges.

Edges are pairs (a, b) with a < b, sorted by b and then by a.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Edge = tuple[int, int]


class NodeNotFoundError(LookupError):
    """The node is not part of the graph."""

    def __init__(self, node: int) -> None:
        super().__init__(f"node {node} not found in the graph")
        self.node = node


def _check(nodes: int, node: int) -> None:
    if node > nodes:
        raise NodeNotFoundError(node)


def degree(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Return the number of edges touching ``node``."""
    return degree_linear_reverse(nodes, graph, node)


def degree_linear(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Count the edges touching ``node`` by scanning all of them."""
    _check(nodes, node)
    return sum(1 for first, second in graph if first == node or second == node)


def degree_linear_copy(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Count the edges touching ``node`` by testing each edge for membership."""
    _check(nodes, node)
    return sum(node in tuple(edge) for edge in graph)


def degree_linear_reverse(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Count the edges touching ``node``, scanning the sorted graph from its end.

    The scan stops once the second ends drop below ``node``.
    """
    _check(nodes, node)
    result = 0
    in_tail = False
    for first, second in reversed(graph):
        if second > node and not in_tail:
            result += first == node
        elif second == node:
            in_tail = True
            result += 1
        else:
            break
    return result


def _adjust(i: int, step: int, graph: list[Edge], node: int) -> tuple[int, int]:
    if graph[i][1] == node:
        return i, step
    if graph[i][1] > node:
        while i > 0 and graph[i][1] > node:
            i -= 1
        return i, step + 1
    while i < len(graph) - 1 and graph[i][1] < node:
        i += 1
    return i, step - 1


def _find(i: int, graph: list[Edge], node: int) -> int:
    if graph[i][0] == node:
        return i
    if graph[i][0] > node:
        while i > 0 and graph[i][0] > node:
            i -= 1
        return i
    while i < len(graph) - 1 and graph[i][0] < node:
        i += 1
    return i


def degree_step_reverse(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Count the edges touching ``node`` by stepping backwards over the graph.

    The step size grows when a step fell short and shrinks when it overshot.
    """
    _check(nodes, node)
    edges = [tuple(edge) for edge in graph]
    if not edges:
        return 0
    size = len(edges)
    last = edges[-1][1]
    step = size // last or 1

    result = 0
    following = last
    i = size - 1
    while following > node:
        i = min(max(i, 0), size - 1)
        i, step = _adjust(i, step, edges, following)
        if edges[i][1] == following:
            i = _find(i, edges, node)
            if edges[i][0] == node:
                result += 1
        following -= 1
        i -= step

    if i < 0:
        return result

    i = min(i, size - 1)
    i, _ = _adjust(i, 0, edges, node)
    for first, second in edges[i + 1:]:
        if second != node:
            break
        result += 1
    for first, second in reversed(edges[: i + 1]):
        if second != node:
            break
        result += 1
    return result


def _key(edge: Edge, shift: int) -> int:
    return (edge[1] << shift) + edge[0]


def _interpolation_search(graph: list[Edge], target: Edge, shift: int) -> int:
    """Return the index of ``target`` in ``graph``, or of a close neighbour."""
    low, high = 0, len(graph) - 1
    wanted = _key(target, shift)
    index = high
    while high != low:
        low_key = _key(graph[low], shift)
        high_key = _key(graph[high], shift)
        if wanted < low_key or wanted > high_key or high_key == low_key:
            return index
        index = low + int((wanted - low_key) / (high_key - low_key) * (high - low))
        if graph[index] == target:
            break
        if _key(graph[index], shift) < wanted:
            index += 1
            low = index
            continue
        index -= 1
        high = index
    return index


def degree_interpol(nodes: int, graph: Sequence[Sequence[int]], node: int) -> int:
    """Count the edges touching ``node`` with interpolation searches."""
    _check(nodes, node)
    edges = [tuple(edge) for edge in graph]
    if not edges:
        return 0
    shift = int(math.log2(nodes)) + 1

    result = 0
    end = len(edges)
    for other in range(edges[-1][1], node, -1):
        if end == 0:
            break
        i = _interpolation_search(edges[:end], (node, other), shift)
        if edges[i][0] == node:
            result += 1
        end = i

    i = _interpolation_search(edges, (node - 1, node), shift)
    for first, second in edges[i + 1:]:
        if second != node:
            break
        result += 1
    for first, second in reversed(edges[: i + 1]):
        if second != node:
            break
        result += 1
    return result