"""Grid and graph traversal drills."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def flood_fill(
    image: Sequence[MutableSequence[int]], sr: int, sc: int, color: int
) -> Sequence[MutableSequence[int]]:
    """Repaint the 4-connected region around (sr, sc) with ``color`` in place.

    Returns ``image``. Raises IndexError when the start is outside the image.
    """
    if not (0 <= sr < len(image) and 0 <= sc < len(image[sr])):
        raise IndexError(f"start ({sr}, {sc}) is outside the image")
    old_color = image[sr][sc]
    if old_color == color:
        return image
    height, width = len(image), len(image[0])
    pending = [(sr, sc)]
    while pending:
        row, col = pending.pop()
        if not (0 <= row < height and 0 <= col < width):
            continue
        if image[row][col] != old_color:
            continue
        image[row][col] = color
        pending.extend(((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)))
    return image


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Tell whether the keys found from room 0 open every room."""
    if not rooms:
        raise ValueError("there are no rooms")
    visited = {0}
    pending = [0]
    while pending:
        for key in rooms[pending.pop()]:
            if not 0 <= key < len(rooms):
                raise IndexError(f"key {key} opens no room")
            if key not in visited:
                visited.add(key)
                pending.append(key)
    return len(visited) == len(rooms)


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest roads to reverse so every city can reach city 0.

    Each connection [a, b] is a one-way road from a to b.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    graph: list[dict[int, bool]] = [{} for _ in range(n)]
    for source, target in connections:
        if not (0 <= source < n and 0 <= target < n):
            raise ValueError(f"road {source} -> {target} leaves the {n} cities")
        graph[source][target] = True
        graph[target][source] = False

    reversed_roads = 0
    visited = {0}
    stack = [iter(graph[0].items())]
    while stack:
        for neighbour, away_from_zero in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                reversed_roads += away_from_zero
                stack.append(iter(graph[neighbour].items()))
                break
        else:
            stack.pop()
    return reversed_roads