"""Crossing wires on a grid: closest crossing by distance and by steps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

NO_INTERSECTION = 2**31 - 1

_DIRECTIONS = {
    "U": (0, 1),
    "D": (0, -1),
    "R": (1, 0),
    "L": (-1, 0),
}


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def distance_to_origin(self) -> int:
        """Manhattan distance to (0, 0)."""
        return abs(self.x) + abs(self.y)


def _between(end_1: int, end_2: int, value: int) -> bool:
    return min(end_1, end_2) <= value <= max(end_1, end_2)


@dataclass(frozen=True)
class Segment:
    a: Point
    b: Point

    @property
    def horizontal(self) -> bool:
        """True when both ends share a y coordinate."""
        return self.a.y == self.b.y

    def intersect(self, other: Segment) -> Point | None:
        """Crossing point with a perpendicular segment, or None."""
        if self.horizontal == other.horizontal:
            return None
        if self.horizontal:
            if _between(other.a.y, other.b.y, self.a.y) and _between(
                self.a.x, self.b.x, other.a.x
            ):
                return Point(other.a.x, self.a.y)
            return None
        if _between(self.a.y, self.b.y, other.a.y) and _between(
            other.a.x, other.b.x, self.a.x
        ):
            return Point(self.a.x, other.a.y)
        return None


def trace_wire(path: str) -> tuple[list[Segment], dict[Point, int]]:
    """Follow a path like ``R8,U5`` from the origin.

    Returns the segments walked and, for every point visited, the number of
    steps taken when it was first reached.
    """
    segments: list[Segment] = []
    steps: dict[Point, int] = {}
    start = Point(0, 0)
    taken = 0
    moves = path.strip().split(",")
    if moves and moves[-1] == "":
        moves.pop()
    for move in moves:
        try:
            dx, dy = _DIRECTIONS[move[:1]]
        except KeyError:
            raise ValueError(f"unknown direction in move {move!r}") from None
        amount = int(move[1:])
        end = Point(start.x + amount * dx, start.y + amount * dy)
        segments.append(Segment(start, end))
        current = start
        for _ in range(amount):
            current = Point(current.x + dx, current.y + dy)
            taken += 1
            if not steps.get(current):
                steps[current] = taken
        start = end
    return segments, steps


def closest_intersections(first_path: str, second_path: str) -> tuple[int, int]:
    """Smallest crossing distance and smallest combined step count.

    Either value is ``NO_INTERSECTION`` when the wires never cross.
    """
    first_segments, first_steps = trace_wire(first_path)
    second_segments, second_steps = trace_wire(second_path)
    best_distance = NO_INTERSECTION
    best_steps = NO_INTERSECTION
    for line_1 in first_segments:
        for line_2 in second_segments:
            crossing = line_1.intersect(line_2)
            if crossing is None:
                continue
            best_distance = min(best_distance, crossing.distance_to_origin())
            best_steps = min(
                best_steps,
                first_steps.get(crossing, 0) + second_steps.get(crossing, 0),
            )
    return best_distance, best_steps


def solve(lines: Sequence[str]) -> tuple[int, int]:
    """Solve for the first two wire paths in the input."""
    if len(lines) < 2:
        raise ValueError("two wire paths are required")
    return closest_intersections(lines[0], lines[1])