"""Orbit maps: counting orbits and orbital transfers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

ROOT = "COM"


@dataclass
class OrbitMap:
    """Which bodies orbit which, held both directed and undirected."""

    children: dict[str, set[str]] = field(default_factory=dict)
    neighbours: dict[str, set[str]] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> OrbitMap:
        """Build a map from lines such as ``COM)B``."""
        orbit_map = cls()
        for line in lines:
            line = line.strip()
            if not line:
                continue
            centre, separator, satellite = line.partition(")")
            if not separator:
                raise ValueError(f"orbit line without ')': {line!r}")
            orbit_map.children.setdefault(centre, set()).add(satellite)
            orbit_map.neighbours.setdefault(centre, set()).add(satellite)
            orbit_map.neighbours.setdefault(satellite, set()).add(centre)
        return orbit_map

    def total_orbits(self) -> int:
        """Direct and indirect orbits of every body reachable from COM."""
        total = 0
        queue = deque([(0, ROOT)])
        while queue:
            depth, body = queue.popleft()
            satellites = self.children.get(body, set())
            total += len(satellites) * (depth + 1)
            queue.extend((depth + 1, satellite) for satellite in satellites)
        return total

    def transfers(self, start: str, end: str) -> int:
        """Orbital transfers needed to move from what ``start`` orbits to what ``end`` orbits."""
        visited = {start}
        queue = deque([(0, start)])
        while queue:
            distance, body = queue.popleft()
            if body == end:
                return distance - 2
            for neighbour in self.neighbours.get(body, set()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append((distance + 1, neighbour))
        raise ValueError(f"no path from {start!r} to {end!r}")


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Total orbit count and transfers from YOU to SAN."""
    orbit_map = OrbitMap.from_lines(lines)
    return orbit_map.total_orbits(), orbit_map.transfers("YOU", "SAN")