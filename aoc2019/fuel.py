"""Fuel requirements for spacecraft modules."""

from __future__ import annotations

from collections.abc import Iterable


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def fuel_for_mass(mass: int) -> int:
    """Fuel needed to launch a module of the given mass."""
    return _truncating_div(mass, 3) - 2


def total_fuel_for_mass(mass: int) -> int:
    """Fuel for a module, including the fuel needed to carry that fuel."""
    fuel = fuel_for_mass(mass)
    total = fuel
    while (extra := fuel_for_mass(fuel)) > 0:
        total += extra
        fuel = extra
    return total


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the summed simple fuel and summed total fuel for all module masses."""
    masses = [int(line) for line in lines]
    part_1 = sum(fuel_for_mass(mass) for mass in masses)
    part_2 = sum(total_fuel_for_mass(mass) for mass in masses)
    return part_1, part_2