"""Command line entry point that runs the solver for one day."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc2019 import amplifiers, diagnostics, fuel, gravity_assist, orbits, passwords, wires

LAST_DAY = 25
PLACEHOLDER = "Nothing done here yet "
DEFAULT_BASE_DIR = ".."


def _parts(result: tuple[object, object]) -> list[str]:
    part_1, part_2 = result
    return [f"Part 1: {part_1}", f"Part 2: {part_2}"]


def _diagnostic_report(lines: Sequence[str]) -> list[str]:
    return [f"Output: {value}" for run in diagnostics.solve(lines) for value in run]


_SOLVERS: dict[int, Callable[[Sequence[str]], list[str]]] = {
    1: lambda lines: _parts(fuel.solve(lines)),
    2: lambda lines: _parts(gravity_assist.solve(lines)),
    3: lambda lines: _parts(wires.solve(lines)),
    4: lambda lines: _parts(passwords.solve(lines)),
    5: _diagnostic_report,
    6: lambda lines: _parts(orbits.solve(lines)),
    7: lambda lines: [f"Part 1: {amplifiers.solve(lines)}"],
}


def read_input(day: int, base_dir: str | Path | None = None) -> list[str]:
    """Read ``day_<day>/input.txt`` under ``base_dir`` as a list of lines."""
    base = Path(DEFAULT_BASE_DIR if base_dir is None else base_dir)
    return (base / f"day_{day}" / "input.txt").read_text().splitlines()


def run_day(day: int, lines: Sequence[str]) -> list[str]:
    """Solve the given day and return the report lines."""
    solver = _SOLVERS.get(day)
    if solver is not None:
        return solver(lines)
    if 1 <= day <= LAST_DAY:
        return [PLACEHOLDER]
    raise ValueError("Error opening class corresponding to day")


def main(argv: Sequence[str] | None = None) -> int:
    """Read a day's input, solve it and print the answers."""
    parser = argparse.ArgumentParser(description="Run the solver for one puzzle day.")
    parser.add_argument("day", nargs="?", type=int, help="day to run; asked for when omitted")
    parser.add_argument("--base-dir", default=DEFAULT_BASE_DIR, help="directory holding day_<n> folders")
    args = parser.parse_args(argv)

    day = args.day
    if day is None:
        try:
            day = int(input("Input the day please: "))
        except (ValueError, EOFError):
            print("Error reading the day", file=sys.stderr)
            return 1

    try:
        lines = read_input(day, args.base_dir)
    except OSError:
        print("Error opening file", file=sys.stderr)
        return 1

    try:
        report = run_day(day, lines)
    except (ValueError, diagnostics.IntcodeError) as error:
        print(error, file=sys.stderr)
        return 1

    for line in report:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())