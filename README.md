# aoc2019

Solutions to the 2019 Advent of Code puzzles. Each solved day is a small
module of plain functions you can call directly, and the `aoc2019` command
runs one day against its puzzle input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aoc2019 [DAY] [--base-dir DIR]
```

- `DAY` is the day to run. When it is left out, the command asks for it with
  `Input the day please: `.
- `--base-dir` is the directory holding the `day_<N>` folders; it defaults to
  `..`. The input is read from `<base-dir>/day_<N>/input.txt`.

For days 1, 2, 3, 4 and 6 the command prints `Part 1: ...` and `Part 2: ...`.
Day 5 prints one `Output: ...` line for every value the diagnostic program
outputs, first for system ID 1 and then for system ID 5. Day 7 prints only
`Part 1: ...`. Day 4 works on a fixed range (359282 to 820401) and ignores
the content of its input file, though the file must still exist.

The command exits with status 1 and a message on standard error when the day
entered is not a number, when the input file cannot be opened, when the day
is outside 1 to 25, or when an input cannot be solved (for example a malformed
line or a program that fails to run).

## Using the modules

| Day | Module                   | Entry points                                                                  |
|-----|--------------------------|-------------------------------------------------------------------------------|
| 1   | `aoc2019.fuel`           | `fuel_for_mass`, `total_fuel_for_mass`, `solve`                               |
| 2   | `aoc2019.gravity_assist` | `parse_program`, `run_program`, `find_noun_verb`, `solve`                     |
| 3   | `aoc2019.wires`          | `Point`, `Segment`, `trace_wire`, `closest_intersections`, `solve`            |
| 4   | `aoc2019.passwords`      | `is_non_decreasing`, `has_adjacent_pair`, `has_exact_pair`, `candidate_passwords`, `count_passwords`, `solve` |
| 5   | `aoc2019.diagnostics`    | `run_diagnostic`, `IntcodeError`, `solve`                                     |
| 6   | `aoc2019.orbits`         | `OrbitMap`, `solve`                                                           |
| 7   | `aoc2019.amplifiers`     | `run_amplifiers`, `max_thruster_signal`, `solve`                              |

```python
from aoc2019.fuel import fuel_for_mass, total_fuel_for_mass

fuel_for_mass(1969)        # 654
total_fuel_for_mass(1969)  # 966
```

```python
from aoc2019.orbits import OrbitMap

orbits = OrbitMap.from_lines(["COM)B", "B)C", "C)YOU", "B)SAN"])
orbits.total_orbits()            # 8
orbits.transfers("YOU", "SAN")   # 1
```

```python
from aoc2019.diagnostics import run_diagnostic

run_diagnostic([3, 0, 4, 0, 99], [42])  # [42]
```

Every module's `solve(lines)` takes the lines of a puzzle input and returns
that day's answers. `run_diagnostic` raises `IntcodeError` when a program
uses an unknown opcode, addresses memory out of range, or asks for more input
than it was given.

`aoc2019.cli` also provides `read_input(day, base_dir)`, which returns the
lines of a day's input file, and `run_day(day, lines)`, which returns the
report lines the command would print.

## What is not covered

- Days 8 to 25 are not solved; running them prints `Nothing done here yet`.
- Day 7 only searches phase settings 0 to 4. The feedback-loop half of the
  puzzle (phase settings 5 to 9) is not solved.