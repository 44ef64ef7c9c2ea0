"""Amplifier chains driven by phase settings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import chain

from aoc2019.diagnostics import IntcodeError, _execute
from aoc2019.gravity_assist import parse_program

AMPLIFIER_COUNT = 5


def run_amplifiers(program: Sequence[int], phases: Iterable[int], signal: int) -> int:
    """Run the program once per amplifier on shared memory and return the final signal.

    Input instructions alternate between the next phase setting and the last
    signal produced. Each halt restarts the program from the beginning without
    resetting memory; the fifth halt, or running off the end, finishes the chain.
    """
    memory = list(program)
    phase_values = iter(phases)
    signal_turn = False
    last = signal

    def read() -> int:
        nonlocal signal_turn
        if signal_turn:
            signal_turn = False
            return last
        signal_turn = True
        try:
            return next(phase_values)
        except StopIteration:
            raise IntcodeError("ran out of phase settings") from None

    def write(value: int) -> None:
        nonlocal last
        last = value

    for _ in range(AMPLIFIER_COUNT):
        if not _execute(memory, read, write):
            break
    return last


def _later_permutations(items: Iterable[int]) -> Iterator[tuple[int, ...]]:
    """Yield the lexicographic successors of ``items`` until the last arrangement."""
    values = list(items)
    while True:
        pivot = next(
            (i for i in reversed(range(len(values) - 1)) if values[i] < values[i + 1]),
            None,
        )
        if pivot is None:
            return
        swap = next(i for i in reversed(range(len(values))) if values[i] > values[pivot])
        values[pivot], values[swap] = values[swap], values[pivot]
        values[pivot + 1 :] = reversed(values[pivot + 1 :])
        yield tuple(values)


def max_thruster_signal(program: Sequence[int], phases: Iterable[int]) -> int:
    """Highest signal over the arrangements that follow ``phases``; never below 0."""
    signals = (run_amplifiers(program, order, 0) for order in _later_permutations(phases))
    return max(chain([0], signals))


def solve(lines: Iterable[str]) -> int:
    """Highest thruster signal for phase settings 0 to 4."""
    program = parse_program(next(iter(lines)))
    return max_thruster_signal(program, range(AMPLIFIER_COUNT))