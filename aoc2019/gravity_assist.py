"""A minimal program interpreter supporting addition, multiplication and halt."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

TARGET_OUTPUT = 19690720


def parse_program(text: str) -> list[int]:
    """Parse a comma separated list of integers."""
    parts = text.strip().split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [int(part) for part in parts]


def run_program(program: Sequence[int]) -> int:
    """Run a copy of the program and return the value left at position 0.

    Instructions are four cells wide; opcode 1 adds, 2 multiplies, 99 halts
    and any other opcode is skipped.
    """
    memory = list(program)
    for position in range(0, len(memory), 4):
        opcode = memory[position]
        if opcode == 99:
            break
        if opcode == 1:
            left, right, target = memory[position + 1 : position + 4]
            memory[target] = memory[left] + memory[right]
        elif opcode == 2:
            left, right, target = memory[position + 1 : position + 4]
            memory[target] = memory[left] * memory[right]
    return memory[0]


def find_noun_verb(program: Sequence[int], target: int) -> int | None:
    """Search nouns and verbs 0..99 for one producing ``target``.

    For every noun the first matching verb is taken; the last noun with a match
    wins. Returns ``100 * noun + verb``, or None when nothing matches.
    """
    memory = list(program)
    result = None
    for noun in range(100):
        for verb in range(100):
            memory[1] = noun
            memory[2] = verb
            try:
                output = run_program(memory)
            except IndexError:
                continue
            if output == target:
                result = 100 * noun + verb
                break
    return result


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the output for the 1202 alarm state and the noun/verb answer (-1 if none)."""
    program = parse_program(next(iter(lines)))
    program[1] = 12
    program[2] = 2
    part_1 = run_program(program)
    part_2 = find_noun_verb(program, TARGET_OUTPUT)
    return part_1, -1 if part_2 is None else part_2