"""Diagnostic program interpreter with parameter modes, jumps and comparisons."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence

from aoc2019.gravity_assist import parse_program


class IntcodeError(Exception):
    """Raised when a program cannot be executed."""


def _execute(
    memory: MutableSequence[int],
    read_input: Callable[[], int],
    write_output: Callable[[int], None],
) -> bool:
    """Run ``memory`` in place from position 0.

    Returns True when the program halted on opcode 99 and False when the
    instruction pointer left memory.
    """
    size = len(memory)
    pc = 0

    def fetch(offset: int) -> int:
        index = pc + offset
        if index >= size:
            raise IntcodeError(f"instruction at {pc} runs past the end of memory")
        return memory[index]

    def check_address(address: int) -> int:
        if not 0 <= address < size:
            raise IntcodeError(f"address {address} is out of range")
        return address

    def param(offset: int, mode: str) -> int:
        raw = fetch(offset)
        return raw if mode != "0" else memory[check_address(raw)]

    def store(offset: int, value: int) -> None:
        memory[check_address(fetch(offset))] = value

    while pc < size:
        instruction = memory[pc]
        if instruction < 0:
            raise IntcodeError(f"negative instruction {instruction} at {pc}")
        digits = str(instruction).zfill(5)
        opcode = int(digits[3:])
        first_mode, second_mode, third_mode = digits[2], digits[1], digits[0]

        if opcode == 99:
            return True
        if opcode in (1, 2):
            if third_mode != "0":
                raise IntcodeError(f"write parameter in immediate mode at {pc}")
            a = param(1, first_mode)
            b = param(2, second_mode)
            store(3, a + b if opcode == 1 else a * b)
            pc += 4
        elif opcode == 3:
            if first_mode != "0":
                raise IntcodeError(f"input parameter in immediate mode at {pc}")
            store(1, read_input())
            pc += 2
        elif opcode == 4:
            write_output(param(1, first_mode))
            pc += 2
        elif opcode in (5, 6):
            a = param(1, first_mode)
            b = param(2, second_mode)
            if (a != 0) if opcode == 5 else (a == 0):
                pc = b if b >= 0 else size
            else:
                pc += 3
        elif opcode in (7, 8):
            a = param(1, first_mode)
            b = param(2, second_mode)
            store(3, int(a < b) if opcode == 7 else int(a == b))
            pc += 4
        else:
            raise IntcodeError(f"unknown opcode {opcode} at position {pc}")
    return False


def run_diagnostic(program: Sequence[int], inputs: Iterable[int]) -> list[int]:
    """Run a copy of the program on the given inputs and return its outputs."""
    memory = list(program)
    pending = iter(inputs)
    outputs: list[int] = []

    def read() -> int:
        try:
            return next(pending)
        except StopIteration:
            raise IntcodeError("program asked for more input than was given") from None

    _execute(memory, read, outputs.append)
    return outputs


def solve(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Outputs of the diagnostic run with system ID 1 and with system ID 5."""
    program = parse_program(next(iter(lines)))
    return run_diagnostic(program, [1]), run_diagnostic(program, [5])