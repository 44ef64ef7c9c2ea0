from itertools import permutations

import pytest

from aoc2019.amplifiers import max_thruster_signal, run_amplifiers, solve
from aoc2019.diagnostics import IntcodeError

FIRST = [3, 15, 3, 16, 1002, 16, 10, 16, 1, 16, 15, 15, 4, 15, 99, 0, 0]
SECOND = [3, 23, 3, 24, 1002, 24, 10, 24, 1002, 23, -1, 23, 101, 5, 23, 23, 1, 24, 23, 23, 4, 23, 99, 0, 0]


def test_run_amplifiers_example():
    assert run_amplifiers(FIRST, [4, 3, 2, 1, 0], 0) == 43210


def test_max_thruster_signal_example():
    assert max_thruster_signal(FIRST, range(5)) == 43210


def test_starting_arrangement_is_not_tried():
    identity_signal = run_amplifiers(SECOND, [0, 1, 2, 3, 4], 0)
    assert identity_signal == 54321
    assert max_thruster_signal(SECOND, range(5)) < identity_signal


def test_max_covers_every_later_arrangement():
    expected = max(
        run_amplifiers(SECOND, order, 0)
        for order in permutations(range(5))
        if order != (0, 1, 2, 3, 4)
    )
    assert max_thruster_signal(SECOND, range(5)) == expected


def test_negative_signals_floor_at_zero():
    assert max_thruster_signal([104, -5, 99], [0, 1]) == 0


def test_last_arrangement_has_no_successor():
    assert max_thruster_signal(FIRST, [4, 3, 2, 1, 0]) == 0


def test_program_is_not_modified():
    program = list(FIRST)
    run_amplifiers(program, [4, 3, 2, 1, 0], 0)
    assert program == FIRST


def test_running_out_of_phases_raises():
    with pytest.raises(IntcodeError):
        run_amplifiers([3, 0, 3, 0, 3, 0, 99], [1], 0)


def test_solve_matches_max():
    text = ",".join(map(str, FIRST))
    assert solve([text]) == max_thruster_signal(FIRST, range(5))