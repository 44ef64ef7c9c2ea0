import pytest

from aoc2019.gravity_assist import (
    find_noun_verb,
    parse_program,
    run_program,
    solve,
)

PADDED = [1, 0, 0, 0, 99] + list(range(5, 200))


def test_parse_program():
    assert parse_program("1,0,0,0,99\n") == [1, 0, 0, 0, 99]


def test_parse_program_trailing_comma():
    assert parse_program("1,2,3,") == [1, 2, 3]


def test_parse_program_rejects_garbage():
    with pytest.raises(ValueError):
        parse_program("1,x,3")


@pytest.mark.parametrize(
    "program, expected",
    [
        ([1, 0, 0, 0, 99], 2),
        ([1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50], 3500),
        ([1, 1, 1, 4, 99, 5, 6, 0, 99], 30),
    ],
)
def test_run_program_examples(program, expected):
    assert run_program(program) == expected


def test_run_program_leaves_input_untouched():
    program = [1, 0, 0, 0, 99]
    original = list(program)
    run_program(program)
    assert program == original


def test_unknown_opcode_is_skipped():
    assert run_program([7, 0, 0, 0, 99]) == 7


def test_halt_stops_execution():
    assert run_program([99, 0, 0, 0, 1, 0, 0, 0]) == 99


def test_out_of_range_address_raises():
    with pytest.raises(IndexError):
        run_program([1, 50, 0, 0, 99])


def test_find_noun_verb_result_reproduces_target():
    target = 150
    result = find_noun_verb(PADDED, target)
    noun, verb = divmod(result, 100)
    patched = list(PADDED)
    patched[1], patched[2] = noun, verb
    assert run_program(patched) == target


def test_find_noun_verb_takes_last_matching_noun():
    # Noun 99 reads 99; the first verb reading 51 is 51 itself.
    assert find_noun_verb(PADDED, 150) == 9951


def test_find_noun_verb_without_match():
    assert find_noun_verb(PADDED, -5) is None


def test_solve_matches_patched_run():
    line = ",".join(str(value) for value in PADDED)
    patched = list(PADDED)
    patched[1], patched[2] = 12, 2
    part_1, part_2 = solve([line])
    assert part_1 == run_program(patched)
    assert part_2 == -1