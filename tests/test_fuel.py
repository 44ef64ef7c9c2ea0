import pytest

from aoc2019.fuel import fuel_for_mass, solve, total_fuel_for_mass


def test_fuel_for_small_module():
    assert fuel_for_mass(12) == 2


@pytest.mark.parametrize("mass, expected", [(1969, 966), (100756, 50346)])
def test_total_fuel_examples(mass, expected):
    assert total_fuel_for_mass(mass) == expected


def test_total_equals_simple_when_fuel_needs_no_fuel():
    # the fuel for 12 is too light to need fuel of its own
    assert fuel_for_mass(fuel_for_mass(12)) <= 0
    assert total_fuel_for_mass(12) == fuel_for_mass(12)


def test_total_exceeds_simple_when_fuel_is_heavy():
    assert fuel_for_mass(fuel_for_mass(1969)) > 0
    assert total_fuel_for_mass(1969) > fuel_for_mass(1969)


def test_division_truncates_toward_zero():
    assert fuel_for_mass(-3) == fuel_for_mass(-5)
    assert fuel_for_mass(3) == fuel_for_mass(5)


def test_total_includes_negative_first_step():
    assert total_fuel_for_mass(4) == fuel_for_mass(4)
    assert fuel_for_mass(4) < 0


def test_solve_sums_both_parts():
    lines = ["12", "1969", "100756"]
    expected_1 = sum(fuel_for_mass(int(line)) for line in lines)
    expected_2 = sum(total_fuel_for_mass(int(line)) for line in lines)
    assert solve(lines) == (expected_1, expected_2)


def test_solve_empty_input():
    assert solve([]) == (0, 0)


def test_solve_rejects_non_numeric_line():
    with pytest.raises(ValueError):
        solve(["12", "abc"])