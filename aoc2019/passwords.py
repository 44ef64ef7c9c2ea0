"""Counting six-digit passwords that satisfy the digit rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby, pairwise

PUZZLE_START = 359282
PUZZLE_END = 820401


def is_non_decreasing(digits: Sequence[int]) -> bool:
    """True when no digit is larger than the one after it."""
    return all(left <= right for left, right in pairwise(digits))


def has_adjacent_pair(digits: Sequence[int]) -> bool:
    """True when two neighbouring digits are equal."""
    return any(left == right for left, right in pairwise(digits))


def has_exact_pair(digits: Sequence[int]) -> bool:
    """True when some run of equal digits is exactly two long."""
    return any(len(list(run)) == 2 for _, run in groupby(digits))


def _digits(number: int, width: int) -> list[int]:
    return [int(char) for char in str(number).zfill(width)]


def _next_non_decreasing(number: int, width: int) -> int | None:
    """Smallest number >= ``number`` with non-decreasing digits, or None past the width."""
    if number >= 10**width:
        return None
    digits = _digits(number, width)
    for index, (left, right) in enumerate(pairwise(digits)):
        if left > right:
            digits[index + 1 :] = [left] * (width - index - 1)
            break
    return int("".join(map(str, digits)))


def candidate_passwords(start: int, end: int) -> Iterator[int]:
    """Yield ``start`` and then every later non-decreasing number up to ``end``."""
    if start < 0 or end < 0:
        raise ValueError("password range must not be negative")
    width = len(str(end))
    current: int | None = start
    while current is not None and current <= end:
        yield current
        current = _next_non_decreasing(current + 1, width)


def count_passwords(start: int, end: int) -> tuple[int, int]:
    """Count candidates with an adjacent pair, and those with an exact pair."""
    width = len(str(end))
    part_1 = part_2 = 0
    for candidate in candidate_passwords(start, end):
        digits = _digits(candidate, width)
        if has_adjacent_pair(digits):
            part_1 += 1
            if has_exact_pair(digits):
                part_2 += 1
    return part_1, part_2


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Count passwords in the fixed puzzle range; the input lines are not used."""
    return count_passwords(PUZZLE_START, PUZZLE_END)