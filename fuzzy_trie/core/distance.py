"""Bounded Levenshtein distance with branch-and-bound early exits."""

import math
from typing import Optional, Union

Budget = Union[int, float]


def _edit_distance(first: str, second: str, max_allowed: Budget) -> Optional[int]:
    """
    Single-row dynamic program over insertions, deletions and substitutions.

    Returns None only when an early exit proves the distance exceeds
    ``max_allowed``; a completed computation returns the true distance even
    if it lies above the budget.
    """
    if first == second:
        return 0

    # Keep the shorter string as the inner dimension
    if len(first) > len(second):
        first, second = second, first

    first_len = len(first)
    second_len = len(second)

    if second_len - first_len > max_allowed:
        return None

    previous_row = list(range(first_len + 1))

    for row_index in range(1, second_len + 1):
        second_char = second[row_index - 1]
        current_row = [row_index]
        row_minimum = row_index

        for column_index in range(1, first_len + 1):
            substitution_cost = 0 if first[column_index - 1] == second_char else 1
            insertion = current_row[column_index - 1] + 1
            deletion = previous_row[column_index] + 1
            substitution = previous_row[column_index - 1] + substitution_cost

            cell = min(insertion, deletion, substitution)
            current_row.append(cell)
            if cell < row_minimum:
                row_minimum = cell

        # The final distance can never drop below this row's minimum
        if row_minimum > max_allowed:
            return None

        previous_row = current_row

    return previous_row[first_len]


def bounded_distance(
    first: str,
    second: str,
    max_allowed: Budget = math.inf
) -> Optional[int]:
    """
    Compute the edit distance between two strings, up to a budget.

    Insertions, deletions and substitutions all cost 1. The computation
    stops as soon as it can prove the result exceeds ``max_allowed``.

    Args:
        first: First string
        second: Second string
        max_allowed: Largest distance the caller is interested in

    Returns:
        The distance, or None when it is strictly greater than ``max_allowed``
    """
    distance = _edit_distance(first, second, max_allowed)
    if distance is None or distance > max_allowed:
        return None
    return distance


def levenshtein_distance(
    first: str,
    second: str,
    max_allowed: Budget = math.inf
) -> Budget:
    """
    Edit distance with a sentinel for "too far".

    When an early exit fires the result is ``max_allowed + 1``. Otherwise the
    true distance is returned, which may itself exceed the budget.
    """
    distance = _edit_distance(first, second, max_allowed)
    if distance is None:
        return max_allowed + 1
    return distance
