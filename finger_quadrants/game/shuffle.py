"""Color assignment helpers and the Fisher-Yates reshuffle."""

import random
from typing import Sequence

from .config import ColorSlot, INITIAL_ASSIGNMENT

Assignment = tuple[ColorSlot, ColorSlot, ColorSlot, ColorSlot]


def validate_assignment(colors: Sequence[ColorSlot]) -> Assignment:
    """
    Check that colors is a permutation of the four color slots.

    Raises:
        ValueError: if a color is missing, duplicated or unknown
    """
    if len(colors) != len(ColorSlot) or set(colors) != set(ColorSlot):
        raise ValueError(
            f"Assignment must hold each of {[c.value for c in ColorSlot]} exactly once, "
            f"got {[getattr(c, 'value', c) for c in colors]}"
        )
    return tuple(colors)


def initial_assignment() -> Assignment:
    return INITIAL_ASSIGNMENT


def reshuffle(assignment: Sequence[ColorSlot], rng: random.Random | None = None) -> Assignment:
    """
    Uniformly random permutation of the assignment.

    Walks i from the last index down to 1, swapping with j drawn from [0, i].
    The input is left untouched; a new tuple is returned.
    """
    rng = rng or random
    colors = list(assignment)
    for i in range(len(colors) - 1, 0, -1):
        j = rng.randint(0, i)
        colors[i], colors[j] = colors[j], colors[i]
    return tuple(colors)


def describe(assignment: Sequence[ColorSlot]) -> str:
    """Short human-readable form, e.g. 'green/red | yellow/blue'."""
    names = [c.value for c in assignment]
    return f"{names[0]}/{names[1]} | {names[2]}/{names[3]}"
