"""General helpers: case options, enum labels, truth parsing, GUIDs and random ranges."""

from __future__ import annotations

import enum
import math
import random
import uuid
from collections.abc import Hashable, Mapping

_TRUE_VALUES = frozenset({"Y", "y", "True", "TRUE", "1"})


class CaseType(enum.IntEnum):
    """Letter case applied to generated text."""

    NONE = 0
    UPPER = 1
    LOWER = 2


class CaseSensitivity(enum.IntEnum):
    """Whether a comparison distinguishes letter case."""

    SENSITIVE = 0
    INSENSITIVE = 1


class EnumLabels:
    """Mapping from enum members to human-readable labels."""

    def __init__(self, labels: Mapping[Hashable, str] | None = None) -> None:
        self._labels: dict[Hashable, str] = dict(labels or {})

    def get(self, member: Hashable) -> str:
        """Return the label of *member*, or an empty string if it has none."""
        return self._labels.get(member, "")

    def set(self, member: Hashable, label: str) -> None:
        """Assign *label* to *member*, replacing any earlier label."""
        self._labels[member] = label

    def __contains__(self, member: object) -> bool:
        return member in self._labels

    def __len__(self) -> int:
        return len(self._labels)


def is_true(value: str) -> bool:
    """Return True only for the exact strings 'Y', 'y', 'True', 'TRUE' or '1'."""
    return value in _TRUE_VALUES


def create_guid(case: CaseType = CaseType.NONE) -> str:
    """Return a random version-4 UUID in its 36-character text form.

    The text is lower case unless *case* is :attr:`CaseType.UPPER`.
    """
    text = str(uuid.uuid4())
    if case == CaseType.UPPER:
        return text.upper()
    return text


def calc_percentage_increase(initial: float, final: float) -> float:
    """Return the change from *initial* to *final* as a percentage of *initial*.

    A zero *initial* follows floating-point division: infinity with the
    sign of the change, or NaN when there is no change.
    """
    increase = final - initial
    if initial == 0:
        if increase == 0 or math.isnan(increase):
            return math.nan
        return math.copysign(math.inf, increase) * math.copysign(1.0, initial)
    return (increase / initial) * 100.0


class RandomRange:
    """Uniform integer generator over an inclusive range.

    The bounds may be given in either order; the smaller one becomes the
    start. The generator is seeded from the operating system's entropy.
    """

    def __init__(self, start: int, end: int) -> None:
        self._rng = random.Random()
        self.start = start
        self.end = end
        self.set_range(start, end)

    def set_range(self, start: int, end: int) -> None:
        """Set new bounds, ordering them, and reseed the generator."""
        if start < end:
            self.start, self.end = start, end
        else:
            self.start, self.end = end, start
        self.reset()

    def reset(self) -> None:
        """Reseed the generator from fresh system entropy."""
        self._rng.seed(random.SystemRandom().getrandbits(64))

    def generate(self) -> int:
        """Return a random integer in [start, end], both ends included."""
        return self._rng.randint(self.start, self.end)