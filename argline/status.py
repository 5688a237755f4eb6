# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Status`, the three-value validity lattice shared by types, parameters
and requests.

Statuses are totally ordered:

    VALID < INCOMPLETE < ERROR

A later member is "worse". Combining any number of statuses yields the worst
of them, so a request is only as valid as its least valid parameter.

Example:
    Status.combine([])                                   → Status.VALID
    Status.combine([Status.VALID, Status.INCOMPLETE])    → Status.INCOMPLETE
    Status.combine([Status.INCOMPLETE, Status.ERROR])    → Status.ERROR
"""
from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Iterable


@total_ordering
class Status(Enum):
    """
    Validity level of a parsed value.

    Members:
        VALID: The value is usable as it stands.
        INCOMPLETE: More input is needed (e.g. an empty number or a selection prefix).
        ERROR: The value can not be used.
    """

    VALID = 0
    INCOMPLETE = 1
    ERROR = 2

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def combine(cls, statuses: Iterable[Status]) -> Status:
        """Return the worst status in `statuses`, or VALID when there are none."""
        return max(statuses, default=cls.VALID)

    def __str__(self) -> str:
        return self.name.lower()
