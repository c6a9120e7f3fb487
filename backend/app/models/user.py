"""
Roster API - User Record
========================

What:  The record stored by the in-memory repositories.
How:   Frozen dataclass: an update produces a new record with the same id
       via dataclasses.replace, so a stored record is never mutated in place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A single user: id assigned by the repository, name validated on write."""

    id: int
    name: str
