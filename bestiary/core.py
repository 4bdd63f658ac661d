"""
Core capability protocols shared across Monster Maker types.

Any object can take part in a bestiary by exposing these methods; no base
class is required.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Name(Protocol):
    """A named type."""

    def name(self) -> str:
        """Return the object's display name."""
        ...


@runtime_checkable
class Id(Protocol):
    """An identified type."""

    def id(self) -> int:
        """Return the object's numeric id."""
        ...
