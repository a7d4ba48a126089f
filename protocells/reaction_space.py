"""Base for anything that holds compounds that can react."""

from __future__ import annotations

from typing import Any


class ReactionSpace:
    """A place where compounds may be drawn for reactions.

    The base space is always empty; subclasses hold real solutions.
    """

    def contains_reactant(self) -> bool:
        """Whether any compound is available."""
        return False

    def reactant_key(self) -> int:
        """Key of a randomly chosen compound; -1 for an empty space."""
        return -1

    def reactant_with_key(self, key: int) -> Any:
        """The compound stored under ``key``, or None."""
        return None

    def resolve_situation(self, key: int) -> None:
        """Tidy up after the compound at ``key`` took part in a reaction."""

    def add_compound_to_random_location(self, compound: Any) -> None:
        """Put ``compound`` somewhere in the space."""