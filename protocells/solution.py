"""A plain unordered solution of compounds."""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator

from .connections import fast_delete
from .reaction_space import ReactionSpace


class Solution(ReactionSpace):
    """Compounds held in an unordered list, drawn at random."""

    def __init__(
        self,
        compounds: Iterable[Any] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.compounds: list[Any] = list(compounds) if compounds is not None else []
        self.rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.compounds)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.compounds)

    def contains_reactant(self) -> bool:
        return bool(self.compounds)

    def reactant_key(self) -> int:
        if not self.compounds:
            raise LookupError("solution holds no compounds")
        return self.rng.randrange(len(self.compounds))

    def reactant_with_key(self, key: int) -> Any:
        return self.compounds[key]

    def resolve_situation(self, key: int) -> None:
        # Empty compounds stay in solution.
        return None

    def add_compound_to_random_location(self, compound: Any) -> None:
        self.compounds.append(compound)

    def pop(self, index: int) -> Any:
        """Remove and return the compound at ``index``; order is not kept."""
        return fast_delete(self.compounds, index)