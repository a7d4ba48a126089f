"""The world grid: sectors holding stacked solutions and local populations."""

from __future__ import annotations

import random
from typing import Any, Iterator

from .connections import ConnectionNode, fast_connect, fast_delete
from .reaction_space import ReactionSpace

SOLUTION_SLOTS = 25
DEFAULT_SECTOR_PIXELS = 320


class Sector(ReactionSpace):
    """One square of the world.

    The solution has a fixed number of slots. Each slot holds a stack of
    compounds linked through their ``stacked_compound`` attribute. Organelles
    present in the sector are reachable through ``local_population``, and
    their structures count as reactants too.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.solution: list[Any] = [None] * SOLUTION_SLOTS
        self.filled_indices: list[int] = []
        self.local_population = ConnectionNode(parent=self)

    def __iter__(self) -> Iterator[Any]:
        """Every compound in the solution, stacked ones included."""
        for location in self.filled_indices:
            compound = self.solution[location]
            while compound is not None:
                yield compound
                compound = compound.stacked_compound

    def add_compound_to_location(self, compound: Any, location: int) -> None:
        """Put ``compound`` into slot ``location``.

        An occupied slot takes the newcomer second from the bottom of its stack.
        """
        if not 0 <= location < SOLUTION_SLOTS:
            raise IndexError(f"solution location {location} out of range")
        bottom = self.solution[location]
        if bottom is None:
            compound.stacked_compound = None
            self.solution[location] = compound
            self.filled_indices.append(location)
        else:
            compound.stacked_compound = bottom.stacked_compound
            bottom.stacked_compound = compound

    def add_compound_to_random_location(self, compound: Any) -> None:
        self.add_compound_to_location(compound, self.rng.randrange(SOLUTION_SLOTS))

    def contains_reactant(self) -> bool:
        return bool(self.filled_indices)

    def reactant_key(self) -> int:
        total = len(self.filled_indices) + len(self.local_population.vec)
        if total == 0:
            raise LookupError("sector holds no compounds and no organelles")
        return self.rng.randrange(total)

    def reactant_with_key(self, key: int) -> Any:
        filled = len(self.filled_indices)
        if key >= filled:
            return self.local_population.vec[key - filled].structure
        return self.solution[self.filled_indices[key]]

    def resolve_situation(self, key: int) -> None:
        # Empty compounds in solution are kept; an organelle whose structure
        # has been emptied dies.
        filled = len(self.filled_indices)
        if key >= filled:
            organelle = self.local_population.vec[key - filled]
            if organelle.structure.element_count == 0:
                organelle.do_death()

    def remove_compound_by_list_index(self, index: int) -> Any:
        """Take the bottom compound off the slot named by ``filled_indices[index]``.

        ``index`` is a position in ``filled_indices``, not a solution slot.
        """
        location = self.filled_indices[index]
        removed = self.solution[location]
        self.solution[location] = removed.stacked_compound
        if removed.stacked_compound is None:
            fast_delete(self.filled_indices, index)
        else:
            removed.stacked_compound = None
        return removed


class Universe:
    """A rectangular grid of sectors and the life living in it."""

    def __init__(
        self,
        num_x_sectors: int = 0,
        num_y_sectors: int = 0,
        rng: random.Random | None = None,
        sector_pixels: int = DEFAULT_SECTOR_PIXELS,
    ) -> None:
        if num_x_sectors < 0 or num_y_sectors < 0:
            raise ValueError("sector counts must not be negative")
        if sector_pixels <= 0:
            raise ValueError("sector_pixels must be positive")
        self.rng = rng if rng is not None else random.Random()
        self.num_x_sectors = num_x_sectors
        self.num_y_sectors = num_y_sectors
        self.sector_pixels = sector_pixels
        self.sectors: list[Sector] = [
            Sector(self.rng) for _ in range(num_x_sectors * num_y_sectors)
        ]
        self.all_life: list[Any] = []
        self.new_life: list[Any] = []

    def _sector_index(self, x: int, y: int) -> int:
        if not self.sectors:
            raise LookupError("universe has no sectors")
        column = min(max(int(x / self.sector_pixels), 0), self.num_x_sectors - 1)
        row = min(max(int(y / self.sector_pixels), 0), self.num_y_sectors - 1)
        return column + row * self.num_x_sectors

    def sector_at(self, x: int, y: int) -> Sector:
        """The sector containing pixel ``(x, y)``, clamped to the grid's edges."""
        return self.sectors[self._sector_index(x, y)]

    def add_to_local_population(self, x: int, y: int, organelle: Any) -> None:
        """Link ``organelle`` with the sector at ``(x, y)``."""
        fast_connect(self.sector_at(x, y).local_population, organelle.local_area)