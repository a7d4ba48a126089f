"""Membranes: organelles that enclose other organelles and a private solution."""

from __future__ import annotations

import math
import random
from typing import Any, Iterable

from .connections import ConnectionNode, fast_connect, fast_delete, fast_disconnect
from .organelle import Nucleotides, Organelle
from .reaction_space import ReactionSpace
from .world import Universe


class Membrane(Organelle, ReactionSpace):
    """An organelle that holds an inner solution and inner organelles.

    Two fixed ring nodes anchor a ring of associated organelles; new members
    are inserted just to the right of the first anchor.
    """

    def __init__(
        self,
        universe: Universe,
        structure: Any,
        x: int = 0,
        y: int = 0,
        rng: random.Random | None = None,
        nucleotides: Nucleotides | None = None,
        product_in_progress: Any = None,
        inner_solution: Iterable[Any] | None = None,
    ) -> None:
        super().__init__(
            universe,
            structure,
            x,
            y,
            rng,
            nucleotides=nucleotides,
            product_in_progress=product_in_progress,
        )
        self.inner_organelles = ConnectionNode(parent=self)
        self.inner_solution: list[Any] = (
            list(inner_solution) if inner_solution is not None else []
        )
        self.ring_anchor_one = Organelle(universe, type(structure)(), x, y, self.rng)
        self.ring_anchor_two = Organelle(universe, type(structure)(), x, y, self.rng)
        self.ring_anchor_one.left = self.ring_anchor_two
        self.ring_anchor_one.right = self.ring_anchor_two
        self.ring_anchor_two.left = self.ring_anchor_one
        self.ring_anchor_two.right = self.ring_anchor_one

    def add_organelle_to_ring(self, organelle: Organelle) -> None:
        """Insert ``organelle`` between the first anchor and its right neighbour."""
        anchor = self.ring_anchor_one
        organelle.right = anchor.right
        organelle.left = anchor
        anchor.right.left = organelle
        anchor.right = organelle

    # Reaction space interface

    def contains_reactant(self) -> bool:
        return bool(self.inner_solution)

    def reactant_key(self) -> int:
        if not self.inner_solution:
            raise LookupError("membrane solution holds no compounds")
        return self.rng.randrange(len(self.inner_solution))

    def reactant_with_key(self, key: int) -> Any:
        return self.inner_solution[key]

    def resolve_situation(self, key: int) -> None:
        # Empty compounds stay in the inner solution.
        return None

    def add_compound_to_random_location(self, compound: Any) -> None:
        self.inner_solution.append(compound)

    # Organelle behaviour

    def size(self) -> int:
        return 20

    def send_reposition_requests(self) -> None:
        """Pull stray inner organelles back inside, then behave as an organelle."""
        for other in self.inner_organelles.vec:
            xdelta = self.xpos - other.xpos
            ydelta = self.ypos - other.ypos
            distance = math.sqrt(xdelta * xdelta + ydelta * ydelta)
            desired = self.size() * 2 - other.size() * 2 - 3
            if desired - distance < 0:
                ratio = desired / (distance + 1)
                other.receive_reposition_request(
                    self._scaled(xdelta, ratio), self._scaled(ydelta, ratio), 6
                )
        super().send_reposition_requests()

    def do_death(self) -> None:
        """Release inner organelles and compounds outward, then die as an organelle."""
        if self.is_dead:
            return
        has_outer = len(self.outer_membrane.vec) == 1

        while self.inner_organelles.vec:
            inner = self.inner_organelles.vec[0]
            fast_disconnect(self.inner_organelles, 0)
            if has_outer:
                fast_connect(inner.outer_membrane, self.outer_membrane.cons[0])

        if has_outer:
            self.outer_membrane.vec[0].inner_solution.extend(self.inner_solution)
        else:
            sector = self.universe.sector_at(self.xpos, self.ypos)
            for compound in self.inner_solution:
                sector.add_compound_to_random_location(compound)
        self.inner_solution = []

        super().do_death()

    def do_diffusion(self) -> None:
        """Swap one random compound between the sector and the inner solution.

        Only membranes that are not themselves enclosed take part.
        """
        if len(self.outer_membrane.vec) != 1:
            sector = self.universe.sector_at(self.xpos, self.ypos)
            if sector.contains_reactant() or self.inner_solution:
                filled = len(sector.filled_indices)
                chosen = self.rng.randrange(filled + len(self.inner_solution))
                if chosen < filled:
                    self.inner_solution.append(sector.remove_compound_by_list_index(chosen))
                else:
                    compound = fast_delete(self.inner_solution, chosen - filled)
                    sector.add_compound_to_random_location(compound)
        super().do_diffusion()