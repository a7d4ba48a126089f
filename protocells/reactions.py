"""Element-exchange reactions between compounds and their energy bookkeeping.

Compounds are duck-typed. A compound must provide:

* ``elements``: a mutable sequence of four element counts
* ``sum`` and ``element_count``: kept current by ``calculate_sum()``
* ``internal_energy``: an integer energy store
* ``total_instability()`` and ``activation_instability()``
* a no-argument constructor that makes an empty compound
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Protocol

from .reaction_space import ReactionSpace

NUM_ELEMENTS = 4


class Compound(Protocol):
    elements: list[int]
    sum: int
    element_count: int
    internal_energy: int

    def calculate_sum(self) -> None: ...

    def total_instability(self) -> int: ...

    def activation_instability(self) -> int: ...


@dataclass(frozen=True)
class InstabilityChange:
    """How much the instability of each of two compounds changed.

    Negative values mean the compound became more stable.
    """

    first: int
    second: int

    @property
    def total(self) -> int:
        return self.first + self.second


def _empty_like(compound: Any) -> Any:
    return type(compound)()


def do_reaction(c1: Compound, c2: Compound, diff: Compound) -> None:
    """Move the elements counted in ``diff`` from ``c1`` to ``c2``."""
    for i in range(NUM_ELEMENTS):
        c1.elements[i] -= diff.elements[i]
        c2.elements[i] += diff.elements[i]
    c1.calculate_sum()
    c2.calculate_sum()


def do_reaction_and_report(c1: Compound, c2: Compound, diff: Compound) -> InstabilityChange:
    """Run the reaction and report each compound's change in instability."""
    c1_before = c1.total_instability()
    c2_before = c2.total_instability()
    do_reaction(c1, c2, diff)
    return InstabilityChange(
        c1.total_instability() - c1_before,
        c2.total_instability() - c2_before,
    )


def perform_reaction_if_good_enough(
    c1: Compound, c2: Compound, diff: Compound, threshold: int
) -> InstabilityChange | None:
    """React, then undo the reaction if the total change exceeds ``threshold``.

    Returns the change when the reaction stands, otherwise None.
    """
    change = do_reaction_and_report(c1, c2, diff)
    if change.total > threshold:
        do_reaction(c2, c1, diff)
        return None
    return change


def adjust_energy_values(c1: Compound, c2: Compound, change: InstabilityChange) -> None:
    """Convert lost instability into internal energy and rebalance deficits.

    A negative balance on one compound is covered by the other; any energy
    debt that cannot be covered is left on ``c2``.
    """
    c1.internal_energy -= change.first
    c2.internal_energy -= change.second
    if c2.internal_energy < 0:
        c1.internal_energy += c2.internal_energy
        c2.internal_energy = 0
    if c1.internal_energy < 0:
        c2.internal_energy += c1.internal_energy
        c1.internal_energy = 0


def create_random_reactant_group(
    source: Compound, diff: Compound, rng: random.Random | None = None
) -> None:
    """Fill ``diff`` with a random non-empty group of at most one of each element.

    Only elements that ``source`` holds can be chosen. Raises ValueError when
    ``source`` holds nothing, since no group could ever be formed.
    """
    rng = rng if rng is not None else random.Random()
    counts = list(source.elements[:NUM_ELEMENTS])
    if any(count < 0 for count in counts):
        raise ValueError(f"negative element count in {counts}")
    if not any(counts):
        raise ValueError("cannot draw a reactant group from an empty compound")
    while True:
        for i, count in enumerate(counts):
            diff.elements[i] = rng.randrange(count + 1) % 2
        diff.calculate_sum()
        if diff.sum != 0:
            return


def randomly_react_if_good_enough(
    c1: Compound, c2: Compound, threshold: int, rng: random.Random | None = None
) -> InstabilityChange | None:
    """Move a random group of elements from ``c1`` to ``c2`` if it is favourable.

    The group's activation instability raises the bar; the internal energy
    of both compounds lowers it.
    """
    diff = _empty_like(c1)
    create_random_reactant_group(c1, diff, rng)
    threshold -= diff.activation_instability()
    threshold += c1.internal_energy
    threshold += c2.internal_energy
    return perform_reaction_if_good_enough(c1, c2, diff, threshold)


def randomly_react_in_solution(
    space: ReactionSpace, threshold: int, rng: random.Random | None = None
) -> bool:
    """Try one random reaction between two compounds drawn from ``space``.

    Returns True when a reaction took place.
    """
    if not space.contains_reactant():
        return False
    key1 = space.reactant_key()
    c1 = space.reactant_with_key(key1)
    key2 = space.reactant_key()
    c2 = space.reactant_with_key(key2)
    if key1 == key2:
        # A compound reacting with itself would create energy from nothing.
        return False
    change = randomly_react_if_good_enough(c1, c2, threshold, rng)
    if change is None:
        return False
    adjust_energy_values(c1, c2, change)
    if c1.element_count == 0:
        c2.internal_energy += c1.internal_energy
    space.resolve_situation(key1)
    return True


def rip_away_specified_elements(
    take_from: Compound, give_to: Compound, target: Compound, threshold: int
) -> InstabilityChange | None:
    """Move up to ``target``'s element counts from ``take_from`` into ``give_to``.

    Where ``take_from`` has fewer of an element than targeted, all of it is
    taken. Energies are adjusted when the reaction goes ahead; returns the
    change in that case and None otherwise.
    """
    diff = _empty_like(target)
    for i in range(NUM_ELEMENTS):
        wanted = target.elements[i]
        available = take_from.elements[i]
        diff.elements[i] = wanted if available >= wanted else available
    diff.calculate_sum()
    change = perform_reaction_if_good_enough(take_from, give_to, diff, threshold)
    if change is not None:
        adjust_energy_values(take_from, give_to, change)
    return change