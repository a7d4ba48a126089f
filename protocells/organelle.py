"""Organelles: the living units that sense, think and act in the world."""

from __future__ import annotations

import copy
import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .connections import fast_disconnect
from .movement import Mobile
from .neural_net import NeuralNet
from .reaction_space import ReactionSpace
from .world import Universe

logger = logging.getLogger(__name__)

DNA_LENGTH = 256
NUM_COMMUNICATION_CHANNELS = 4
NUM_ACTIVATION_OPTIONS = 5
NUM_ELEMENTS = 4

ENERGY_INPUT_CODE = 1
CONNECTION_COUNT_INPUT_CODE = 36


@dataclass
class Nucleotides:
    """A fixed-length strand of genetic code."""

    dna: bytearray = field(default_factory=lambda: bytearray(DNA_LENGTH))

    def __post_init__(self) -> None:
        self.dna = bytearray(self.dna)
        if len(self.dna) != DNA_LENGTH:
            raise ValueError(f"dna must be {DNA_LENGTH} bytes, got {len(self.dna)}")


class Action(enum.Enum):
    """What an organelle decides to do with one of its activation channels."""

    EAT = 0
    REPRODUCE = 1
    RESERVED_2 = 2
    RESERVED_3 = 3
    OTHER = 4


def _signed_byte(value: int) -> int:
    value &= 0xFF
    return value - 256 if value > 127 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class Organelle(Mobile):
    """A single organelle with a chemical structure and a small neural net.

    ``structure`` is the compound the organelle is built from. The organelle
    sits in a ring of associated organelles through ``left`` and ``right``.
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
    ) -> None:
        super().__init__(universe, x, y, rng)
        self.nucleotides = nucleotides
        self.structure = structure
        self.product_in_progress = (
            product_in_progress if product_in_progress is not None else type(structure)()
        )
        self.age = 0
        self.right: Organelle | None = None
        self.left: Organelle | None = None
        self.brain = NeuralNet()
        self.communication_inputs = [0] * NUM_COMMUNICATION_CHANNELS
        self.communication_outputs = [0] * NUM_COMMUNICATION_CHANNELS
        self.activation_channels = [0] * NUM_ACTIVATION_OPTIONS
        self.activation_locations = [0] * NUM_ACTIVATION_OPTIONS
        self.utility_marker = 0
        self.is_dead = False
        self.metadata1 = 0
        self.metadata2 = 0
        self.metadata3 = 0
        self.metadata4 = 0

    def mass(self) -> int:
        return self.structure.mass

    def sense(self) -> None:
        """Feed health, energy, connection count and neighbours' outputs into the brain."""
        brain = self.brain
        brain.add_input(self.metadata3, self.aliveness_percentage_guess())
        brain.add_input(
            ENERGY_INPUT_CODE, _trunc_div(self.structure.internal_energy, 10) - 9
        )
        brain.add_input(CONNECTION_COUNT_INPUT_CODE, len(self.connections.vec))
        for other in self.connections.vec:
            for code_in, code_out in zip(self.communication_inputs, self.communication_outputs):
                brain.add_input(code_in, other.brain.output_for(code_out))

    def take_action(self, nn_output: int, location: int) -> Action:
        """Choose the action selected by ``location``.

        A plain organelle only decides; subclasses carry the actions out.
        """
        decision = _trunc_mod(_signed_byte(location), 5)
        if decision in (0, 1, 2, 3):
            return Action(decision)
        return Action.OTHER

    def do_diffusion(self) -> None:
        """Plain organelles exchange nothing with their surroundings."""
        return None

    def is_alive(self) -> bool:
        return True

    def aliveness_percentage_guess(self) -> int:
        """Estimate of how close the organelle is to dying."""
        return -1

    def do_death(self) -> None:
        """Leave the ring, drop every link and spill the contents into the surroundings."""
        if self.is_dead:
            return
        self.is_dead = True

        if self.right is not None:
            self.right.left = self.left
            self.left.right = self.right

        for index in reversed(range(len(self.connections.cons))):
            fast_disconnect(self.connections, index)

        if len(self.outer_membrane.vec) == 1:
            membrane = self.outer_membrane.vec[0]
            if self.structure.element_count != 0:
                membrane.add_compound_to_random_location(copy.deepcopy(self.structure))
            elif self.structure.internal_energy > 0:
                logger.warning("energy loss")
            if self.product_in_progress.element_count != 0:
                membrane.add_compound_to_random_location(
                    copy.deepcopy(self.product_in_progress)
                )
            fast_disconnect(self.outer_membrane, 0)
        else:
            sector = self.universe.sector_at(self.xpos, self.ypos)
            if self.structure.element_count != 0:
                sector.add_compound_to_random_location(copy.deepcopy(self.structure))
            if self.product_in_progress.element_count != 0:
                sector.add_compound_to_random_location(
                    copy.deepcopy(self.product_in_progress)
                )
            for index in reversed(range(len(self.local_area.cons))):
                fast_disconnect(self.local_area, index)

    def immediate_family(self) -> list[Any]:
        """The organelles directly connected to this one."""
        return list(self.connections.vec)

    def reaction_space(self) -> ReactionSpace:
        """The enclosing membrane, or the sector when there is none."""
        if len(self.outer_membrane.vec) == 1:
            return self.outer_membrane.vec[0]
        return self.universe.sector_at(self.xpos, self.ypos)

    def rotate_left(self) -> None:
        """Swap places with the organelle to the left in the ring."""
        partner = self.left
        self.left = partner.left
        self.left.right = self
        partner.left = self
        partner.right = self.right
        self.right.left = partner
        self.right = partner

    def rotate_right(self) -> None:
        """Swap places with the organelle to the right in the ring."""
        partner = self.right
        self.right = partner.right
        self.right.left = self
        partner.right = self
        partner.left = self.left
        self.left.right = partner
        self.left = partner

    def check_rep(self) -> bool:
        """Whether the structure is non-empty with no negative counts or energy."""
        structure = self.structure
        if (
            structure.sum <= 0
            or any(count < 0 for count in structure.elements[:NUM_ELEMENTS])
            or structure.internal_energy < 0
        ):
            logger.warning("organelle structure failed its consistency check")
            return False
        return True