# protocells

A small artificial-life model. Organelles float in a world made of square
sectors. Each sector holds a solution of compounds. Compounds exchange
elements through reactions, and a reaction stands only when the change in
instability is low enough. Membranes are organelles that hold their own
inner solution and their own inner organelles.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `protocells.connections`: `ConnectionNode` holds two-way links.
  `fast_connect` links two nodes. `fast_disconnect` cuts a link on both
  sides in constant time. `fast_delete` removes an item from a list by
  moving the last item into its place, and returns the removed item.
- `protocells.neural_net`: `NeuralNet` is a three-layer integer net with 16
  nodes per layer and four outgoing links per node. `load` takes 192 bytes
  (or a latin-1 string), `add_input` and `output_for` address nodes by a
  byte code, and `run` propagates the inputs and then clears them.
  `char_to_indices` splits a byte code into two node positions.
- `protocells.reaction_space`: `ReactionSpace` is the base for every place
  where reactions happen. It has `contains_reactant`, `reactant_key`,
  `reactant_with_key`, `resolve_situation` and
  `add_compound_to_random_location`. The base space is always empty.
- `protocells.solution`: `Solution` is a reaction space backed by a list,
  with `pop` for unordered removal.
- `protocells.reactions`: the reaction rules. They are `do_reaction`,
  `do_reaction_and_report`, `perform_reaction_if_good_enough`,
  `create_random_reactant_group`, `randomly_react_if_good_enough`,
  `randomly_react_in_solution`, `rip_away_specified_elements` and
  `adjust_energy_values`. `InstabilityChange` reports how much each of the
  two compounds changed.
- `protocells.world`: `Sector` is a 25-slot solution. Each slot holds a
  stack of compounds. A sector also keeps a local population of organelles,
  whose structures count as reactants. `Universe` is the grid of sectors.
  `sector_at` finds the sector for a pixel position, clamped to the edges,
  and `add_to_local_population` links an organelle to a sector.
- `protocells.movement`: `Mobile` holds the position and the
  spring-like repositioning: `send_reposition_requests`,
  `receive_reposition_request`, `reposition` (which wraps around the
  world's edges), `set_position` and `make_presence_known`.
- `protocells.organelle`: `Nucleotides` is a 256-byte strand of DNA.
  `Organelle` provides `sense`, `take_action`, `do_death`,
  `reaction_space`, `immediate_family`, `check_rep`, and the association
  ring (`rotate_left`, `rotate_right`). `take_action` returns the chosen
  `Action` and carries nothing out.
- `protocells.membrane`: `Membrane` is an organelle that is also a
  reaction space. It has an inner solution, inner organelles and a ring
  anchored by two fixed nodes (`add_organelle_to_ring`). `do_diffusion`
  swaps compounds with the surrounding sector, and `do_death` releases the
  membrane's contents outward.

## Compounds

The package does not define a compound type of its own. Compounds are
duck-typed. A compound needs the following:

- `elements`: four element counts
- `sum` and `element_count`, kept current by `calculate_sum()`
- `internal_energy`
- `total_instability()` and `activation_instability()`
- a constructor that takes no arguments and makes an empty compound

Compounds placed in a `Sector` also need a `stacked_compound` attribute.
Compounds used as an organelle's structure also need `mass`.

## Example

The instability rule below is only an illustration.

```python
import random
from dataclasses import dataclass, field

from protocells.solution import Solution
from protocells.reactions import randomly_react_in_solution


@dataclass
class Compound:
    elements: list = field(default_factory=lambda: [0, 0, 0, 0])
    internal_energy: int = 0
    stacked_compound: object = None

    def __post_init__(self):
        self.calculate_sum()

    def calculate_sum(self):
        self.sum = sum(self.elements)
        self.element_count = self.sum
        self.mass = self.sum

    def total_instability(self):
        return abs(self.elements[0] - self.elements[1])

    def activation_instability(self):
        return 1


rng = random.Random(1)
space = Solution([Compound([2, 0, 1, 0]), Compound([0, 3, 0, 1])], rng=rng)
reacted = randomly_react_in_solution(space, threshold=0, rng=rng)
```

Functions that draw random numbers take an `rng` argument, an instance of
`random.Random`. Pass a seeded one to repeat a run.

## What the package does not do

The package supplies the parts of the model. It does not supply a
simulation loop that steps the world, an activation step that runs an
organelle's brain and acts on its outputs, or reproduction. It has no
display and no command-line program.