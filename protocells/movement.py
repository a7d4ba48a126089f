"""Position and spring-like repositioning of things living in the world."""

from __future__ import annotations

import math
import random
from typing import Any

from .connections import ConnectionNode
from .world import Universe


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class Mobile:
    """Something with a position that neighbours push and pull on.

    Requests to move accumulate weighted by force and are applied together
    by :meth:`reposition`.
    """

    def __init__(
        self,
        universe: Universe,
        x: int = 0,
        y: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self.universe = universe
        self.rng = rng if rng is not None else random.Random()
        self.xpos = x
        self.ypos = y
        self.xpos_request = 0
        self.ypos_request = 0
        self.total_request_force = 0
        self.local_area = ConnectionNode(parent=self)
        self.outer_membrane = ConnectionNode(parent=self)
        self.connections = ConnectionNode(parent=self)

    def size(self) -> int:
        return 15

    def make_presence_known(self) -> None:
        """Join the local population of this sector and the eight around it."""
        step = self.universe.sector_pixels
        for dx, dy in (
            (0, 0), (step, 0), (-step, 0), (0, step), (0, -step),
            (step, step), (-step, step), (step, -step), (-step, -step),
        ):
            self.universe.add_to_local_population(self.xpos + dx, self.ypos + dy, self)

    def _delta_to(self, other: Any) -> tuple[int, int]:
        return self.xpos - other.xpos, self.ypos - other.ypos

    @staticmethod
    def _scaled(delta: int, ratio: float) -> int:
        return int(delta - delta * ratio)

    def send_reposition_requests(self) -> None:
        """Ask connected and nearby things to move toward their preferred spacing."""
        for other in self.connections.vec:
            xdelta, ydelta = self._delta_to(other)
            distance = math.sqrt(xdelta * xdelta + ydelta * ydelta)
            desired = other.size() * 2 + self.size() * 2 + 10
            if abs(distance - desired) > 15:
                ratio = desired / (distance + 1)
                other.receive_reposition_request(
                    self._scaled(xdelta, ratio), self._scaled(ydelta, ratio), 1
                )

        if len(self.outer_membrane.vec) != 1:
            sector = self.universe.sector_at(self.xpos, self.ypos)
            for other in sector.local_population.vec:
                if other is self:
                    continue
                xdelta, ydelta = self._delta_to(other)
                distance = math.sqrt(xdelta * xdelta + ydelta * ydelta)
                desired = other.size() * 2 + self.size() * 2 + 10
                if distance < desired:
                    ratio = desired / (distance + 1)
                    other.receive_reposition_request(
                        self._scaled(xdelta, ratio),
                        self._scaled(ydelta, ratio),
                        int(desired - distance),
                    )
            return

        membrane = self.outer_membrane.vec[0]
        xdelta, ydelta = self._delta_to(membrane)
        desired = membrane.size() * 2 - self.size() * 2 - 3
        if abs(xdelta) + abs(ydelta) > desired:
            distance = math.sqrt(xdelta * xdelta + ydelta * ydelta)
            if distance > desired:
                ratio = desired / (distance + 1)
                membrane.receive_reposition_request(
                    self._scaled(xdelta, ratio), self._scaled(ydelta, ratio), 2
                )
        for other in membrane.inner_organelles.vec:
            xdelta, ydelta = self._delta_to(other)
            desired = other.size() * 2 + self.size() * 2 + 10
            if abs(xdelta) + abs(ydelta) > desired:
                continue
            distance = math.sqrt(xdelta * xdelta + ydelta * ydelta)
            if distance < desired:
                ratio = desired / (distance + 1)
                other.receive_reposition_request(
                    self._scaled(xdelta, ratio), self._scaled(ydelta, ratio), 3
                )

    def receive_reposition_request(self, delta_x: int, delta_y: int, force: int) -> None:
        """Accumulate a request to move by ``(delta_x, delta_y)`` with weight ``force``."""
        self.xpos_request += delta_x * force * 100
        self.ypos_request += delta_y * force * 100
        self.total_request_force += force * 100

    def reposition(self) -> None:
        """Apply the accumulated requests plus a little drift, then wrap around."""
        xmove = _trunc_div(self.xpos_request, self.total_request_force + 1)
        xmove += self.rng.randrange(3) - 1
        self.xpos += xmove
        ymove = _trunc_div(self.ypos_request, self.total_request_force + 1)
        ymove += self.rng.randrange(3) - 1
        self.ypos += ymove
        # Keep coasting a little on the next step.
        self.xpos_request = xmove * 3
        self.ypos_request = ymove * 3
        self.total_request_force = 3
        width = self.universe.num_x_sectors * self.universe.sector_pixels
        height = self.universe.num_y_sectors * self.universe.sector_pixels
        if width < self.xpos or height < self.ypos or self.xpos < 0 or self.ypos < 0:
            self.set_position(
                _trunc_mod(self.xpos + width, width),
                _trunc_mod(self.ypos + height, height),
            )

    def set_position(self, x: int, y: int) -> None:
        """Move to somewhere within 100 pixels of ``(x, y)``."""
        self.xpos = x + self.rng.randrange(200) - 100
        self.ypos = y + self.rng.randrange(200) - 100