import random

from protocells.connections import ConnectionNode, fast_connect
from protocells.movement import Mobile
from protocells.world import Universe


class _Membrane(Mobile):
    def __init__(self, universe, x=0, y=0, rng=None):
        super().__init__(universe, x, y, rng)
        self.inner_organelles = ConnectionNode(parent=self)

    def size(self):
        return 20


def _universe(nx=3, ny=3):
    return Universe(nx, ny, random.Random(5))


def test_default_size():
    assert Mobile(_universe()).size() == 15


def test_receive_accumulates():
    mob = Mobile(_universe())
    mob.receive_reposition_request(2, -3, 4)
    assert (mob.xpos_request, mob.ypos_request, mob.total_request_force) == (800, -1200, 400)
    mob.receive_reposition_request(2, -3, 4)
    assert mob.xpos_request == 1600
    assert mob.total_request_force == 800


def test_reposition_drift_and_coast():
    mob = Mobile(_universe(), 400, 400, random.Random(9))
    mob.reposition()
    dx, dy = mob.xpos - 400, mob.ypos - 400
    assert -1 <= dx <= 1 and -1 <= dy <= 1
    assert mob.xpos_request == dx * 3
    assert mob.ypos_request == dy * 3
    assert mob.total_request_force == 3


def test_reposition_follows_requests():
    mob = Mobile(_universe(), 100, 100, random.Random(4))
    mob.xpos_request = 300
    mob.ypos_request = -50
    mob.reposition()
    assert abs(mob.xpos - 400) <= 1
    assert abs(mob.ypos - 50) <= 1


def test_reposition_wraps_out_of_bounds():
    universe = _universe(2, 2)
    width = universe.num_x_sectors * universe.sector_pixels
    for seed in range(20):
        mob = Mobile(universe, width + 60, 300, random.Random(seed))
        mob.reposition()
        assert mob.xpos < width
        assert -100 <= mob.xpos - 60 <= 100


def test_set_position_stays_near_target():
    mob = Mobile(_universe(), rng=random.Random(1))
    for _ in range(50):
        mob.set_position(500, 700)
        assert 400 <= mob.xpos < 600
        assert 600 <= mob.ypos < 800


def test_presence_in_middle_reaches_all_neighbours():
    universe = _universe()
    px = universe.sector_pixels
    mob = Mobile(universe, px + px // 2, px + px // 2)
    mob.make_presence_known()
    assert len(mob.local_area) == 9
    assert {id(s) for s in mob.local_area.vec} == {id(s) for s in universe.sectors}


def test_presence_in_corner_is_clamped():
    universe = _universe()
    mob = Mobile(universe, 10, 10)
    mob.make_presence_known()
    assert len(mob.local_area) == 9
    assert len({id(s) for s in mob.local_area.vec}) == 4
    assert universe.sectors[0].local_population.vec.count(mob) == 4


def test_connected_far_apart_pulls_together():
    universe = _universe()
    a = Mobile(universe, 0, 0)
    b = Mobile(universe, 800, 0)
    fast_connect(a.connections, b.connections)
    a.send_reposition_requests()
    assert b.xpos_request < 0
    assert b.ypos_request == 0
    assert b.total_request_force == 100
    assert a.total_request_force == 0


def test_connected_at_comfortable_distance_is_left_alone():
    universe = _universe()
    a = Mobile(universe, 500, 500)
    b = Mobile(universe, 500 + a.size() * 4 + 10, 500)
    fast_connect(a.connections, b.connections)
    a.send_reposition_requests()
    assert b.total_request_force == 0


def test_crowded_neighbour_is_pushed_away():
    universe = _universe()
    a = Mobile(universe, 100, 100)
    b = Mobile(universe, 110, 100)
    universe.add_to_local_population(100, 100, a)
    universe.add_to_local_population(100, 100, b)
    a.send_reposition_requests()
    assert b.xpos_request > 0
    assert b.total_request_force > 0
    assert a.total_request_force == 0


def test_inner_far_from_membrane_pulls_membrane():
    universe = _universe()
    membrane = _Membrane(universe, 0, 0)
    inner = Mobile(universe, 100, 0)
    fast_connect(inner.outer_membrane, membrane.inner_organelles)
    inner.send_reposition_requests()
    assert membrane.total_request_force == 200
    assert membrane.xpos_request > 0
    assert inner.xpos_request == 0
    assert inner.ypos_request == 0


def test_inner_siblings_crowding_push_apart():
    universe = _universe()
    membrane = _Membrane(universe, 0, 0)
    first = Mobile(universe, 0, 0)
    second = Mobile(universe, 5, 0)
    fast_connect(first.outer_membrane, membrane.inner_organelles)
    fast_connect(second.outer_membrane, membrane.inner_organelles)
    first.send_reposition_requests()
    assert second.xpos_request > 0
    assert membrane.total_request_force == 0