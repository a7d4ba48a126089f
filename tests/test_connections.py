import pytest

from protocells.connections import (
    ConnectionNode,
    fast_connect,
    fast_delete,
    fast_disconnect,
)


def _consistent(node):
    if not (len(node.cons) == len(node.meta) == len(node.vec)):
        return False
    return all(
        peer.cons[back] is node and node.vec[i] is peer.parent
        for i, (peer, back) in enumerate(zip(node.cons, node.meta))
    )


def test_fast_delete_moves_last_into_slot():
    items = ["a", "b", "c", "d"]
    removed = fast_delete(items, 1)
    assert removed == "b"
    assert items == ["a", "d", "c"]


def test_fast_delete_last_item():
    items = ["a", "b"]
    assert fast_delete(items, 1) == "b"
    assert items == ["a"]


def test_fast_delete_out_of_range():
    with pytest.raises(IndexError):
        fast_delete([], 0)
    with pytest.raises(IndexError):
        fast_delete(["a"], -1)


def test_fast_connect_links_both_sides():
    a = ConnectionNode(parent="A")
    b = ConnectionNode(parent="B")
    fast_connect(a, b)
    assert a.vec == ["B"]
    assert b.vec == ["A"]
    assert a.cons[0] is b and b.cons[0] is a
    assert _consistent(a) and _consistent(b)
    assert len(a) == len(b) == 1


def test_disconnect_keeps_all_nodes_consistent():
    hub = ConnectionNode(parent="hub")
    spokes = [ConnectionNode(parent=name) for name in ["s0", "s1", "s2", "s3"]]
    for spoke in spokes:
        fast_connect(hub, spoke)
    fast_connect(spokes[0], spokes[2])

    fast_disconnect(hub, 1)
    assert "s1" not in hub.vec
    assert spokes[1].vec == []
    for node in [hub, *spokes]:
        assert _consistent(node)


def test_disconnect_from_peer_side():
    hub = ConnectionNode(parent="hub")
    spokes = [ConnectionNode(parent=name) for name in ["s0", "s1", "s2"]]
    for spoke in spokes:
        fast_connect(spoke, hub)
    fast_disconnect(spokes[0], 0)
    assert sorted(hub.vec) == ["s1", "s2"]
    for node in [hub, *spokes]:
        assert _consistent(node)


def test_disconnect_everything_leaves_empty_nodes():
    hub = ConnectionNode(parent="hub")
    spokes = [ConnectionNode(parent=i) for i in range(5)]
    for spoke in spokes:
        fast_connect(hub, spoke)
    while hub.cons:
        fast_disconnect(hub, len(hub.cons) - 1)
        assert _consistent(hub)
    assert hub.vec == [] and hub.meta == []
    assert all(len(spoke) == 0 for spoke in spokes)