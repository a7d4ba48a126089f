"""Bidirectional connection bookkeeping with constant-time removal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, MutableSequence, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class ConnectionNode:
    """One side of a set of two-way links.

    ``vec[i]`` is the parent of the node at ``cons[i]``, and ``meta[i]`` is
    the position at which this node sits in ``cons[i].cons``.
    """

    parent: Any = None
    cons: list[ConnectionNode] = field(default_factory=list, repr=False)
    meta: list[int] = field(default_factory=list, repr=False)
    vec: list[Any] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self.cons)


def fast_delete(seq: MutableSequence[T], index: int) -> T:
    """Remove ``seq[index]`` by moving the last item into its place.

    Order is not preserved. Returns the removed item.
    """
    if index < 0 or index >= len(seq):
        raise IndexError(f"index {index} out of range for sequence of length {len(seq)}")
    removed = seq[index]
    seq[index] = seq[-1]
    seq.pop()
    return removed


def fast_connect(tnode: ConnectionNode, unode: ConnectionNode) -> None:
    """Link two nodes to each other."""
    tnode.meta.append(len(unode.cons))
    unode.meta.append(len(tnode.cons))
    tnode.cons.append(unode)
    unode.cons.append(tnode)
    tnode.vec.append(unode.parent)
    unode.vec.append(tnode.parent)


def _remove_entry(node: ConnectionNode, index: int) -> None:
    fast_delete(node.cons, index)
    fast_delete(node.meta, index)
    fast_delete(node.vec, index)
    if len(node.cons) != index:
        # The former last entry now lives at ``index``; tell its peer.
        moved = node.cons[index]
        moved.meta[node.meta[index]] = index


def fast_disconnect(tnode: ConnectionNode, tindex: int) -> None:
    """Break the link stored at ``tnode.cons[tindex]`` on both sides."""
    uindex = tnode.meta[tindex]
    unode = tnode.cons[tindex]
    _remove_entry(tnode, tindex)
    _remove_entry(unode, uindex)