from __future__ import annotations

"""Identifiers for anonymous (blank) graph nodes.

Generated labels look like ``_:genid42``. The counter behind them is owned by
a :class:`NodeIdGenerator`; the module keeps one process-wide generator for
callers that do not manage their own.
"""

import threading
from dataclasses import dataclass

from .codec import split_iri
from .namespaces import NODE_ID_MARKER, NODE_ID_PREFIX, SHARED_NODE_ID_PREFIX


@dataclass(frozen=True, order=True)
class NodeID:
    """Immutable label of an anonymous node; always starts with ``_:``."""

    id: str

    def __post_init__(self) -> None:
        raw = str(self.id)
        if not raw.startswith(NODE_ID_MARKER):
            raw = NODE_ID_MARKER + raw
        object.__setattr__(self, "id", raw)

    def __str__(self) -> str:
        return self.id


class AtomicCounter:
    """Monotonic integer counter; ``increment`` is a single critical section."""

    def __init__(self, start: int = 0) -> None:
        self._value = int(start)
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class NodeIdGenerator:
    """Mint ``_:genid<n>`` labels from an owned counter."""

    def __init__(self, counter: AtomicCounter | None = None) -> None:
        self.counter = counter if counter is not None else AtomicCounter()

    def next(self) -> NodeID:
        return NodeID(NODE_ID_MARKER + node_string(self.counter.increment()))

    def from_string(self, raw: str | None) -> NodeID:
        """Wrap ``raw`` as a NodeID, or mint a fresh one when it is empty.

        Supplied strings are not checked against generated labels; callers
        must avoid collisions themselves.
        """

        if not raw:
            return self.next()
        return NodeID(raw)


def node_string(n: int) -> str:
    return f"{NODE_ID_PREFIX}{int(n)}"


def is_anonymous(candidate: str | None) -> bool:
    """True for ``_:`` labels and for anything containing ``genid``.

    Deliberately permissive: a named id that happens to contain ``genid`` is
    also reported as anonymous.
    """

    if candidate is None:
        return False
    candidate = str(candidate)
    return candidate.startswith(NODE_ID_MARKER) or NODE_ID_PREFIX in candidate


def is_anonymous_iri(iri: str) -> bool:
    """True when the IRI's namespace is non-empty and contains ``genid``.

    Not equivalent to :func:`is_anonymous`: ``_:genid1`` has an empty
    namespace and is therefore not anonymous by this test.
    """

    namespace, _ = split_iri(iri)
    return bool(namespace) and NODE_ID_PREFIX in namespace


def is_shared_node_id(candidate: str | None) -> bool:
    return candidate is not None and SHARED_NODE_ID_PREFIX in str(candidate)


def to_shared_iri(raw: str) -> str:
    """``genid7`` -> ``_:genid-nodeid-7``; unifies labels of the same node."""

    return NODE_ID_MARKER + SHARED_NODE_ID_PREFIX + str(raw).replace(NODE_ID_PREFIX, "")


_default_generator = NodeIdGenerator()


def default_generator() -> NodeIdGenerator:
    return _default_generator


def next_node_id() -> NodeID:
    return _default_generator.next()


def node_id_from_string(raw: str | None) -> NodeID:
    return _default_generator.from_string(raw)


__all__ = [
    "NodeID",
    "AtomicCounter",
    "NodeIdGenerator",
    "node_string",
    "is_anonymous",
    "is_anonymous_iri",
    "is_shared_node_id",
    "to_shared_iri",
    "default_generator",
    "next_node_id",
    "node_id_from_string",
]
