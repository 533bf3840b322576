"""Identifier translation between compact OBO ids, IRIs and blank-node labels."""

from .codec import (  # noqa: F401
    EmptyIdentifierError,
    LocalShape,
    MissingOntologyIdError,
    PrefixContext,
    PrefixRegistry,
    classify_local,
    from_iri,
    split_iri,
    to_iri,
)
from .graph import compact_for, node_from_bnode, node_to_bnode, obo_graph, term_for  # noqa: F401
from .namespaces import OBO_BASE  # noqa: F401
from .node_id import (  # noqa: F401
    AtomicCounter,
    NodeID,
    NodeIdGenerator,
    is_anonymous,
    is_anonymous_iri,
    is_shared_node_id,
    next_node_id,
    node_id_from_string,
    node_string,
    to_shared_iri,
)

__all__ = [
    "AtomicCounter",
    "EmptyIdentifierError",
    "LocalShape",
    "MissingOntologyIdError",
    "NodeID",
    "NodeIdGenerator",
    "OBO_BASE",
    "PrefixContext",
    "PrefixRegistry",
    "classify_local",
    "compact_for",
    "from_iri",
    "is_anonymous",
    "is_anonymous_iri",
    "is_shared_node_id",
    "next_node_id",
    "node_from_bnode",
    "node_id_from_string",
    "node_string",
    "node_to_bnode",
    "obo_graph",
    "split_iri",
    "term_for",
    "to_iri",
    "to_shared_iri",
]
