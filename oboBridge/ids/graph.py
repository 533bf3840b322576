"""rdflib helpers for loaders and serializers that use the identifier codec."""

from __future__ import annotations

from rdflib import BNode, Graph, Namespace, URIRef
from rdflib.term import Identifier

from .codec import PrefixContext, from_iri, to_iri
from .namespaces import NODE_ID_MARKER
from .node_id import NodeID, NodeIdGenerator, default_generator, is_anonymous


def obo_graph(ctx: PrefixContext, *, identifier: Identifier | None = None) -> Graph:
    """Return a graph pre-bound with the OBO stem and the registry prefixes.

    The current ontology's own fragment namespace (``.../obo/<id>#``) is bound
    to the ontology id when one is set.
    """

    g = Graph(identifier=identifier)
    g.bind("obo", Namespace(ctx.base))
    if ctx.ontology_id:
        g.bind(ctx.ontology_id, Namespace(f"{ctx.base}{ctx.ontology_id}#"))
    for prefix, namespace in ctx.registry.items():
        g.bind(prefix, Namespace(namespace), override=True)
    return g


def node_to_bnode(node: NodeID) -> BNode:
    return BNode(node.id[len(NODE_ID_MARKER):])


def node_from_bnode(bnode: BNode) -> NodeID:
    return NodeID(str(bnode))


def term_for(
    identifier: str,
    ctx: PrefixContext,
    generator: NodeIdGenerator | None = None,
) -> Identifier:
    """Map a parsed identifier token to a graph term.

    Empty tokens get a freshly minted blank node; anonymous labels become
    blank nodes; everything else goes through :func:`to_iri`.
    """

    generator = generator if generator is not None else default_generator()
    if not identifier:
        return node_to_bnode(generator.next())
    if is_anonymous(identifier):
        return node_to_bnode(generator.from_string(identifier))
    return to_iri(identifier, ctx)


def compact_for(term: Identifier, ctx: PrefixContext | None = None) -> str:
    """Map a graph term back to the text written out for it."""

    if isinstance(term, BNode):
        return node_from_bnode(term).id
    if isinstance(term, URIRef):
        registry = ctx.registry if ctx is not None else None
        return from_iri(term, registry)
    raise TypeError(f"unsupported term type: {type(term).__name__}")


__all__ = [
    "obo_graph",
    "node_to_bnode",
    "node_from_bnode",
    "term_for",
    "compact_for",
]
