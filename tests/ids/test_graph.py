from __future__ import annotations

import pytest
from rdflib import RDFS, BNode, Literal, URIRef

from oboBridge.ids.codec import PrefixContext
from oboBridge.ids.graph import (
    compact_for,
    node_from_bnode,
    node_to_bnode,
    obo_graph,
    term_for,
)
from oboBridge.ids.node_id import NodeID, NodeIdGenerator


def test_obo_graph_binds_prefixes(ctx: PrefixContext) -> None:
    g = obo_graph(ctx)
    bound = {prefix: str(ns) for prefix, ns in g.namespace_manager.namespaces()}
    assert bound["obo"] == "http://purl.obolibrary.org/obo/"
    assert bound["test"] == "http://purl.obolibrary.org/obo/test#"
    assert bound["owl"] == "http://www.w3.org/2002/07/owl#"


def test_bnode_conversion_round_trips() -> None:
    node = NodeID("_:genid3")
    bnode = node_to_bnode(node)
    assert bnode == BNode("genid3")
    assert node_from_bnode(bnode) == node


def test_term_for_dispatches(ctx: PrefixContext, generator: NodeIdGenerator) -> None:
    assert term_for("GO:001", ctx, generator) == URIRef("http://purl.obolibrary.org/obo/GO_001")
    assert term_for("_:b7", ctx, generator) == BNode("b7")
    minted = term_for("", ctx, generator)
    assert minted == BNode("genid1")


def test_loader_and_serializer_helpers_round_trip(
    ctx: PrefixContext, generator: NodeIdGenerator
) -> None:
    g = obo_graph(ctx)
    tokens = ["GO:001", "My_Ont:FOO_002", "MGI:MGI:1", "_:genid9"]
    for token in tokens:
        g.add((term_for(token, ctx, generator), RDFS.label, Literal(token)))

    written = sorted(compact_for(s, ctx) for s in g.subjects(RDFS.label, None))
    assert written == sorted(tokens)


def test_compact_for_rejects_literals(ctx: PrefixContext) -> None:
    with pytest.raises(TypeError):
        compact_for(Literal("x"), ctx)
