from __future__ import annotations

"""Namespaces and reserved markers shared by the identifier codec and the
anonymous-node generator.

This module is the single source of truth for the OBO base stem and the
labels used to recognise generated blank nodes.
"""

from rdflib.namespace import OWL, RDF, RDFS, XSD

# Canonical OBO stem; every compact id expands beneath it.
OBO_BASE = "http://purl.obolibrary.org/obo/"

# Anonymous-node markers.
NODE_ID_MARKER = "_:"
NODE_ID_PREFIX = "genid"
SHARED_NODE_ID_PREFIX = "genid-nodeid-"

# Prefixes that never follow the OBO ``PREFIX_LOCAL`` pattern.
WELL_KNOWN_PREFIXES: dict[str, str] = {
    "owl": str(OWL),
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "xsd": str(XSD),
}

__all__ = [
    "OBO_BASE",
    "NODE_ID_MARKER",
    "NODE_ID_PREFIX",
    "SHARED_NODE_ID_PREFIX",
    "WELL_KNOWN_PREFIXES",
]
