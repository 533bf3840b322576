from __future__ import annotations

"""Compact OBO identifier <-> IRI codec.

Forward conversion (``to_iri``) is used while loading flat OBO text into a
graph; reverse conversion (``from_iri``) is used while writing the graph back
out. Neither direction raises for malformed identifiers: unrecognised shapes
pass through unchanged so legacy documents still load.

Known lossy case: an unprefixed id such as ``003`` is expanded under the
current ontology (``.../obo/test#003``) but comes back as ``003``. The
ontology the id came from is not recoverable from the IRI alone, and the
reverse path deliberately does not guess it.
"""

import enum
import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from curies import Converter
from rdflib import URIRef

from .namespaces import OBO_BASE, WELL_KNOWN_PREFIXES

if TYPE_CHECKING:  # pragma: no cover
    from oboBridge.config import BridgeConfig

logger = logging.getLogger(__name__)

ESCAPED_COLON = "%3A"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_URN_RE = re.compile(r"^urn:", re.IGNORECASE)
_ESCAPED_COLON_RE = re.compile(r"%3A", re.IGNORECASE)
_DIGITS_RE = re.compile(r"^[0-9]+$")
_UNDERSCORE_RE = re.compile(r"_")


class LocalShape(enum.Enum):
    """How the local part of a prefixed id is laid out in its IRI."""

    CANONICAL = "canonical"  # base + PREFIX_LOCAL
    FRAGMENT = "fragment"  # base + PREFIX#_LOCAL


class EmptyIdentifierError(ValueError):
    """Raised when an empty compact identifier is passed to ``to_iri``."""

    def __init__(self) -> None:
        super().__init__("compact_id must be non-empty")


class MissingOntologyIdError(ValueError):
    """Raised when an unprefixed id is expanded without a current ontology."""

    def __init__(self, compact_id: str) -> None:
        self.compact_id = compact_id
        super().__init__(
            f"cannot expand unprefixed id {compact_id!r}: no current ontology id"
        )


class PrefixRegistry(Mapping[str, str]):
    """Read-only prefix -> namespace map for non-OBO prefixes (owl, rdf, ...).

    Expansion and compression are delegated to a :class:`curies.Converter`,
    which matches the longest registered namespace. Namespaces may not
    overlap ``base`` in either direction, or they would capture the
    ``PREFIX_LOCAL`` IRIs that the OBO rules own.
    """

    def __init__(
        self,
        prefixes: Mapping[str, str] | None = None,
        *,
        include_defaults: bool = True,
        base: str = OBO_BASE,
    ) -> None:
        data: dict[str, str] = dict(WELL_KNOWN_PREFIXES) if include_defaults else {}
        for prefix, namespace in (prefixes or {}).items():
            prefix = str(prefix).strip()
            namespace = str(namespace or "").strip()
            if not prefix or ":" in prefix:
                raise ValueError(f"invalid prefix: {prefix!r}")
            if not namespace:
                raise ValueError(f"prefix {prefix!r} has no namespace")
            data[prefix] = namespace
        self._data = data
        self.check_base(base)
        self._converter = Converter.from_prefix_map(data)

    def __getitem__(self, prefix: str) -> str:
        return self._data[prefix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrefixRegistry):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"PrefixRegistry({self._data!r})"

    def check_base(self, base: str) -> None:
        """Raise ``ValueError`` if a registered namespace overlaps ``base``."""

        for prefix, namespace in self._data.items():
            if namespace.startswith(base) or base.startswith(namespace):
                raise ValueError(
                    f"prefix {prefix!r} namespace {namespace!r} overlaps the OBO base {base!r}"
                )

    def expand(self, curie: str) -> str | None:
        """Return the IRI for ``prefix:local``, or ``None`` if the prefix is unknown."""

        return self._converter.expand(curie)

    def compress(self, iri: str) -> str | None:
        """Return ``prefix:local`` when ``iri`` sits under a registered namespace."""

        return self._converter.compress(iri)


@dataclass(frozen=True)
class PrefixContext:
    """Caller-supplied context for forward conversion."""

    ontology_id: str | None = None
    base: str = OBO_BASE
    registry: PrefixRegistry = field(default_factory=PrefixRegistry)

    def __post_init__(self) -> None:
        if self.base != OBO_BASE:
            self.registry.check_base(self.base)

    @classmethod
    def from_config(cls, cfg: "BridgeConfig") -> "PrefixContext":
        return cls(
            ontology_id=cfg.ontology_id,
            base=cfg.base,
            registry=PrefixRegistry(cfg.prefixes, base=cfg.base),
        )


def is_absolute_iri(value: str) -> bool:
    return bool(_SCHEME_RE.match(value) or _URN_RE.match(value))


def split_iri(iri: str) -> tuple[str, str | None]:
    """Return ``(namespace, fragment)`` for ``iri``.

    With a ``#`` the namespace is everything before it and the fragment
    everything after. Without one the namespace runs up to and including the
    last ``/`` (empty when there is none) and the fragment is ``None``.
    """

    raw = str(iri)
    if "#" in raw:
        namespace, _, fragment = raw.partition("#")
        return namespace, fragment
    slash = raw.rfind("/")
    return raw[: slash + 1], None


def escape_local(local: str) -> str:
    return local.replace(":", ESCAPED_COLON)


def unescape_local(local: str) -> str:
    return _ESCAPED_COLON_RE.sub(":", local)


def classify_local(prefix: str, local: str) -> LocalShape:
    """Decide the IRI layout for an already-escaped local part."""

    # The reverse mapping splits canonical IRIs on underscores, so the join is
    # only used when it stays unambiguous.
    if _UNDERSCORE_RE.search(local):
        return LocalShape.FRAGMENT
    if _UNDERSCORE_RE.search(prefix) and not _DIGITS_RE.match(local):
        return LocalShape.FRAGMENT
    return LocalShape.CANONICAL


def to_iri(compact_id: str, ctx: PrefixContext) -> URIRef:
    """Expand ``compact_id`` into an IRI.

    ``GO:001`` -> ``.../obo/GO_001``; ``My_Ont:FOO_002`` ->
    ``.../obo/My_Ont#_FOO_002``; ``003`` under ontology ``test`` ->
    ``.../obo/test#003``. Absolute IRIs are returned unchanged.
    """

    raw = str(compact_id or "").strip()
    if not raw:
        raise EmptyIdentifierError()
    if is_absolute_iri(raw):
        return URIRef(raw)

    prefix, sep, local = raw.partition(":")
    if not sep:
        if not ctx.ontology_id:
            raise MissingOntologyIdError(raw)
        return URIRef(f"{ctx.base}{ctx.ontology_id}#{raw}")

    expanded = ctx.registry.expand(raw)
    if expanded is not None:
        return URIRef(expanded)

    local = escape_local(local)
    if classify_local(prefix, local) is LocalShape.CANONICAL:
        return URIRef(f"{ctx.base}{prefix}_{local}")
    return URIRef(f"{ctx.base}{prefix}#_{local}")


def from_iri(iri: str, registry: PrefixRegistry | None = None) -> str:
    """Best-effort reverse of :func:`to_iri`.

    ``.../obo/BFO_0000050`` -> ``BFO:0000050``; ``.../obo/OBO_REL#_part_of``
    -> ``OBO_REL:part_of``; ``.../obo/test#003`` -> ``003``. Anything that
    does not look like an expanded compact id is returned unchanged.
    """

    raw = str(iri)
    registry = registry if registry is not None else _DEFAULT_REGISTRY
    compressed = registry.compress(raw)
    if compressed is not None:
        return compressed

    namespace, fragment = split_iri(raw)
    if fragment is not None:
        token = namespace[namespace.rfind("/") + 1 :]
        if token and fragment.startswith("_"):
            return f"{token}:{unescape_local(fragment[1:])}"
        # The current-ontology prefix used on the way in is not reattached.
        return fragment

    segment = raw[len(namespace) :]
    parts = segment.split("_")
    if len(parts) == 2 and all(parts):
        return f"{parts[0]}:{unescape_local(parts[1])}"
    if len(parts) > 2 and all(parts) and _DIGITS_RE.match(parts[-1]):
        return f"{'_'.join(parts[:-1])}:{parts[-1]}"

    logger.debug("no compact form for %s; passing through", raw)
    return raw


_DEFAULT_REGISTRY = PrefixRegistry()


__all__ = [
    "ESCAPED_COLON",
    "LocalShape",
    "EmptyIdentifierError",
    "MissingOntologyIdError",
    "PrefixRegistry",
    "PrefixContext",
    "is_absolute_iri",
    "split_iri",
    "escape_local",
    "unescape_local",
    "classify_local",
    "to_iri",
    "from_iri",
]
