"""CLI commands for anonymous node labels."""

from __future__ import annotations

import json

import click

from oboBridge.ids.namespaces import NODE_ID_MARKER
from oboBridge.ids.node_id import (
    default_generator,
    is_anonymous,
    is_anonymous_iri,
    is_shared_node_id,
    to_shared_iri,
)


@click.command()
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--raw", default=None, help="Wrap this label instead of minting one.")
@click.option("--shared", is_flag=True, help="Print the shared form of each label.")
def node_id(count: int, raw: str | None, shared: bool) -> None:
    """Mint anonymous node ids (``_:genid<n>``)."""

    generator = default_generator()
    if raw:
        labels = [generator.from_string(raw).id]
    else:
        labels = [generator.next().id for _ in range(count)]
    for label in labels:
        click.echo(to_shared_iri(label[len(NODE_ID_MARKER):]) if shared else label)


@click.command()
@click.argument("labels", nargs=-1, required=True)
def classify(labels: tuple[str, ...]) -> None:
    """Report how each label is classified by the anonymity checks."""

    rows = [
        {
            "label": label,
            "is_anonymous": is_anonymous(label),
            "is_anonymous_iri": is_anonymous_iri(label),
            "is_shared_node_id": is_shared_node_id(label),
        }
        for label in labels
    ]
    click.echo(json.dumps(rows, indent=2))
