from __future__ import annotations

"""Top-level CLI exposing the identifier codec and node-id commands."""

import json
import platform
import sys
from pathlib import Path

import click

from oboBridge import __version__
from oboBridge.cli.convert import convert, from_iri_cmd, to_iri_cmd
from oboBridge.cli.node_ids import classify, node_id
from oboBridge.cli.state import BridgeState
from oboBridge.config import load_config


@click.group()
@click.version_option(__version__)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (defaults to $OBOBRIDGE_CONFIG or ./obobridge.yml).",
)
@click.option(
    "--ontology-id",
    default=None,
    help="Current ontology id used for unprefixed identifiers.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, ontology_id: str | None) -> None:
    """oboBridge command line."""
    try:
        cfg = load_config(config_file)
        if ontology_id:
            cfg.ontology_id = ontology_id.strip()
        ctx.obj = BridgeState(cfg)
    except ValueError as exc:
        raise click.ClickException(str(exc))


@cli.command()
@click.pass_obj
def diagnose(state: BridgeState) -> None:
    """Print the effective configuration as JSON."""
    cfg = state.config
    info = {
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "oboBridge": __version__,
        "ontology_id": cfg.ontology_id,
        "base": cfg.base,
        "prefixes": dict(state.context.registry),
    }
    click.echo(json.dumps(info, sort_keys=True, indent=2))


cli.add_command(to_iri_cmd, name="to-iri")
cli.add_command(from_iri_cmd, name="from-iri")
cli.add_command(convert)
cli.add_command(node_id, name="node-id")
cli.add_command(classify)


def main() -> None:  # pragma: no cover - CLI entrypoint
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
