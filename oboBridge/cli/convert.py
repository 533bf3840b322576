"""CLI commands for compact-id <-> IRI conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import click

from oboBridge.cli.state import BridgeState
from oboBridge.ids.codec import from_iri, to_iri

DIRECTIONS = ("to-iri", "from-iri")


def _converter(state: BridgeState, direction: str) -> Callable[[str], str]:
    if direction == "to-iri":
        return lambda token: str(to_iri(token, state.context))
    return lambda token: from_iri(token, state.context.registry)


@click.command()
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_obj
def to_iri_cmd(state: BridgeState, identifiers: tuple[str, ...]) -> None:
    """Expand compact ids (``GO:001``) into IRIs, one per line."""

    for identifier in identifiers:
        try:
            click.echo(to_iri(identifier, state.context))
        except ValueError as exc:
            raise click.ClickException(str(exc))


@click.command()
@click.argument("iris", nargs=-1, required=True)
@click.pass_obj
def from_iri_cmd(state: BridgeState, iris: tuple[str, ...]) -> None:
    """Compress IRIs back into compact ids, one per line."""

    for iri in iris:
        click.echo(from_iri(iri, state.context.registry))


@click.command()
@click.option(
    "--direction",
    type=click.Choice(DIRECTIONS),
    default="to-iri",
    show_default=True,
)
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Text file with one identifier per line.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Destination file; blank lines are preserved.",
)
@click.pass_obj
def convert(state: BridgeState, direction: str, input_path: Path, output_path: Path) -> None:
    """Batch-convert identifiers line by line."""

    fn = _converter(state, direction)
    converted = 0
    unchanged = 0
    out_lines: list[str] = []
    for lineno, line in enumerate(input_path.read_text(encoding="utf-8").splitlines(), start=1):
        token = line.strip()
        if not token:
            out_lines.append("")
            continue
        try:
            result = fn(token)
        except ValueError as exc:
            state.log.failed(direction, line=lineno, token=token, error=str(exc))
            raise click.ClickException(f"{input_path}:{lineno}: {exc}")
        if result == token:
            unchanged += 1
        else:
            converted += 1
        out_lines.append(result)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(out_lines) + ("\n" if out_lines else ""), encoding="utf-8")
    state.log.complete(
        direction,
        converted=converted,
        unchanged=unchanged,
        output=str(output_path),
        ontology_id=state.config.ontology_id,
    )
    click.echo(f"{direction}: {converted} converted, {unchanged} unchanged -> {output_path}")
