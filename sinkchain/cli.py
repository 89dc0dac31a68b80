"""SinkChain CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated, get_args

import click
import typer

from sinkchain import __version__
from sinkchain.app.adapters import IOFailure
from sinkchain.bootstrap import DECORATORS, DEFAULT_LAYERS, bootstrap_application
from sinkchain.config import TransformMode, get_settings, set_settings
from sinkchain.errors import SinkChainError

app = typer.Typer(
    name="sinkchain",
    help="Write text through stacked encryption/compression decorators and read it back",
    add_completion=False,
    no_args_is_help=True,
)

DEFAULT_SAMPLE = "hello world"
ABSENT_MARKER = "<absent>"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"SinkChain version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """SinkChain decorator demonstration."""


def _parse_layers(value: str) -> list[str]:
    layers = [name.strip() for name in value.split(",") if name.strip()]
    unknown = [name for name in layers if name not in DECORATORS]
    if unknown:
        raise typer.BadParameter(
            f"unknown layer(s) {', '.join(unknown)}; choose from {', '.join(DECORATORS)}"
        )
    return layers


@app.command()
def roundtrip(
    path: Annotated[Path, typer.Argument(help="File backing the leaf sink")],
    text: Annotated[str, typer.Option("--text", "-t", help="Sample text to write")] = DEFAULT_SAMPLE,
    mode: Annotated[
        str | None,
        typer.Option(
            "--mode",
            "-m",
            click_type=click.Choice(get_args(TransformMode)),
            help="Transform mode: reversible or label",
        ),
    ] = None,
    layers: Annotated[
        str,
        typer.Option("--layers", help="Comma-separated decorators, innermost first"),
    ] = ",".join(DEFAULT_LAYERS),
) -> None:
    """Write TEXT through the decorator chain at PATH and read it back."""
    settings = get_settings()
    if mode is not None:
        settings = settings.model_copy(update={"transform_mode": mode})
        set_settings(settings)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    chain_layers = _parse_layers(layers)
    failures: list[IOFailure] = []
    try:
        container = bootstrap_application(
            path,
            settings,
            layers=chain_layers,
            on_failure=failures.append,
        )
        outcome = container.round_trip_service.run(text)
    except SinkChainError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(f"Chain: {' -> '.join(outcome.layers)}")
    typer.echo(f"Written: {outcome.written}")
    for failure in failures:
        typer.secho(failure.message, fg=typer.colors.YELLOW, err=True)

    if outcome.absent:
        typer.echo(f"Result: {ABSENT_MARKER}")
        raise typer.Exit(code=1)

    typer.echo(f"Result: {outcome.result}")
    typer.echo(f"On disk: {container.leaf.path.read_text(encoding='utf-8')}")


if __name__ == "__main__":
    app()
