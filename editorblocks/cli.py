"""CLI entry point for editorblocks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from editorblocks.config import EditorBlocksConfig, load_config
from editorblocks.config.loader import DEFAULT_CONFIG_TEMPLATE
from editorblocks.engine import create_engine
from editorblocks.errors import ConversionError, HandlerNotFoundError
from editorblocks.plugins import PluginNotFoundError

app = typer.Typer(
    name="editorblocks",
    help="Convert block editor documents to HTML or Markdown.",
)

config_app = typer.Typer(help="Manage editorblocks configuration.")
app.add_typer(config_app, name="config")

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_LOG_FORMATS = {
    "text": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}',
}

_TARGETS = ("html", "markdown")

# Global state
_config: EditorBlocksConfig | None = None


def _get_config() -> EditorBlocksConfig:
    if _config is None:
        return load_config()
    return _config


def configure_logging(config: EditorBlocksConfig) -> None:
    """Apply the configured log level and format to the root logger."""
    logging.basicConfig(
        level=_LOG_LEVELS[config.log_level],
        format=_LOG_FORMATS[config.log_format],
        force=True,
    )


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to editorblocks.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config)


def _validate_target(target: str) -> str:
    target = target.lower()
    if target not in _TARGETS:
        raise typer.BadParameter(
            f"expected one of: {', '.join(_TARGETS)}", param_hint="--to"
        )
    return target


@app.command()
def convert(
    file: str = typer.Argument(..., help="Path to the editor JSON document"),
    to: Annotated[
        str, typer.Option("--to", "-t", help="Target format: html or markdown")
    ] = "html",
    output: str | None = typer.Option(None, "--output", "-o", help="Write result to file"),
) -> None:
    """Convert an editor document to HTML or Markdown."""
    target = _validate_target(to)
    cfg = _get_config()

    path = Path(file)
    if not path.is_file():
        rprint(f"[red]Error:[/red] File not found: {escape(file)}")
        raise typer.Exit(1)

    try:
        engine = create_engine(target, cfg)
    except PluginNotFoundError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        result = engine.convert(path.read_text(encoding="utf-8"))
    except HandlerNotFoundError as e:
        rprint(f"[red]Unsupported block:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ConversionError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
        rprint(f"[green]Written to[/green] {escape(output)}")
        logger.info("converted %s to %s (%d chars)", path, output, len(result))
    else:
        typer.echo(result)


@app.command()
def handlers(
    to: Annotated[
        str, typer.Option("--to", "-t", help="Target format: html or markdown")
    ] = "html",
) -> None:
    """List the block types the configured engine can render."""
    target = _validate_target(to)
    cfg = _get_config()

    try:
        engine = create_engine(target, cfg)
    except PluginNotFoundError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Block Handlers ({target})")
    table.add_column("Block Type", style="cyan")
    table.add_column("Handler", style="green")
    table.add_column("Source", style="yellow")
    for block_type, handler in sorted(engine.handlers.items()):
        builtin = type(handler).__module__.startswith("editorblocks.")
        source = "built-in" if builtin else "plugin"
        table.add_row(block_type, type(handler).__name__, source)
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""
    cfg = _get_config()
    rprint(Syntax(yaml.safe_dump(cfg.model_dump(), sort_keys=False), "yaml"))


@config_app.command("init")
def config_init(
    path: str = typer.Option("editorblocks.yaml", "--path", "-p", help="Where to write the config"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default editorblocks.yaml."""
    dest = Path(path)
    if dest.exists() and not force:
        rprint(f"[yellow]{escape(path)} already exists (use --force to overwrite).[/yellow]")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {escape(path)}")
