"""CLI entry point for postprep."""

import logging
import sys
from pathlib import Path

import click

from .adapters.dates import GitCLIAdapter, NullVersionControlAdapter, SystemClockAdapter
from .build import run_build
from .config import load_settings
from .domain.detector import detect_format
from .domain.models import Document, DocumentFormat
from .domain.services import FrontmatterSynthesizer
from .ports.storage import OutputWriteError


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_document(path: Path) -> Document:
    """Read a post for inspection, keeping line endings as-is."""
    with open(path, encoding="utf-8", newline="") as f:
        return Document(name=path.stem, text=f.read(), source_path=path)


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """Postprep - add Hugo frontmatter to raw markdown posts."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None

    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
@click.pass_context
def build(ctx: click.Context) -> None:
    """Process all posts into the output directory."""
    settings = load_settings(ctx.obj["config_path"])

    try:
        results = run_build(settings)
    except OutputWriteError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not results:
        click.echo("No posts to process")
        return

    errors = 0
    for result in results:
        name = result.source_path.name
        if not result.success:
            errors += 1
            click.echo(f"✗ {name}: {result.errors}", err=True)
        elif result.format == DocumentFormat.PASS_THROUGH:
            click.echo(f"= {name} (copied)")
        else:
            click.echo(f"✓ {name}")

    click.echo(f"\nProcessed: {len(results) - errors} success, {errors} errors")
    if errors:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--git/--no-git", default=False, help="Use git history as date fallback")
def preview(file: Path, git: bool) -> None:
    """Print the processed post without writing it."""
    synthesizer = FrontmatterSynthesizer(
        vcs=GitCLIAdapter() if git else NullVersionControlAdapter(),
        clock=SystemClockAdapter(),
    )
    click.echo(synthesizer.synthesize(load_document(file)), nl=False)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(file: Path) -> None:
    """Show how a post would be handled and which fields were found."""
    document = load_document(file)
    fmt = detect_format(document)
    click.echo(f"format: {fmt.value}")
    if fmt == DocumentFormat.PASS_THROUGH:
        return

    synthesizer = FrontmatterSynthesizer(
        vcs=NullVersionControlAdapter(), clock=SystemClockAdapter()
    )
    metadata, fields = synthesizer.extract(document)
    click.echo(f"title: {metadata.title}" + ("" if fields.title else " (from filename)"))
    click.echo(f"date: {metadata.date}" + ("" if fields.date else " (fallback)"))
    click.echo(f"tags: {', '.join(metadata.tags) if metadata.tags else '-'}")
    click.echo(f"draft: {str(metadata.draft).lower()}")


if __name__ == "__main__":
    cli()
