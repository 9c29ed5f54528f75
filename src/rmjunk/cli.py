"""CLI interface for rmjunk."""

from __future__ import annotations

import logging

import click

from rmjunk import __version__
from rmjunk.core.engine import remove_junk
from rmjunk.models.traversal import TraversalConfig


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _echo_removed(path: str) -> None:
    # Same wording for dry runs
    click.echo(f"Removed: {path}")


def _echo_error(path: str, error: OSError, operation: str) -> None:
    click.echo(f"Failed {operation} ({error}): {path}", err=True)


@click.command()
@click.argument("directory", metavar="DIR", type=click.Path(exists=True))
@click.option("-r", "--recursive", is_flag=True, help="Remove all descendant junk files in DIR.")
@click.option("--dry-run", is_flag=True, help="Print what would be removed without deleting anything.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="rmjunk")
def main(directory: str, recursive: bool, dry_run: bool, verbose: int) -> None:
    """Remove junk files such as .DS_Store and Thumbs.db in DIR."""
    _setup_logging(verbose)
    config = TraversalConfig(recursive=recursive, dry_run=dry_run)
    try:
        remove_junk(directory, config, on_removed=_echo_removed, on_error=_echo_error)
    except OSError as e:
        raise click.ClickException(f"Cannot read {directory}: {e}") from e


if __name__ == "__main__":
    main()
