"""listcounter CLI: count how often you pick lines from a list.

Usage:
    listcounter -n NAME                       print NAME's lines, least used first
    cmd | listcounter -n NAME                 ... including lines piped on stdin
    listcounter -n NAME --inc LINE            count one more use of LINE
    listcounter -n NAME --remove LINE         forget LINE
    listcounter -n NAME --path                show where NAME is stored
    cmd | listcounter -n NAME -d , -f 1 ...   identify piped lines by their 2nd comma field
"""

from __future__ import annotations

import logging
import sys

import click

from listcounter.config import load_config
from listcounter.errors import ListCounterError
from listcounter.filestore import FileStore
from listcounter.ingest import read_stream
from listcounter.models import ExtractRule

logger = logging.getLogger("listcounter.cli")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule_from_options(delimiter: str | None, field: int | None) -> ExtractRule | None:
    if not delimiter and field is None:
        return None
    if not delimiter or field is None:
        raise click.UsageError("--delimiter and --field can only be used together!")
    return ExtractRule(delimiter, field)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@click.command()
@click.version_option(package_name="listcounter")
@click.option("-n", "--name", required=True, help="Name of the database.")
@click.option("-d", "--delimiter", default=None, help="Delimiter to split lines into parts, requires --field.")
@click.option(
    "-f", "--field", type=click.IntRange(min=0), default=None,
    help="Position of the ID part of the line, requires --delimiter.",
)
@click.option("--inc", "increment", default=None, metavar="ID", help="Increment the line with this identifier.")
@click.option("--remove", default=None, metavar="ID", help="Remove the line with this identifier.")
@click.option("--path", "show_path", is_flag=True, help="Print the path of the database file.")
@click.option("--desc", is_flag=True, help="Print most used lines first.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(
    name: str,
    delimiter: str | None,
    field: int | None,
    increment: str | None,
    remove: str | None,
    show_path: bool,
    desc: bool,
    verbose: bool,
) -> None:
    """Count and list lines by how often they were used.

    Lines piped on stdin are added to the listing. Only --inc changes counts;
    lines that were never incremented are not kept between runs.
    """
    _setup_logging(verbose)
    rule = _rule_from_options(delimiter, field)
    # An empty --inc or --remove value counts as not given.
    if sum(bool(x) for x in (increment, remove, show_path)) > 1:
        raise click.UsageError("--inc, --remove and --path are mutually exclusive")

    files = FileStore(load_config().data_dir)
    if show_path:
        click.echo(f"Path: {files.path_for(name)}")
        return

    try:
        store = files.load(name, rule)

        if remove:
            if not store.remove(remove):
                click.echo(f"Entry <{remove}> not found in DB!", err=True)
                return
            files.save(store)
            return

        read_stream(store, sys.stdin)

        if increment:
            record = store.increment(increment)
            logger.debug("%r now at %d", increment, record.count)
            files.save(store)
            return
    except ListCounterError as exc:
        raise click.ClickException(str(exc)) from exc

    records = store.sort_descending() if desc else store.sort_ascending()
    for record in records:
        click.echo(record.full_line)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
