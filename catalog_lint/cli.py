"""Command-line interface for catalog-lint."""

import logging
import sys

import click

from .output.formatter import format_lint_report
from .schema.errors import CatalogLoadError
from .validators.runner import lint_catalog


@click.command()
@click.version_option(package_name="catalog-lint")
@click.argument("directory", default=".", type=click.Path(file_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Show verbose output",
)
@click.option(
    "--fail-on-warning",
    is_flag=True,
    default=False,
    help="Exit with non-zero code on warnings",
)
def main(directory: str, output_format: str, verbose: bool, fail_on_warning: bool):
    """Lint an event catalog's frontmatter and resource references.

    DIRECTORY is the catalog root (defaults to the current directory).

    Exit codes:
      0 - No errors found
      1 - Errors found (or warnings with --fail-on-warning)
      2 - The catalog could not be read
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        report = lint_catalog(directory)
    except CatalogLoadError as e:
        click.echo(f"Error loading catalog: {e}", err=True)
        sys.exit(2)

    if report.file_count == 0:
        click.echo("No catalog files found")
        sys.exit(0)

    click.echo(format_lint_report(report, output_format, verbose))  # type: ignore

    if report.has_errors:
        sys.exit(1)
    elif fail_on_warning and report.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


if __name__ == "__main__":
    main()
