"""
snowinclude CLI: normalize Script Includes from a CI/CD export.

Usage:
    snowinclude <sourceDir> <targetAppDir>

Reads ``<sourceDir>/update/sys_script_include_*.xml`` and writes
``<targetAppDir>/script_includes/<name>.js``.
"""

import logging
import sys
from pathlib import Path

import click

from snowinclude import __version__
from snowinclude.config import COMPLETION_MESSAGE, NormalizeConfig

USAGE = "Usage: snowinclude <sourceDir> <targetAppDir>"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    logging.getLogger("snowinclude").setLevel(level)


@click.command()
@click.version_option(__version__, prog_name="snowinclude")
@click.argument("source_dir", required=False, type=click.Path(path_type=Path))
@click.argument("target_app_dir", required=False, type=click.Path(path_type=Path))
@click.option("--strict", is_flag=True, default=False,
              help="Abort on the first file that cannot be parsed or written.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Enable debug logging.")
def main(
    source_dir: Path | None,
    target_app_dir: Path | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Extract Script Includes from update-set XML into annotated .js files."""
    from snowinclude.emit import UnsafeNameError
    from snowinclude.extract import RecordParseError
    from snowinclude.normalize import normalize_script_includes
    from snowinclude.scan import MissingDirectoryError

    if source_dir is None or target_app_dir is None:
        click.echo(USAGE, err=True)
        sys.exit(1)

    _configure_logging(verbose)

    config = NormalizeConfig(
        source_dir=source_dir,
        target_app_dir=target_app_dir,
        strict=strict,
    )

    try:
        report = normalize_script_includes(config)
    except MissingDirectoryError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)
    except (RecordParseError, UnsafeNameError, OSError) as e:
        click.secho(f"✗ Aborted: {e}", fg="red", err=True)
        sys.exit(1)

    seen: set[str] = set()
    for result in report.files:
        if result.status == "written":
            click.echo(
                f"  {click.style('✓', fg='green')} {result.source.name} → "
                f"{result.output.name}"
            )
            if result.name in seen:
                click.echo(
                    f"    {click.style('⚠', fg='yellow')} replaces an earlier "
                    f"{result.output.name}"
                )
            seen.add(result.name)
        elif result.status == "failed":
            click.echo(
                f"  {click.style('✗', fg='red')} {result.source.name} — {result.reason}"
            )
        else:
            click.echo(
                f"  {click.style('⊘', fg='white')} {result.source.name} — {result.reason}"
            )

    click.echo(
        f"Results: {report.written_count} written, "
        f"{report.skipped_count} skipped, "
        f"{report.failed_count} failed"
    )
    click.secho(COMPLETION_MESSAGE, fg="green")
