"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from correspondence_engine.case_files import DEFAULT_CASE_FILENAME, write_placeholder_case_file
from correspondence_engine.run_execution import RunExecutionError, RunRequest, execute_case_run

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


class CasesFailedError(CliError):
    """Raised when at least one case failed."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="correspondence-engine")
def cli() -> None:
    """Correspondence-based matching checks over case files."""


@cli.command(name="generate-cases")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CASE_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML case file template to write",
)
def generate_cases(output_path: str) -> None:
    """Generate a YAML case file template with guidance comments."""
    try:
        resolved_output = write_placeholder_case_file(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--cases",
    "cases_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON case file",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the results workbook",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log engine diagnostics to stderr.",
)
def check(cases_path: str, report_path: str | None, verbose: bool) -> None:
    """Run every case in the case file and report failures."""
    if verbose:
        _configure_logging(logging.DEBUG)
    try:
        outcome = execute_case_run(RunRequest(cases_path=cases_path, report_path=report_path))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    for result in outcome.results:
        click.echo(f"{result.status.value} {result.case_id}")
        if result.failure is not None:
            for line in result.failure.render().splitlines():
                click.echo(f"    {line}")
    if outcome.report_path is not None:
        click.echo(str(outcome.report_path))
    if not outcome.all_passed:
        failed_count = len(outcome.failed_results)
        raise CasesFailedError(f"{failed_count} of {len(outcome.results)} case(s) failed.")


def _configure_logging(level: int) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger = logging.getLogger("correspondence_engine")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
