#!/usr/bin/env python3

import logging
from collections.abc import Iterator
from typing import TextIO

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from each_cons.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEPARATOR,
    LOG_LEVEL_ENV_VAR,
)
from each_cons.models.api.records import RunRecord, WindowRecord
from each_cons.runs import cons_group
from each_cons.utils.logging import configure_logging, log_event
from each_cons.utils.typer import as_bad_parameter, run_typer_app_as_main
from each_cons.windows import each_cons

logger = logging.getLogger(__name__)

app = typer.Typer(rich_markup_mode="rich", no_args_is_help=True)


def main() -> None:
    run_typer_app_as_main(app, prog_name="each-cons")


def _read_lines(file: TextIO) -> Iterator[str]:
    for line in file:
        yield line.rstrip("\r\n")


@app.callback()
def configure(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar=LOG_LEVEL_ENV_VAR,
        metavar="LEVEL",
        help="Diagnostic log level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Slide windows over, or group runs of, the lines of a file."""
    configure_logging(log_level)


@app.command("windows")
def windows(
    size: int = typer.Argument(..., help="Number of lines in each window."),
    input_file: typer.FileText = typer.Argument(
        "-", help="File to read lines from ([bold]-[/bold] for stdin)."
    ),
    nulls: int = typer.Option(
        0,
        "--nulls",
        "-n",
        min=0,
        help="Number of trailing windows to pad with empty lines.",
    ),
    separator: str = typer.Option(
        DEFAULT_SEPARATOR, "--separator", "-s", help="Separator between lines."
    ),
    output_json: bool = typer.Option(
        False, "-j", "--json", help="Print one JSON record per window."
    ),
) -> None:
    """Print each window of SIZE consecutive lines."""
    adapter = as_bad_parameter(
        "SIZE", each_cons, size, _read_lines(input_file), nulls=nulls
    )

    count = 0
    for count, window in enumerate(adapter, start=1):
        if output_json:
            print(WindowRecord.from_window(count - 1, window).to_json())
        else:
            print(separator.join("" if line is None else line for line in window))
    log_event(logger, "windows_emitted", size=size, count=count)


@app.command("runs")
def runs(
    input_file: typer.FileText = typer.Argument(
        "-", help="File to read lines from ([bold]-[/bold] for stdin)."
    ),
    show_count: bool = typer.Option(
        False, "-c", "--count", help="Prefix each line with the length of its run."
    ),
    output_json: bool = typer.Option(
        False, "-j", "--json", help="Print one JSON record per run."
    ),
    as_table: bool = typer.Option(False, "-t", "--table", help="Print a table."),
) -> None:
    """Print each run of identical consecutive lines once."""
    lines = list(_read_lines(input_file))
    groups = list(cons_group(lines))

    if as_table:
        table = Table("Line", "Value", "Count")
        for run in groups:
            table.add_row(str(run.start + 1), Text(run.value), str(len(run)))
        Console().print(table)
    else:
        for run in groups:
            if output_json:
                print(RunRecord.from_run(run).to_json())
            elif show_count:
                print(f"{len(run):>7} {run.value}")
            else:
                print(run.value)
    log_event(logger, "runs_emitted", lines=len(lines), count=len(groups))


if __name__ == "__main__":
    main()
