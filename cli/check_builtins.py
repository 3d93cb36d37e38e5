"""
Check that the builtin declarations contained in json files decode correctly.

Each file holds either a single builtin declaration object or a list of them.
"""

import sys
from pathlib import Path
from typing import Iterator, List

import click
from rich.console import Console

from config import AppConfig
from ethereum_chainspec_base_types import to_json
from ethereum_chainspec_builtins import (
    Builtin,
    DecodeError,
    decode_builtin,
    decode_builtins,
    load_json,
)

from .log import configure_logging, get_logger, parse_log_level

logger = get_logger(__name__)


def find_builtin_files(input_path: Path, file_glob: str) -> Iterator[Path]:
    """Yield the input file, or every file matching the glob under the input directory."""
    if input_path.is_file():
        yield input_path
        return
    yield from sorted(input_path.rglob(file_glob))


def check_file(file_path: Path) -> List[Builtin]:
    """
    Decode all the builtin declarations of a json file.

    Files that are not UTF-8 encoded json documents, or that repeat a key in any
    object, are reported as a `DecodeError`.
    """
    data = load_json(file_path.read_bytes())
    if isinstance(data, list):
        return decode_builtins(data)
    return [decode_builtin(data)]


@click.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=True, readable=True, path_type=Path),
    required=True,
    help="A json file, or a directory containing json files, with builtin declarations",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_mode",
    is_flag=True,
    default=False,
    help="Only print the files that fail to decode.",
)
@click.option(
    "--stop-on-error",
    "--raise-on-error",
    "-s",
    "stop_on_error",
    is_flag=True,
    default=False,
    help="Stop and raise the first decode error encountered.",
)
@click.option(
    "--dump",
    "-d",
    "dump",
    is_flag=True,
    default=False,
    help="Print the normalized json of every decoded declaration.",
)
@click.option(
    "--log-level",
    "log_level",
    type=str,
    default=None,
    help="The logging level: DEBUG, VERBOSE, INFO, WARNING, ERROR or CRITICAL.",
)
@click.option(
    "--log-file",
    "log_file",
    type=click.Path(file_okay=True, dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Also write the log to this file.",
)
def check_builtins(
    input_path: Path,
    quiet_mode: bool,
    stop_on_error: bool,
    dump: bool,
    log_level: str | None,
    log_file: Path | None,
):
    """
    Check the builtin declarations contained in the specified file or directory.
    """
    config = AppConfig()
    try:
        level = parse_log_level(log_level or config.DEFAULT_LOG_LEVEL)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e
    configure_logging(level, log_file=log_file)

    console = Console(highlight=False, soft_wrap=True)
    file_count = 0
    failed_count = 0
    for file_path in find_builtin_files(input_path, config.BUILTIN_FILE_GLOB):
        file_count += 1
        logger.verbose("Checking %s", file_path)
        try:
            builtins = check_file(file_path)
        except DecodeError as e:
            if stop_on_error:
                raise e
            failed_count += 1
            console.print(f"[bold red]FAIL[/] {file_path}")
            for issue in e.issues:
                console.print(f"  {issue}", markup=False)
            continue

        if not quiet_mode:
            names = ", ".join(builtin.name for builtin in builtins)
            console.print(f"[green]OK[/]   {file_path} ({names})")
        if dump:
            console.print_json(data=to_json(builtins))

    if file_count == 0:
        console.print(f"[yellow]No builtin files found in {input_path}[/]")
    elif not quiet_mode or failed_count:
        console.print(f"Checked {file_count} file(s), {failed_count} failed")
    if failed_count:
        sys.exit(1)


if __name__ == "__main__":
    check_builtins()
