#!/usr/bin/env python3
"""Ejectd CLI - interactive safe removal of external drives."""
import logging
import time
from typing import Callable, Optional

import typer
from rich.console import Console

from ejectd import __version__
from ejectd.cli_display import (
    render_catalog,
    render_header,
    render_no_drives,
    render_options,
)
from ejectd.cli_support import (
    MenuAction,
    ReadLine,
    console_reader,
    handle_cli_error,
    parse_choice,
    print_error,
    print_warning,
)
from ejectd.core.config import get_config
from ejectd.core.ejector import Ejector
from ejectd.core.errors import ConfigError
from ejectd.core.executor import make_runner
from ejectd.core.logger import console, get_logger, set_console_level, setup_file_logging
from ejectd.discovery.catalog import DriveCatalog

app = typer.Typer(
    name="ejectd",
    add_completion=False,
)

logger = get_logger(__name__)


def run_menu(
    catalog: DriveCatalog,
    ejector: Ejector,
    out: Console,
    read_line: ReadLine,
    pause: Callable[[], None],
) -> int:
    """Run the interactive menu until the operator quits.

    The catalog is rebuilt at the top of every pass, so the listing is fresh
    after an eject, a refresh and an invalid choice alike.

    Returns:
        Exit code: 0 on quit or end of input, 1 when no drives are found
    """
    while True:
        drives = catalog.build()

        out.clear()
        out.print(render_header())

        if not drives:
            out.print(render_no_drives())
            read_line("Press Enter to exit...")
            return 1

        out.print(render_catalog(drives))
        out.print(render_options(len(drives)))

        raw = read_line("[bold green]Your choice: [/bold green]")
        if raw is None:
            return 0

        choice = parse_choice(raw, len(drives))

        if choice.action is MenuAction.QUIT:
            out.print("\n[cyan]Goodbye![/cyan]")
            return 0

        if choice.action is MenuAction.REFRESH:
            continue

        if choice.action is MenuAction.INVALID:
            logger.debug(f"Invalid menu input: {raw!r}")
            out.print()
            print_error(out, "Invalid selection.")
            pause()
            continue

        selected = drives[choice.index]
        out.clear()
        out.print(render_header())
        report = ejector.eject(selected.device_path)
        logger.info(f"Eject {selected.device_path}: {report.outcome.value}")
        read_line("Press Enter to continue...")


def _version_callback(value: bool):
    if value:
        console.print(f"ejectd {__version__}")
        raise typer.Exit()


@app.command()
def interactive(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write a log file"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Ejectd - External Drive Ejector

    Lists external drives, then unmounts and powers off the one you pick.
    Menu keys: 1-N ejects that drive, r refreshes the list, q quits.
    """
    set_console_level(logging.DEBUG if verbose else logging.WARNING)
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        config = get_config()
    except ConfigError as e:
        handle_cli_error(e, console, verbose=verbose)

    run_cmd = make_runner(config.command_timeout)
    catalog = DriveCatalog(run_cmd=run_cmd, config=config)
    ejector = Ejector(run_cmd=run_cmd, config=config, console=console)

    try:
        code = run_menu(
            catalog,
            ejector,
            console,
            console_reader(console),
            lambda: time.sleep(config.invalid_pause),
        )
    except KeyboardInterrupt:
        console.print()
        print_warning(console, "Aborted.")
        raise typer.Exit(1)

    raise typer.Exit(code)


def main():
    app()


if __name__ == "__main__":
    main()
