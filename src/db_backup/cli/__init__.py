"""CLI module for running database backups.

Usage:
    db-backup run
    db-backup run --only-db --prefix nightly-
    db-backup backup:run --suffix=-manual
    db-backup --config /etc/db-backup/backup.toml destinations

Commands:
    run           - Dump databases, zip them and copy the zip to every destination
    destinations  - List configured destinations
"""

import argparse
import asyncio
import signal
import sys

from rich.console import Console
from rich.table import Table

from db_backup.backup.models import BackupReport, RunOptions
from db_backup.backup.runner import run_backup
from db_backup.config.loader import load_backup_config
from db_backup.errors import BackupCancelled, BackupError
from db_backup.log import configure_logging

console = Console()


# ============================================================================
# Output helpers
# ============================================================================


def _print_results(report: BackupReport) -> None:
    """Render per-destination results as a table."""
    table = Table(title="Destinations", show_header=True, header_style="bold")
    table.add_column("Destination")
    table.add_column("File", style="dim")
    table.add_column("Result")

    for result in report.results:
        table.add_row(
            result.destination,
            result.path,
            "[green]stored[/green]" if result.success else f"[red]{result.error}[/red]",
        )

    console.print(table)


# ============================================================================
# Async command implementations
# ============================================================================


async def _async_run(args: argparse.Namespace) -> int:
    """Async implementation for run command.

    Args:
        args: Parsed arguments with config, only_db, only_files, prefix
            and suffix.

    Returns:
        0 on success or nothing to back up, 1 on failure.
    """
    try:
        config = load_backup_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    options = RunOptions(
        only_db=args.only_db,
        only_files=args.only_files,
        prefix=args.prefix,
        suffix=args.suffix,
    )

    # Stop before the next dump/upload on Ctrl-C or SIGTERM; temp files are still removed
    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, cancel_event.set)
        except (NotImplementedError, RuntimeError):
            # Not supported on this platform/thread: KeyboardInterrupt still unwinds cleanup
            pass

    try:
        report = await run_backup(config, options, cancel_event=cancel_event)
    except BackupCancelled as e:
        console.print(f"[bold yellow]![/bold yellow] {e}")
        return 1
    except BackupError as e:
        console.print(f"[bold red]x[/bold red] Backup failed: {e}")
        return 1

    if report.status == "nothing_to_backup":
        console.print("[yellow]Nothing to back up.[/yellow]")
        return 0

    console.print()
    _print_results(report)

    if report.success:
        console.print(
            f"[bold green]v[/bold green] Backup successfully completed: "
            f"[bold cyan]{report.filename}[/bold cyan] "
            f"[dim]({report.archive_size} bytes, {len(report.entries)} files)[/dim]"
        )
        return 0

    console.print(
        f"[bold red]x[/bold red] Backup could not be stored on: "
        f"{', '.join(report.failed_destinations)}"
    )
    return 1


# ============================================================================
# Command wrappers
# ============================================================================


def cmd_run(args: argparse.Namespace) -> int:
    """Run a backup.

    Wraps the async implementation with ``asyncio.run()``.

    Args:
        args: Parsed CLI arguments.

    Returns:
        0 on success, 1 on failure.
    """
    return asyncio.run(_async_run(args))


def cmd_destinations(args: argparse.Namespace) -> int:
    """List configured destinations.

    Reads only local TOML config -- no storage calls.

    Args:
        args: Parsed CLI arguments.

    Returns:
        0 on success, 1 if the config cannot be loaded.
    """
    try:
        config = load_backup_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if not config.destinations:
        console.print("[yellow]No destinations configured.[/yellow]")
        return 0

    table = Table(title="Backup Destinations", show_header=True, header_style="bold")
    table.add_column("Destination")
    table.add_column("Driver")
    table.add_column("Location")
    table.add_column("Marker file", justify="center")

    for name in config.destinations:
        disk = config.disks[name]
        location = disk.root if disk.driver == "local" else f"s3://{disk.bucket}"
        table.add_row(
            f"[bold cyan]{name}[/bold cyan]",
            disk.driver,
            location,
            "yes" if disk.marker_file else "-",
        )

    console.print(table)

    if config.path:
        console.print(f"\n[dim]Base path:[/dim] {config.path}")

    return 0


# ============================================================================
# Main entry point
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``db-backup`` program."""
    parser = argparse.ArgumentParser(
        prog="db-backup",
        description="Dump databases into a zip and copy it to storage destinations",
    )

    # Global options
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to backup.toml (default: $DB_BACKUP_CONFIG or ./backup.toml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # run command
    p_run = subparsers.add_parser(
        "run",
        aliases=["backup:run"],
        help="Run the backup",
    )
    p_run.add_argument(
        "--only-db",
        action="store_true",
        help="Only backup the database.",
    )
    p_run.add_argument(
        "--only-files",
        action="store_true",
        help="Only backup the files.",
    )
    p_run.add_argument(
        "--prefix",
        default=None,
        help=(
            "The name of the zip file will get prefixed with this string. "
            "Use --prefix=VALUE when VALUE starts with '-'."
        ),
    )
    p_run.add_argument(
        "--suffix",
        default=None,
        help=(
            "The name of the zip file will get suffixed with this string. "
            "Use --suffix=VALUE when VALUE starts with '-'."
        ),
    )
    p_run.set_defaults(func=cmd_run)

    # destinations command
    p_destinations = subparsers.add_parser(
        "destinations",
        help="List configured destinations",
    )
    p_destinations.set_defaults(func=cmd_destinations)

    return parser


def main() -> int:
    """Main CLI entry point.

    Parses command line arguments and dispatches to appropriate handler.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = build_parser().parse_args()
    configure_logging(verbose=args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
