"""CLI entrypoint."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from hashstrip.models.rename import DEFAULT_PREFIX_LENGTH, RunConfig
from hashstrip.processors.batch_renamer import BatchRenamer
from hashstrip.processors.directory_collector import collect_directories


console = Console()


@click.command(context_settings=dict(show_default=True))
@click.version_option(package_name="hashstrip")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-p",
    "--prefix-length",
    type=click.IntRange(min=0),
    default=None,
    help=f"The length of the prefix to remove.  [default: {DEFAULT_PREFIX_LENGTH}]",
)
@click.option("-r", "--recursive", is_flag=True, default=False, help="Recursively traverse directories.")
@click.option(
    "-n",
    "--no-append",
    is_flag=True,
    default=False,
    help="Don't prepend the parent directory name to the file name.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Print every rename.")
def cli(
    directory: Path,
    prefix_length: int | None,
    recursive: bool,
    no_append: bool,
    verbose: bool,
) -> None:
    """Remove the hash from the front of exported XML files in DIRECTORY.

    By default the parent directory name replaces the hash, so
    sites/C6A91478B2AF28F550DD3B128D5D2886_test_1.xml becomes
    sites/sites_test_1.xml.

    Examples:

        hashstrip exports/sites

        hashstrip -r -n -p 33 exports
    """
    config = RunConfig(
        directory=directory,
        prefix_length=prefix_length,
        recursive=recursive,
        append_parent=not no_append,
        verbose=verbose,
    )

    try:
        directories = collect_directories(config.directory, recursive=config.recursive)
        renamer = BatchRenamer(
            prefix_length=config.effective_prefix_length,
            append_parent=config.append_parent,
            verbose=config.verbose,
        )
        result = renamer.rename_all(directories)
    except (IndexError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    console.print(f"[bold green]Renamed {len(result)} file(s).[/bold green]")
