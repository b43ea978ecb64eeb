import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ignorewalk.processor.collector import DEFAULT_IGNORE_FILE, collect_patterns, is_path_excluded, walk

app = typer.Typer(
    name="ignorewalk",
    help="List the files a gitignore-aware tool would see, honoring nested ignore files",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

IgnoreFileOption = Annotated[
    str,
    typer.Option("--ignore-file", "-i", envvar="IGNOREWALK_IGNORE_FILE", help="Name of the per-directory ignore file"),
]


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_root(root: Path) -> Path:
    resolved = root.resolve()
    if not resolved.is_dir():
        err_console.print(f"[red]Error:[/red] {escape(str(resolved))} is not a directory")
        raise typer.Exit(1)
    return resolved


@app.command(name="ls", help="List every file not excluded by an ignore file")
def list_files(
    root: Annotated[Path, typer.Argument(help="Directory to walk")] = Path("."),
    ignore_file: IgnoreFileOption = DEFAULT_IGNORE_FILE,
    sort: Annotated[bool, typer.Option("--sort", "-s", help="Sort output alphabetically")] = False,
    count: Annotated[bool, typer.Option("--count", "-c", help="Print only the number of files")] = False,
) -> None:
    resolved = _resolve_root(root)
    try:
        files = walk(resolved, ignore_file)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if count:
        console.print(str(len(files)), highlight=False)
        return

    for path in sorted(files) if sort else files:
        console.print(path, markup=False, highlight=False, soft_wrap=True)


@app.command(help="Show how a directory's ignore file is rewritten relative to the root")
def patterns(
    root: Annotated[Path, typer.Argument(help="Walk root")] = Path("."),
    directory: Annotated[str, typer.Option("--dir", "-d", help="Directory relative to root")] = "",
    ignore_file: IgnoreFileOption = DEFAULT_IGNORE_FILE,
) -> None:
    resolved = _resolve_root(root)
    try:
        described = collect_patterns(resolved, directory, ignore_file)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not described:
        console.print(f"[dim]No patterns in {escape(directory or '.')}/{escape(ignore_file)}[/dim]")
        return

    table = Table(title=escape(f"{directory or '.'}/{ignore_file}"))
    table.add_column("Line", style="cyan")
    table.add_column("Scope", style="dim")
    table.add_column("Root-relative", style="green")

    for pattern, adapted in described:
        table.add_row(pattern.raw, pattern.scope.value, "\n".join(adapted))

    console.print(table)


@app.command(help="Report whether paths are excluded from the walk")
def check(
    root: Annotated[Path, typer.Argument(help="Walk root")],
    paths: Annotated[list[str], typer.Argument(help="Paths relative to root")],
    ignore_file: IgnoreFileOption = DEFAULT_IGNORE_FILE,
) -> None:
    resolved = _resolve_root(root)
    any_excluded = False

    for path in paths:
        try:
            excluded = is_path_excluded(resolved, path, ignore_file)
        except ValueError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        any_excluded = any_excluded or excluded
        if excluded:
            console.print(f"[red]excluded[/red]  {escape(path)}", highlight=False)
        else:
            console.print(f"[green]included[/green]  {escape(path)}", highlight=False)

    if any_excluded:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
