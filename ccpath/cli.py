"""CLI entrypoints."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ccpath.errors import UnsupportedConventionError
from ccpath.models.convention import Convention
from ccpath.models.rename import ConversionRequest, RenameMode, RenameOutcome, RenameStatus
from ccpath.processors.tree_renamer import TreeRenamer


ENVVAR_PREFIX = "CCPATH"

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


class ConventionType(click.ParamType):
    """Click parameter type accepting a naming convention token."""

    name = "CONVENTION"

    def convert(self, value, param, ctx) -> Convention:
        if isinstance(value, Convention):
            return value
        try:
            return Convention.parse(value)
        except UnsupportedConventionError as e:
            self.fail(str(e), param, ctx)


def _conventions_epilog() -> str:
    lines = ["\b", "Supported naming conventions:"]
    lines.extend(f"  {convention.token:<6} {convention.example}" for convention in Convention)
    return "\n".join(lines)


def _print_outcome(outcome: RenameOutcome, verbose: bool) -> None:
    """Report a single outcome. Successful renames are silent unless verbose."""
    if outcome.status is RenameStatus.FAILED:
        err_console.print(f"[bold red]Error:[/bold red] {escape(outcome.error or '')}", highlight=False)
    elif outcome.status is RenameStatus.SKIPPED_EXISTS:
        err_console.print(
            f"[yellow]Skipped:[/yellow] '{escape(str(outcome.source))}' -> "
            f"'{escape(str(outcome.destination))}' (destination already exists)",
            highlight=False,
        )
    elif outcome.status is RenameStatus.DRY_RUN or (verbose and outcome.plan is not None):
        console.print(str(outcome.plan), markup=False, highlight=False)


@click.command(context_settings=dict(show_default=True), epilog=_conventions_epilog())
@click.argument("into", metavar="CONVENTION", type=ConventionType())
@click.argument("paths", type=click.Path(exists=True, path_type=Path), nargs=-1, required=True)
@click.option("-r", "--recursive", is_flag=True, default=False, help="Recurse into directories.")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show the operations that would be performed without doing them.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Print a message for every converted path.")
@click.option("-b", "--basename", is_flag=True, default=False, help="Only convert the basename of each path.")
@click.option("-F", "--full-path", is_flag=True, default=False, help="Convert all components of each path.")
@click.option(
    "-P",
    "--prefix",
    type=click.Path(path_type=Path),
    default=None,
    help="Path prefix excluded from conversion with --full-path, otherwise ignored.",
)
@click.option(
    "-n",
    "--no-clobber",
    is_flag=True,
    default=False,
    help="Do not overwrite existing files.",
)
@click.option(
    "-f",
    "--from",
    "from_convention",
    type=ConventionType(),
    default=None,
    help="Current naming convention, if known. Improves conversion accuracy.",
)
def cli(
    into: Convention,
    paths: tuple[Path, ...],
    recursive: bool,
    dry_run: bool,
    verbose: bool,
    basename: bool,
    full_path: bool,
    prefix: Path | None,
    no_clobber: bool,
    from_convention: Convention | None,
) -> None:
    """Convert the naming convention of PATHS to CONVENTION.

    Examples:

        ccpath snake "Some File.jpg"

        ccpath --full-path --prefix /data kebab /data/My Photos/Summer Trip

        ccpath -r --from CAMEL snake src/
    """
    if basename and full_path:
        raise click.UsageError("--basename and --full-path cannot be used together.")

    mode = RenameMode.FULL_PATH if full_path else RenameMode.BASENAME
    if prefix is not None and mode is not RenameMode.FULL_PATH:
        err_console.print("[yellow]Warning:[/yellow] --prefix is ignored without --full-path.")
    if recursive and mode is RenameMode.FULL_PATH:
        err_console.print("[yellow]Warning:[/yellow] --recursive converts only the basename of each entry.")

    request = ConversionRequest(from_convention=from_convention, to_convention=into)
    renamer = TreeRenamer(
        request=request,
        mode=mode,
        prefix=prefix,
        no_clobber=no_clobber,
        dry_run=dry_run,
        on_outcome=lambda outcome: _print_outcome(outcome, verbose),
    )

    outcomes = renamer.run(paths, recursive=recursive)

    failures = sum(1 for outcome in outcomes if outcome.failed)
    if verbose:
        renamed = sum(1 for outcome in outcomes if outcome.status is RenameStatus.RENAMED)
        skipped = sum(1 for outcome in outcomes if outcome.status is RenameStatus.SKIPPED_EXISTS)
        console.print(
            f"[bold]Done.[/bold] Renamed [cyan]{renamed}[/cyan], skipped [cyan]{skipped}[/cyan], "
            f"failed [cyan]{failures}[/cyan]."
        )

    if failures:
        raise SystemExit(1)


def main() -> None:
    """Console script entrypoint, reading option defaults from CCPATH_* variables."""
    cli(auto_envvar_prefix=ENVVAR_PREFIX)
