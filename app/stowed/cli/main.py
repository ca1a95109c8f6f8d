"""Main CLI application entry point.

Defines the Typer application: option parsing, configuration merging
and exit codes around the deployment core.
"""

from pathlib import Path
from typing import Annotated

import typer

from stowed import __version__
from stowed.cli.display import ConsoleReporter, print_run_summary
from stowed.core.config import ConfigError, load_config, pick
from stowed.core.deploy import apply_links, load_packages, resolve_links
from stowed.core.paths import get_default_root_dir, get_default_target_dir
from stowed.models.link import RunOptions
from stowed.models.package import PackageError
from stowed.utils.formatting import err_console, print_error
from stowed.utils.log import setup_logging

EPILOG = """\
[bold]Examples:[/bold]

  Stow packages to home directory:  [dim]$ stowed nvim ghostty zsh[/dim]

  Preview changes without applying:  [dim]$ stowed -d nvim ghostty[/dim]

  Stow to a custom target directory:  [dim]$ stowed -t /custom/dir nvim[/dim]

  Remove symlinks:  [dim]$ stowed --unlink nvim ghostty[/dim]

[bold]Directory convention:[/bold]

  <package>/.config/<package>/  ->  ~/.config/<package>

  <package>/.<dotfile>  ->  ~/.<dotfile>
"""

app = typer.Typer(
    name="stowed",
    help="Create or remove symlinks for packages in a target directory.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"stowed version {__version__}")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def main(
    ctx: typer.Context,
    packages: Annotated[
        list[str] | None,
        typer.Argument(
            help="Packages to link (directory names under the root).", show_default=False
        ),
    ] = None,
    target: Annotated[
        Path | None,
        typer.Option(
            "--target",
            "-t",
            help="Target directory (defaults to home directory).",
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-r",
            help="Directory holding the packages (defaults to current directory).",
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "--dryRun", "-d", help="Preview changes without applying."),
    ] = False,
    silent: Annotated[
        bool | None,
        typer.Option("--silent", help="Suppress 'nothing to do' messages.", show_default=False),
    ] = None,
    unlink: Annotated[
        bool,
        typer.Option("--unlink", help="Remove symlinks instead of creating them."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Create or remove symlinks for packages in a target directory.

    Similar to GNU Stow, but simpler: files are linked individually,
    while directories named after the package or holding files are
    linked as a whole.
    """
    setup_logging(verbose)

    if not packages:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    options = RunOptions(
        dry_run=dry_run,
        silent=pick(silent, config.silent, False),
        unlink=unlink,
    )
    target_dir = pick(target, config.target, get_default_target_dir()).expanduser().absolute()
    root_dir = pick(root, config.root, get_default_root_dir()).expanduser().absolute()

    reporter = ConsoleReporter()
    try:
        found = load_packages(packages, root_dir)
        links = resolve_links(found, target_dir, options, reporter)
    except PackageError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    summary = apply_links(links)

    if not summary.ok:
        err_console.print("[error]Some links failed to apply.[/]")
        raise typer.Exit(code=1)

    if not options.silent:
        print_run_summary(summary, dry_run=options.dry_run)


if __name__ == "__main__":
    app()
