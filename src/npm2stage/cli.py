"""Command-line interface for npm2stage."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from npm2stage import __version__
from npm2stage.config import Settings
from npm2stage.exceptions import ConfigValidationError
from npm2stage.exceptions import ConfigVersionError
from npm2stage.exceptions import LeftoversError
from npm2stage.exceptions import Npm2StageError
from npm2stage.operations import get_status
from npm2stage.operations import install
from npm2stage.operations import uninstall
from npm2stage.output import exit_code_for
from npm2stage.output import print_error
from npm2stage.output import print_leftovers_advice
from npm2stage.output import print_progress
from npm2stage.output import print_success
from npm2stage.target import NpmQuery

app = typer.Typer(
    name="npm2stage",
    help="Installs, removes and inspects npm-two-stage over an npm installation.",
    no_args_is_help=True,
)

NpmPathArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to the target npm installation (default: global npm)"),
]
SilentOption = Annotated[
    bool, typer.Option("--silent", "-s", help="No console output unless error")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"npm2stage {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log details to stderr")
    ] = False,
) -> None:
    """Installs, removes and inspects npm-two-stage over an npm installation."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _load_settings() -> Settings:
    try:
        return Settings.load()
    except (ConfigValidationError, ConfigVersionError) as e:
        typer.secho(f"ERROR: Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None


def _fail(error: Exception) -> typer.Exit:
    print_error(error)
    return typer.Exit(exit_code_for(error))


@app.command("install")
def install_command(
    npm_path: NpmPathArgument = None,
    silent: SilentOption = False,
    source: Annotated[
        Path | None,
        typer.Option(help="npm-two-stage source directory to install from"),
    ] = None,
) -> None:
    """Installs npm-two-stage over npm installation at given path."""
    settings = _load_settings()
    progress = None if silent else print_progress

    typer.echo("")
    try:
        install(
            npm_path,
            source_dir=settings.resolve_source_dir(source),
            query=NpmQuery(settings.npm_command),
            progress=progress,
        )
    except LeftoversError as e:
        print_error(e)
        if not silent:
            print_leftovers_advice()
        raise typer.Exit(exit_code_for(e)) from None
    except Npm2StageError as e:
        raise _fail(e) from None

    if not silent:
        print_success("Installation of npm-two-stage was successful.")


@app.command("uninstall")
def uninstall_command(
    npm_path: NpmPathArgument = None,
    silent: SilentOption = False,
) -> None:
    """Removes all traces of npm-two-stage from npm installation at given path."""
    settings = _load_settings()
    progress = None if silent else print_progress

    typer.echo("")
    try:
        uninstall(npm_path, query=NpmQuery(settings.npm_command), progress=progress)
    except Npm2StageError as e:
        raise _fail(e) from None

    if not silent:
        print_success("Removal of npm-two-stage was successful.")


@app.command("status")
def status_command(npm_path: NpmPathArgument = None) -> None:
    """Reports the condition of npm-two-stage artifacts at given path."""
    settings = _load_settings()

    typer.echo("")
    try:
        get_status(npm_path, query=NpmQuery(settings.npm_command), progress=print_progress)
    except Npm2StageError as e:
        raise _fail(e) from None
    typer.echo("")


# Short aliases
app.command("i", hidden=True)(install_command)
app.command("un", hidden=True)(uninstall_command)


def main() -> None:
    """Main entry point for the npm2stage CLI."""
    app()


if __name__ == "__main__":
    main()
