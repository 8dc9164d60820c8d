"""Output formatting for npm2stage commands."""

import typer

from npm2stage.exceptions import Npm2StageError

ADVICE_TO_UNINSTALL = [
    "",
    "   The remains of a previous installation of npm-two-stage were found.",
    "   This complicates the current installation, so it will be aborted.",
    "   The best action to take now is to run `npm2stage uninstall` using the",
    "   same npm-two-stage version as when the previous installation was run.",
]


def print_progress(message: str) -> None:
    """Print a progress message, indented under the command."""
    typer.echo(f"   {message}")


def print_success(message: str) -> None:
    """Print the closing line of a successful command."""
    typer.echo("")
    typer.secho(f"   {message}", fg=typer.colors.GREEN, bold=True)
    typer.echo("")


def print_error(error: Exception) -> None:
    """Print an error to stderr."""
    typer.secho(f"ERROR: {error}", fg=typer.colors.RED, bold=True, err=True)


def print_leftovers_advice() -> None:
    """Tell the user how to get rid of a previous installation."""
    typer.secho("\n".join(ADVICE_TO_UNINSTALL), fg=typer.colors.YELLOW, err=True)


def exit_code_for(error: Exception) -> int:
    """Get the process exit status for an error."""
    if isinstance(error, Npm2StageError):
        return int(error.exit_code)
    return 1
