"""Command-line interface for the Wordle terminal game.

This is the unified CLI entry point:
- `wordle-cli wordle play` - Play an interactive game
- `wordle-cli wordle score` - Score a single guess against a secret
- `wordle-cli wordle check-words` - Validate a word list
"""

import typer
from rich.console import Console

from wordle.cli_wordle import app as wordle_app

# Main application
app = typer.Typer(
    help="Wordle - guess the five letter word in six tries",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(wordle_app, name="wordle", help="Play and score Wordle games")


@app.callback()
def main():
    """Wordle - guess the five letter word in six tries.

    Examples:

        # Play a game against a random word from the default list
        wordle-cli wordle play

        # Score a single guess
        wordle-cli wordle score world would
    """
    pass


@app.command()
def version():
    """Show version information."""
    from wordle import __version__ as wordle_version

    console.print("[bold]Wordle[/bold]")
    console.print(f"  wordle: {wordle_version}")


if __name__ == "__main__":
    app()
