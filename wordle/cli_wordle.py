"""CLI subcommand for Wordle."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from wordle.correctness import evaluate
from wordle.dictionary import DEFAULT_WORDS_FILE, DictionaryError, choose_secret, load_words, word_statistics
from wordle.exceptions import WordleError
from wordle.game import Game, State
from wordle.guess import ScoredGuess
from wordle.render import render_guess
from wordle.session import PlaySession
from wordle.utils.logging import setup_logging

app = typer.Typer(help="Play Wordle in the terminal", no_args_is_help=True)
console = Console()


def _load_words_or_exit(words_file: str):
    try:
        return load_words(words_file)
    except DictionaryError as e:
        console.print(f"[red]Error loading word list: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def play(
    words_file: str = typer.Option(DEFAULT_WORDS_FILE, help="Path to words YAML file"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible secret selection"),
    secret: Optional[str] = typer.Option(None, hidden=True, help="Play against a fixed secret word"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="Only accept guesses from the word list"),
    log_path: str = typer.Option("logs/wordle", help="Directory for log files"),
    quiet: bool = typer.Option(False, help="Do not redraw the board after each guess"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play an interactive game of Wordle.

    Guess the five letter word in six tries. Green letters are in the
    right spot, yellow letters are in the word but elsewhere.
    """
    setup_logging(Path(log_path), verbose)
    logger = logging.getLogger(__name__)

    words = None
    if secret is None or strict:
        words = _load_words_or_exit(words_file)

    if secret is not None:
        secret = secret.strip().lower()
        if strict and secret not in words:
            console.print(f"[red]Invalid secret: '{secret}' is not in the word list (use --no-strict)[/red]")
            raise typer.Exit(1)

    try:
        game = Game(secret if secret is not None else choose_secret(words, seed))
    except WordleError as e:
        console.print(f"[red]Invalid secret: {e}[/red]")
        raise typer.Exit(1)

    if seed is not None:
        logger.info(f"Random seed set to: {seed}")

    session = PlaySession(game, console=console, dictionary=words if strict else None, quiet=quiet)
    final_state = session.run()
    logger.info(f"Session finished: {final_state.value} after {len(game.history)} guesses")

    if final_state is not State.WON:
        raise typer.Exit(1)


@app.command()
def score(
    secret: str = typer.Argument(..., help="The secret word"),
    guess: str = typer.Argument(..., help="The guessed word"),
):
    """Score one guess against a secret and print the pattern."""
    try:
        result = evaluate(secret.strip().lower(), guess.strip().lower())
    except WordleError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    scored = ScoredGuess(word=guess.strip().lower(), result=result)
    console.print(render_guess(scored))
    console.print(scored.pattern)


@app.command(name="check-words")
def check_words(
    words_file: str = typer.Option(DEFAULT_WORDS_FILE, help="Path to words YAML file"),
):
    """Validate a word list and show statistics."""
    words = _load_words_or_exit(words_file)
    stats = word_statistics(words)

    table = Table(title=f"Word list: {words_file}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total words", str(stats["total_words"]))
    table.add_row("Avg vowels", str(stats["avg_vowel_count"]))
    table.add_row("Words with repeated letters", str(stats["words_with_repeats"]))
    table.add_row(
        "Most common letters",
        ", ".join(f"{letter.upper()}={count}" for letter, count in stats["most_common_letters"]),
    )
    console.print(table)
