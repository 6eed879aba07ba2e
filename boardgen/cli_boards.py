"""CLI subcommand for printing Codenames boards and spymaster keys."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from boardgen.config import BoardSettings, load_settings, make_rng
from boardgen.errors import BoardError
from boardgen.formatter import combine, render, rich_table
from boardgen.key import KeyGenerator, SpyKey
from boardgen.layout import Grid
from boardgen.sources import read_word_file, words_from_args
from boardgen.utils.logging import setup_logging
from boardgen.words import WordBoardBuilder

app = typer.Typer(help="Generate Codenames word boards and spymaster keys")
console = Console()
logger = logging.getLogger(__name__)

USAGE = (
    "Usage: boardgen boards generate [WordList] or "
    "boardgen boards generate [List of 25 words...]"
)


def _resolve_settings(
    config: Optional[Path],
    seed: Optional[int],
    pretty: Optional[bool],
    log_path: Optional[str],
    verbose: Optional[bool],
) -> BoardSettings:
    """Load settings from the config file and apply command-line overrides."""
    settings = BoardSettings()
    if config is not None:
        try:
            settings = load_settings(config)
        except BoardError as e:
            console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
            raise typer.Exit(1)
    settings = settings.merge(
        seed=seed, pretty=pretty, log_path=log_path, verbose=verbose
    )

    log_dir = Path(settings.log_path) if settings.log_path else None
    log_file = setup_logging(log_dir, settings.verbose)
    if log_file:
        logger.debug(f"Logging to {log_file}")
    return settings


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _print_board(board: Grid, pretty: bool, key_grid: Optional[Grid] = None) -> None:
    if pretty:
        console.print(rich_table(board, key_grid))
    elif key_grid is None:
        _print_plain(render(board))
    else:
        _print_plain(render(combine(board, key_grid)))


def _print_key(key: SpyKey, pretty: bool, board: Optional[Grid] = None) -> None:
    _print_plain(key.first_move_message())
    _print_plain("Key:")
    if board is None:
        _print_plain(render(key.grid))
    else:
        _print_board(board, pretty, key.grid)


@app.command()
def generate(
    words: Optional[List[str]] = typer.Argument(
        None, help="A word list file, or exactly 25 words in board order"
    ),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible boards"),
    pretty: Optional[bool] = typer.Option(
        None, "--pretty/--no-pretty", help="Print colored tables instead of plain text"
    ),
    config: Optional[Path] = typer.Option(None, help="YAML settings file"),
    log_path: Optional[str] = typer.Option(None, help="Directory for JSONL log files"),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--no-verbose", help="Enable verbose logging"
    ),
):
    """Print a shareable word board and the spymaster key.

    Give one argument to draw 25 words from a word list (CSV first column,
    one word per line, or a YAML file with a 'names' list). Give 25 words to
    use exactly those words in that order; only the key is printed then.
    """
    settings = _resolve_settings(config, seed, pretty, log_path, verbose)
    words = words or []

    if len(words) == 0 and settings.words_file:
        words = [settings.words_file]

    if len(words) not in (1, WordBoardBuilder.BOARD_SIZE):
        _print_plain(USAGE)
        raise typer.Exit(1)

    rng = make_rng(settings.seed)
    from_file = len(words) == 1

    try:
        if from_file:
            pool = read_word_file(words[0])
            board = WordBoardBuilder(rng).build(pool, shuffle=True)
        else:
            board = WordBoardBuilder(rng).build(words_from_args(words), shuffle=False)
        spy_key = KeyGenerator(rng).generate()
    except BoardError as e:
        logger.info(f"Board generation failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    if from_file:
        _print_plain("Sharable Table:")
        _print_board(board, settings.pretty)
        _print_plain("\n")

    _print_key(spy_key, settings.pretty, board)


@app.command()
def key(
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible keys"),
    config: Optional[Path] = typer.Option(None, help="YAML settings file"),
    log_path: Optional[str] = typer.Option(None, help="Directory for JSONL log files"),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--no-verbose", help="Enable verbose logging"
    ),
):
    """Print a spymaster key without words."""
    settings = _resolve_settings(config, seed, None, log_path, verbose)
    spy_key = KeyGenerator(make_rng(settings.seed)).generate()
    _print_key(spy_key, pretty=False)
