"""Command-line interface for boardgen - Codenames board generator.

Subcommands:
- `boardgen boards generate` - Print a word board and its spymaster key
- `boardgen boards key` - Print a spymaster key only
"""

import typer
from rich.console import Console

from boardgen.cli_boards import app as boards_app

# Main application
app = typer.Typer(
    help="boardgen - printable Codenames boards and spymaster keys",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(boards_app, name="boards", help="Generate word boards and spymaster keys")


@app.callback()
def main():
    """boardgen - printable Codenames boards and spymaster keys.

    Examples:

        # Draw 25 words from a word list
        boardgen boards generate inputs/names.yaml

        # Use exactly these 25 words, in this order
        boardgen boards generate ALPHA BRAVO ... YANKEE

        # Print a key for a physical word card layout
        boardgen boards key --seed 7
    """
    pass


@app.command()
def version():
    """Show version information."""
    from boardgen import __version__

    console.print("[bold]boardgen[/bold]")
    console.print(f"  boardgen: {__version__}")


if __name__ == "__main__":
    app()
