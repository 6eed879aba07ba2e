"""Text rendering for word boards and spymaster keys."""

from typing import Optional, Union

from rich.markup import escape
from rich.table import Table

from boardgen.key import TeamMarker
from boardgen.layout import Grid

# Rich styles per key identity, matching the in-game board colors
MARKER_STYLES = {
    TeamMarker.BLUE: "blue",
    TeamMarker.RED: "red",
    TeamMarker.ASSASSIN: "black on white",
    TeamMarker.UNASSIGNED: "dim",
}


def _cell_text(cell: Union[str, TeamMarker]) -> str:
    if isinstance(cell, TeamMarker):
        return cell.value
    return cell


def longest_cell_length(grid: Grid) -> int:
    """Length of the longest cell, or -1 for a grid without cells."""
    longest = -1
    for row in grid:
        for cell in row:
            longest = max(longest, len(_cell_text(cell)))
    return longest


def format_cell(word: str, marker: Union[str, TeamMarker]) -> str:
    """Annotate a word with its key code, e.g. ``"Piano (B)"``."""
    code = _cell_text(marker).strip()
    if not code:
        return word
    return f"{word} ({code})"


def combine(word_grid: Grid, key_grid: Grid) -> Grid:
    """Merge a word board with its key into an annotated board."""
    if [len(row) for row in word_grid] != [len(row) for row in key_grid]:
        raise ValueError("Word board and key must have the same shape")
    return [
        [format_cell(word, marker) for word, marker in zip(word_row, key_row)]
        for word_row, key_row in zip(word_grid, key_grid)
    ]


def render(grid: Grid) -> str:
    """Render a grid as a pipe-delimited table padded to the longest cell.

    Each row reads ``"| " + cells joined by " | " + "| "``.
    """
    width = longest_cell_length(grid)
    lines = []
    for row in grid:
        cells = [_cell_text(cell).ljust(width) for cell in row]
        lines.append("| " + " | ".join(cells) + "| ")
    return "\n".join(lines)


def rich_table(word_grid: Grid, key_grid: Optional[Grid] = None) -> Table:
    """Build a colored rich table of the board.

    Without a key every word is shown plain. With a key each word is
    colored by its identity and the key code is appended.
    """
    table = Table(show_header=False, show_lines=True)
    for _ in word_grid[0] if word_grid else []:
        table.add_column(justify="center", min_width=12)

    for r, word_row in enumerate(word_grid):
        row_items = []
        for c, word in enumerate(word_row):
            if key_grid is None:
                row_items.append(f"[white]{escape(word)}[/white]")
                continue
            marker = TeamMarker(_cell_text(key_grid[r][c]))
            color = MARKER_STYLES[marker]
            row_items.append(f"[{color}]{escape(format_cell(word, marker))}[/{color}]")
        table.add_row(*row_items)

    return table
