"""Spymaster key generation."""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from boardgen.assigner import assign
from boardgen.layout import EMPTY, Grid, cell_count, create_empty

logger = logging.getLogger(__name__)


class TeamMarker(str, Enum):
    """Identity of a key tile, stored as its printed code."""
    BLUE = "B"
    RED = "R"
    ASSASSIN = "X"
    UNASSIGNED = ""

    @property
    def label(self) -> str:
        return self.name.title()

    def other(self) -> "TeamMarker":
        """Return the opposing team."""
        if self is TeamMarker.BLUE:
            return TeamMarker.RED
        if self is TeamMarker.RED:
            return TeamMarker.BLUE
        raise ValueError(f"{self.label} is not a team")


TEAMS = (TeamMarker.BLUE, TeamMarker.RED)


@dataclass
class SpyKey:
    """A generated key board and the team that moves first."""
    grid: Grid
    starting_team: TeamMarker

    def count(self, marker: TeamMarker) -> int:
        return cell_count(self.grid, marker)

    def first_move_message(self) -> str:
        return f"{self.starting_team.label} plays first"


class KeyGenerator:
    """Builds the secret team assignment for a 5x5 board."""

    BOARD_SIDE = 5
    STARTING_TEAM_AGENTS = 9  # Team that goes first gets 9
    SECOND_TEAM_AGENTS = 8    # Team that goes second gets 8
    ASSASSINS = 1

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def generate(self) -> SpyKey:
        """Generate a key board.

        The starting team is a coin flip and receives one extra tile. Tiles
        left over after the assassin is placed stay unassigned.
        """
        starting_team = self.rng.choice(TEAMS)
        second_team = starting_team.other()

        grid = create_empty(self.BOARD_SIDE)
        assign(grid, starting_team, self.STARTING_TEAM_AGENTS, self.rng)
        assign(grid, second_team, self.SECOND_TEAM_AGENTS, self.rng)
        assign(grid, TeamMarker.ASSASSIN, self.ASSASSINS, self.rng)

        for row in grid:
            for col, cell in enumerate(row):
                if cell == EMPTY:
                    row[col] = TeamMarker.UNASSIGNED

        key = SpyKey(grid=grid, starting_team=starting_team)
        logger.info(
            f"Key generated. Starting team: {starting_team.label.upper()}. "
            f"{starting_team.label}: {key.count(starting_team)}, "
            f"{second_team.label}: {key.count(second_team)}, "
            f"Unassigned: {key.count(TeamMarker.UNASSIGNED)}, Assassin: {key.count(TeamMarker.ASSASSIN)}"
        )
        return key
