"""
Game loop configuration.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Game loop configuration."""

    # Check every move against the board's empty cells before applying it
    validate_moves: bool = True

    # Reject occupied targets in occupy_cell (only reached when moves
    # are not validated by the loop)
    strict_occupancy: bool = True

    # Logging
    log_boards: bool = False
