"""
Immutable board model.

Board representation: tuple of 9 Cells in row-major order
  - cell i always carries CellReference(i)
  - occupant: the Player placed in the cell, or None

Every operation returns a new Board; a Board held by a caller never changes.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .errors import BoardError, BoardParseError, CellIndexError, CellOccupiedError

if TYPE_CHECKING:
    from .player import Player

BOARD_SIZE = 3


@dataclass(frozen=True, order=True)
class CellReference:
    """Handle to one board position."""
    index: int


@dataclass(frozen=True)
class Cell:
    """A board position and its occupant, if any."""
    reference: CellReference
    occupant: Optional["Player"] = None

    @property
    def marker(self) -> Optional[str]:
        return self.occupant.get_marker() if self.occupant is not None else None

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


# One winnable line: `size` cells
Segment = Tuple[Cell, ...]


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of board occupancy."""
    cells: Tuple[Cell, ...]
    size: int = BOARD_SIZE

    def __post_init__(self):
        if len(self.cells) != self.size * self.size:
            raise BoardError(
                f"expected {self.size * self.size} cells, got {len(self.cells)}",
                context={"size": self.size},
            )
        for i, cell in enumerate(self.cells):
            if cell.reference.index != i:
                raise BoardError(
                    f"cell at position {i} carries reference {cell.reference.index}",
                    context={"position": i},
                )


def empty_board() -> Board:
    """Return a 3x3 board with every cell unoccupied."""
    return Board(
        cells=tuple(Cell(CellReference(i)) for i in range(BOARD_SIZE * BOARD_SIZE)),
        size=BOARD_SIZE,
    )


def cells(board: Board) -> Tuple[Cell, ...]:
    """All cells in index order."""
    return board.cells


def empty_cells(board: Board) -> List[CellReference]:
    """Return references of unoccupied cells in ascending index order."""
    return [c.reference for c in board.cells if c.occupant is None]


def is_full(board: Board) -> bool:
    return not empty_cells(board)


def cell_at(board: Board, reference: CellReference) -> Cell:
    """Return the cell for a reference, raising CellIndexError if off the board."""
    if not 0 <= reference.index < len(board.cells):
        raise CellIndexError(reference.index, len(board.cells))
    return board.cells[reference.index]


def segments(board: Board) -> List[Segment]:
    """
    Build every winnable line.

    Order: row 0, column 0, row 1, column 1, row 2, column 2,
    main diagonal, anti-diagonal.
    """
    n = board.size
    lines: List[Segment] = []
    first_diagonal = []
    second_diagonal = []
    for r in range(n):
        lines.append(tuple(board.cells[r * n + c] for c in range(n)))
        lines.append(tuple(board.cells[r + c * n] for c in range(n)))
        first_diagonal.append(board.cells[r * n + r])
        second_diagonal.append(board.cells[r * n + (n - r - 1)])
    lines.append(tuple(first_diagonal))
    lines.append(tuple(second_diagonal))
    return lines


def occupy_cell(
    board: Board,
    occupant: "Player",
    reference: CellReference,
    strict: bool = True,
) -> Board:
    """
    Place occupant at reference and return the new board.

    Args:
        board: Current board (left untouched)
        occupant: Player taking the cell
        reference: Target cell
        strict: If True, refuse to overwrite an occupied cell

    Raises:
        CellIndexError: reference is off the board
        CellOccupiedError: strict and the cell already has an occupant
    """
    current = cell_at(board, reference)
    if strict and current.occupant is not None:
        raise CellOccupiedError(reference.index, current.marker)

    new_cells = list(board.cells)
    new_cells[reference.index] = Cell(CellReference(reference.index), occupant)
    return Board(cells=tuple(new_cells), size=board.size)


def board_from_string(players: Iterable["Player"], text: str, empty: str = "-") -> Board:
    """
    Build a board from whitespace-separated markers in row-major order.

    A token matching a player's marker places that player; any other token
    (conventionally `empty`) leaves the cell unoccupied.
    """
    by_marker = {p.get_marker(): p for p in players}
    tokens = text.split()
    expected = BOARD_SIZE * BOARD_SIZE
    if len(tokens) != expected:
        raise BoardParseError(
            f"expected {expected} cells, got {len(tokens)}",
            context={"text": text.strip()},
        )
    return Board(
        cells=tuple(
            Cell(CellReference(i), by_marker.get(token) if token != empty else None)
            for i, token in enumerate(tokens)
        ),
        size=BOARD_SIZE,
    )


def format_board(board: Board, empty: str = "-") -> str:
    """Markers in index order joined by spaces, `empty` for open cells."""
    return " ".join(c.marker or empty for c in board.cells)
