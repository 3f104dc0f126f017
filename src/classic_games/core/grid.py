"""
2048 grid engine: slide, merge, spawn and classify.

Every directional move is reduced to a single compress-left primitive by
rotating and transposing the grid around it. All functions are pure: they
allocate new arrays and never write into the grid they are given.

Grids are ``int64`` arrays of shape (4, 4):
    0     = empty cell
    2^k   = tile (k >= 1)
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

import numpy as np
from numpy.random import Generator, default_rng

from classic_games.core.errors import InvalidDirectionError
from classic_games.core.types import (
    GRID_SIZE,
    TILE_SPAWN_PROBS,
    WINNING_TILE,
    Direction,
    GameStatus,
    MoveOutcome,
)

# Pre-computed tile values and probabilities for sampling
_TILE_VALUES = list(TILE_SPAWN_PROBS.keys())
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

_DIRECTION_NAMES = ", ".join(d.value for d in Direction)


# ---------------------------------------------------------------------------
# Grid construction and validation
# ---------------------------------------------------------------------------

def new_grid() -> np.ndarray:
    """Return an empty 4x4 grid."""
    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int64)


def as_grid(values) -> np.ndarray:
    """Copy any 4x4 nested sequence into a fresh int64 grid."""
    grid = np.array(values, dtype=np.int64)
    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {grid.shape}")
    return grid


def parse_direction(direction: Union[Direction, str]) -> Direction:
    """
    Normalize a direction argument.

    Accepts a Direction member or its string value ("up", "down", ...).
    Anything else raises InvalidDirectionError.
    """
    if isinstance(direction, Direction):
        return direction
    if not isinstance(direction, str) or not direction.strip():
        raise InvalidDirectionError(
            "Invalid direction: direction must be a non-empty string"
        )
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidDirectionError(
            f'Invalid direction: "{direction}". Valid directions are: {_DIRECTION_NAMES}'
        ) from None


# ---------------------------------------------------------------------------
# Geometric transforms
# ---------------------------------------------------------------------------

def rotate_clockwise(grid: np.ndarray) -> np.ndarray:
    """Rotate 90 degrees clockwise: cell (i, j) moves to (j, n - 1 - i)."""
    return np.rot90(grid, k=-1).copy()


def rotate_180(grid: np.ndarray) -> np.ndarray:
    return rotate_clockwise(rotate_clockwise(grid))


def transpose(grid: np.ndarray) -> np.ndarray:
    """Swap row and column indices. The result never shares memory with the input."""
    return grid.T.copy()


# ---------------------------------------------------------------------------
# Compress-left
# ---------------------------------------------------------------------------

def compress_row(row: np.ndarray) -> Tuple[int, np.ndarray]:
    """
    Slide one row to the left and merge equal neighbours.

    Args:
        row: 1D array of cell values.

    Returns:
        (points, new_row) where points is the sum of the *new* values of
        every merged tile and new_row has the same length as row.

    Merging is a single left-to-right pass: a tile produced by a merge is
    never merged again within the same call, so [2, 2, 2, 2] becomes
    [4, 4, 0, 0] (8 points), not [8, 0, 0, 0].
    """
    tiles = [int(v) for v in row if v != 0]
    merged: List[int] = []
    points = 0

    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = tiles[i] * 2
            merged.append(value)
            points += value
            i += 2
        else:
            merged.append(tiles[i])
            i += 1

    result = np.zeros(len(row), dtype=np.int64)
    result[: len(merged)] = merged
    return points, result


def compress_left(grid: np.ndarray) -> Tuple[int, np.ndarray]:
    """Apply compress_row to every row independently."""
    result = np.zeros_like(grid, dtype=np.int64)
    points = 0

    for i, row in enumerate(grid):
        row_points, result[i] = compress_row(row)
        points += row_points

    return points, result


# ---------------------------------------------------------------------------
# Directional move
# ---------------------------------------------------------------------------

def _slide(grid: np.ndarray, direction: Direction) -> Tuple[int, np.ndarray]:
    if direction is Direction.LEFT:
        return compress_left(grid)

    if direction is Direction.RIGHT:
        points, moved = compress_left(rotate_180(grid))
        return points, rotate_180(moved)

    if direction is Direction.UP:
        points, moved = compress_left(transpose(grid))
        return points, transpose(moved)

    # Down
    points, moved = compress_left(rotate_180(transpose(grid)))
    return points, transpose(rotate_180(moved))


def move(grid: np.ndarray, direction: Union[Direction, str]) -> MoveOutcome:
    """
    Slide and merge the whole grid in one direction.

    Args:
        grid: Current 4x4 grid. Not modified.
        direction: Direction member or "up"/"down"/"left"/"right".

    Returns:
        MoveOutcome(new_grid, moved, points_scored). When nothing slid or
        merged, moved is False, points_scored is 0 and new_grid equals grid
        cell-wise (but is still a separate array).

    Raises:
        InvalidDirectionError: direction is not one of the four values.
    """
    direction = parse_direction(direction)
    points, new = _slide(np.asarray(grid, dtype=np.int64), direction)

    if np.array_equal(new, grid):
        return MoveOutcome(new, False, 0)
    return MoveOutcome(new, True, int(points))


def legal_directions(grid: np.ndarray) -> List[Direction]:
    """Directions that would change the grid, in Direction declaration order."""
    return [d for d in Direction if move(grid, d).moved]


# ---------------------------------------------------------------------------
# Tile spawning
# ---------------------------------------------------------------------------

def empty_cells(grid: np.ndarray) -> List[Tuple[int, int]]:
    """Positions (row, col) of empty cells in row-major order."""
    return [(int(r), int(c)) for r, c in np.argwhere(grid == 0)]


def spawn_tiles(
    grid: np.ndarray,
    count: int = 1,
    rng: Optional[Generator] = None,
) -> np.ndarray:
    """
    Return a copy of grid with up to count new tiles on empty cells.

    Cells are drawn uniformly without replacement. Each tile is a 2 with
    probability 0.9 and a 4 with probability 0.1. If fewer empty cells exist
    than requested, every empty cell is filled.

    Args:
        grid: Grid to copy. Not modified.
        count: Number of tiles to add (1 during play, 2 for a new game).
        rng: Random source; a fresh default_rng() when omitted.
    """
    rng = rng if rng is not None else default_rng()
    result = np.array(grid, dtype=np.int64, copy=True)

    available = empty_cells(result)
    n = min(count, len(available))
    if n <= 0:
        return result

    chosen = rng.choice(len(available), size=n, replace=False)
    values = rng.choice(_TILE_VALUES, size=n, p=_TILE_PROBS)
    for index, value in zip(chosen, values):
        result[available[index]] = value
    return result


# ---------------------------------------------------------------------------
# Status classification
# ---------------------------------------------------------------------------

def has_winning_tile(grid: np.ndarray) -> bool:
    return bool(np.any(grid == WINNING_TILE))


def has_possible_merges(grid: np.ndarray) -> bool:
    """True if any horizontally or vertically adjacent pair is equal."""
    grid = np.asarray(grid)
    return bool(
        np.any(grid[:, :-1] == grid[:, 1:]) or np.any(grid[:-1, :] == grid[1:, :])
    )


def is_game_over(grid: np.ndarray) -> bool:
    """No empty cell and no adjacent equal pair: no direction can change the grid."""
    return bool(np.all(grid != 0)) and not has_possible_merges(grid)


def classify(grid: np.ndarray) -> GameStatus:
    """WON if a 2048 tile exists (checked first), LOST if stuck, else PLAYING."""
    if has_winning_tile(grid):
        return GameStatus.WON
    if is_game_over(grid):
        return GameStatus.LOST
    return GameStatus.PLAYING
