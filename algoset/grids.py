"""Flood fill, search and breadth-first exercises on 2-D grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from itertools import product

Cell = tuple[int, int]

_ORTHOGONAL = ((0, -1), (-1, 0), (0, 1), (1, 0))
_ALL_AROUND = tuple(
    (dr, dc) for dr, dc in product((-1, 0, 1), repeat=2) if (dr, dc) != (0, 0)
)


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def _neighbours(
    row: int,
    col: int,
    rows: int,
    cols: int,
    steps: Iterable[Cell] = _ORTHOGONAL,
) -> Iterator[Cell]:
    for dr, dc in steps:
        nrow, ncol = row + dr, col + dc
        if 0 <= nrow < rows and 0 <= ncol < cols:
            yield nrow, ncol


def _flood(
    rows: int,
    cols: int,
    starts: Iterable[Cell],
    can_enter: Callable[[Cell, Cell], bool],
    seen: set[Cell] | None = None,
) -> set[Cell]:
    """Mark every cell reachable from ``starts`` through allowed moves."""
    seen = set() if seen is None else seen
    stack = []
    for start in starts:
        if start not in seen:
            seen.add(start)
            stack.append(start)
    while stack:
        cell = stack.pop()
        for nxt in _neighbours(*cell, rows, cols):
            if nxt not in seen and can_enter(cell, nxt):
                seen.add(nxt)
                stack.append(nxt)
    return seen


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for row, col in product(range(rows), range(cols)):
        if row in (0, rows - 1) or col in (0, cols - 1):
            yield row, col


def solve_surrounded(board: list[list[str]]) -> None:
    """Capture, in place, every 'O' region that does not touch the border."""
    rows, cols = _shape(board)
    if not rows or not cols:
        return
    starts = [(r, c) for r, c in _border(rows, cols) if board[r][c] == "O"]
    safe = _flood(rows, cols, starts, lambda _, cell: board[cell[0]][cell[1]] == "O")
    for row, col in product(range(rows), range(cols)):
        if board[row][col] == "O" and (row, col) not in safe:
            board[row][col] = "X"


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if ``word`` runs through orthogonally adjacent cells.

    No cell is used twice. An empty word is never found.
    """
    rows, cols = _shape(board)
    if not word or not rows or not cols:
        return False
    used: set[Cell] = set()

    def search(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        for nrow, ncol in _neighbours(row, col, rows, cols):
            if (nrow, ncol) not in used and board[nrow][ncol] == word[index]:
                used.add((nrow, ncol))
                if search(nrow, ncol, index + 1):
                    return True
                used.discard((nrow, ncol))
        return False

    for row, col in product(range(rows), range(cols)):
        if board[row][col] == word[0]:
            used.add((row, col))
            if search(row, col, 1):
                return True
            used.discard((row, col))
    return False


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> list[Cell]:
    """Return, in row-major order, the cells whose water reaches both oceans.

    The Pacific touches the top and left edges, the Atlantic the bottom and
    right edges; water flows to neighbours of equal or lower height.
    """
    rows, cols = _shape(heights)
    if not rows or not cols:
        return []

    def uphill(src: Cell, dst: Cell) -> bool:
        return heights[dst[0]][dst[1]] >= heights[src[0]][src[1]]

    pacific = _flood(
        rows,
        cols,
        [(r, 0) for r in range(rows)] + [(0, c) for c in range(cols)],
        uphill,
    )
    atlantic = _flood(
        rows,
        cols,
        [(r, cols - 1) for r in range(rows)] + [(rows - 1, c) for c in range(cols)],
        uphill,
    )
    return [
        (row, col)
        for row, col in product(range(rows), range(cols))
        if (row, col) in pacific and (row, col) in atlantic
    ]


def _count_regions(grid: Sequence[Sequence[Hashable]], target: Hashable) -> int:
    rows, cols = _shape(grid)
    seen: set[Cell] = set()
    regions = 0
    for row, col in product(range(rows), range(cols)):
        if grid[row][col] == target and (row, col) not in seen:
            regions += 1
            _flood(
                rows,
                cols,
                [(row, col)],
                lambda _, cell: grid[cell[0]][cell[1]] == target,
                seen,
            )
    return regions


def count_components(grid: Sequence[Sequence[int]]) -> int:
    """Count the orthogonally connected regions of 1s."""
    return _count_regions(grid, 1)


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the orthogonally connected islands of '1' cells."""
    return _count_regions(grid, "1")


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int | None:
    """Return the cell count of the shortest clear path corner to corner.

    Moves go to any of the eight neighbours through cells holding 0. ``None``
    is returned when no such path exists.
    """
    rows, cols = _shape(grid)
    if not rows or not cols or grid[0][0] != 0:
        return None
    target = (rows - 1, cols - 1)
    seen = {(0, 0)}
    frontier = deque([((0, 0), 1)])
    while frontier:
        cell, length = frontier.popleft()
        if cell == target:
            return length
        for nxt in _neighbours(*cell, rows, cols, _ALL_AROUND):
            if nxt not in seen and grid[nxt[0]][nxt[1]] == 0:
                seen.add(nxt)
                frontier.append((nxt, length + 1))
    return None


def rotten_oranges(grid: Sequence[Sequence[int]]) -> int | None:
    """Return the minutes until no fresh orange is left, or None if never.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); each minute every rotten
    orange rots its orthogonal fresh neighbours.
    """
    rows, cols = _shape(grid)
    fresh: set[Cell] = set()
    rotten: list[Cell] = []
    for row, col in product(range(rows), range(cols)):
        if grid[row][col] == 1:
            fresh.add((row, col))
        elif grid[row][col] == 2:
            rotten.append((row, col))

    minutes = 0
    while rotten and fresh:
        spread = []
        for cell in rotten:
            for nxt in _neighbours(*cell, rows, cols):
                if nxt in fresh:
                    fresh.remove(nxt)
                    spread.append(nxt)
        rotten = spread
        minutes += 1
    return None if fresh else minutes