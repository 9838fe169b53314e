# dlx.py
# Algorithm X (Dancing Links) over an index-based cell arena

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Sequence

import config

logger = logging.getLogger(__name__)

ROOT = 0


class DLXError(Exception):
    pass


class MalformedInput(DLXError, ValueError):
    pass


class StructuralCorruption(DLXError, RuntimeError):
    pass


class MatrixBusy(DLXError, RuntimeError):
    pass


class StopSearch(Exception):
    """Raised by a solution sink to end the search early."""


class Matrix:
    """
    Toroidal sparse matrix stored as parallel lists.

    Index 0 is the root sentinel, indices 1..n are the column headers and
    everything after that is a row cell. A header's column is itself.
    """

    def __init__(self, column_names: Sequence[str]):
        n = len(column_names)
        self.names: list[str] = ["root", *column_names]
        self.column: list[int] = list(range(n + 1))
        self.size: list[int] = [0] * (n + 1)
        self.up: list[int] = list(range(n + 1))
        self.down: list[int] = list(range(n + 1))
        # Header ring: root, 1, 2, ..., n, back to root.
        self.right: list[int] = [(i + 1) % (n + 1) for i in range(n + 1)]
        self.left: list[int] = [(i - 1) % (n + 1) for i in range(n + 1)]
        self.rows: list[int] = []  # first cell of each non-empty row
        self.row_names: list[str] = []
        self.active = False

    @property
    def column_count(self) -> int:
        return len(self.size) - 1

    @property
    def row_count(self) -> int:
        return len(self.row_names)

    @property
    def cell_count(self) -> int:
        return len(self.names) - 1 - self.column_count

    def _add_row(self, name: str, column_indices: list[int]) -> None:
        self.row_names.append(name)
        first = -1
        for c_idx in column_indices:
            header = c_idx + 1
            node = len(self.names)
            self.names.append(name)
            self.column.append(header)

            # Insert into column (at bottom)
            self.down.append(header)
            self.up.append(self.up[header])
            self.down[self.up[header]] = node
            self.up[header] = node
            self.size[header] += 1

            # Link horizontally within row
            if first < 0:
                first = node
                self.left.append(node)
                self.right.append(node)
            else:
                last = self.left[first]
                self.left.append(last)
                self.right.append(first)
                self.right[last] = node
                self.left[first] = node
        if first >= 0:
            self.rows.append(first)

    def cover(self, c: int) -> None:
        left, right, up, down = self.left, self.right, self.up, self.down
        column, size = self.column, self.size
        right[left[c]] = right[c]
        left[right[c]] = left[c]
        i = down[c]
        while i != c:
            j = right[i]
            while j != i:
                up[down[j]] = up[j]
                down[up[j]] = down[j]
                size[column[j]] -= 1
                j = right[j]
            i = down[i]

    def uncover(self, c: int) -> None:
        left, right, up, down = self.left, self.right, self.up, self.down
        column, size = self.column, self.size
        i = up[c]
        while i != c:
            j = left[i]
            while j != i:
                size[column[j]] += 1
                up[down[j]] = j
                down[up[j]] = j
                j = left[j]
            i = up[i]
        right[left[c]] = c
        left[right[c]] = c

    def active_columns(self) -> Iterator[int]:
        c = self.right[ROOT]
        while c != ROOT:
            yield c
            c = self.right[c]

    def column_rows(self, c: int) -> Iterator[int]:
        i = self.down[c]
        while i != c:
            yield i
            i = self.down[i]

    def row_cells(self, r: int) -> Iterator[int]:
        """The cells of r's row, starting with r itself."""
        yield r
        j = self.right[r]
        while j != r:
            yield j
            j = self.right[j]

    def links(self) -> tuple[tuple[int, ...], ...]:
        return (
            tuple(self.left),
            tuple(self.right),
            tuple(self.up),
            tuple(self.down),
            tuple(self.size),
        )

    def check_integrity(self) -> None:
        """Verify link symmetry and header sizes, raising StructuralCorruption."""
        left, right, up, down = self.left, self.right, self.up, self.down
        n = len(self.names)
        for x in range(n):
            for name, ref in (("left", left[x]), ("right", right[x]), ("up", up[x]), ("down", down[x])):
                if not 0 <= ref < n:
                    self._corrupt(f"cell {x} has dangling {name} link {ref}")

        # Only cells still linked in are checked; covered ones keep stale links.
        seen = 0
        for c in self.active_columns():
            seen += 1
            if seen > self.column_count:
                self._corrupt("header ring does not return to root")
            if left[right[c]] != c or right[left[c]] != c:
                self._corrupt(f"header {self.names[c]} has asymmetric horizontal links")
            count = 0
            for i in self.column_rows(c):
                count += 1
                if count > self.cell_count:
                    self._corrupt(f"column {self.names[c]} does not return to its header")
                if up[down[i]] != i or down[up[i]] != i:
                    self._corrupt(f"cell {i} has asymmetric vertical links")
                if self.column[i] != c:
                    self._corrupt(f"cell {i} is linked into the wrong column")
                for j in self.row_cells(i):
                    if left[right[j]] != j or right[left[j]] != j:
                        self._corrupt(f"cell {j} has asymmetric horizontal links")
            if count != self.size[c]:
                self._corrupt(
                    f"column {self.names[c]} has size {self.size[c]} but {count} cells"
                )
        if left[right[ROOT]] != ROOT or right[left[ROOT]] != ROOT:
            self._corrupt("root has asymmetric links")

    def _corrupt(self, message: str) -> None:
        logger.critical("Structural corruption: %s", message)
        raise StructuralCorruption(message)

    def __repr__(self) -> str:
        return f"Matrix(columns={self.column_count}, rows={self.row_count}, cells={self.cell_count})"


def build_matrix(
    column_names: Sequence[str],
    rows: Iterable[tuple[str, Iterable[int]]],
) -> Matrix:
    column_names = [str(name) for name in column_names]
    if not column_names:
        raise MalformedInput("matrix needs at least one column")
    seen: set[str] = set()
    for name in column_names:
        if name in seen:
            raise MalformedInput(f"duplicate column name {name!r}")
        seen.add(name)

    # Validate everything before linking anything.
    num_columns = len(column_names)
    checked: list[tuple[str, list[int]]] = []
    for name, columns in rows:
        columns = list(columns)
        for c_idx in columns:
            if not isinstance(c_idx, int) or not 0 <= c_idx < num_columns:
                raise MalformedInput(
                    f"row {name!r} names column {c_idx!r} outside 0..{num_columns - 1}"
                )
        checked.append((str(name), sorted(set(columns))))

    matrix = Matrix(column_names)
    for name, indices in checked:
        matrix._add_row(name, indices)

    logger.debug("Built %r", matrix)
    return matrix


def _mask_columns(name: str, mask: int, column_count: int) -> list[int]:
    if mask < 0 or mask >> column_count:
        raise MalformedInput(f"row {name!r} bitmask {mask:#x} does not fit {column_count} columns")
    return [i for i in range(column_count) if mask >> i & 1]


def build(column_count: int, rows: Iterable[tuple[str, int | Iterable[int]]]) -> Matrix:
    """Build a matrix whose columns are named by position ("0", "1", ...)."""
    if column_count <= 0:
        raise MalformedInput("matrix needs at least one column")
    converted: list[tuple[str, Iterable[int]]] = []
    for name, columns in rows:
        if isinstance(columns, int):
            converted.append((name, _mask_columns(name, columns, column_count)))
        else:
            converted.append((name, list(columns)))
    return build_matrix([str(i) for i in range(column_count)], converted)


# Column selection policies: matrix -> header index

ColumnPolicy = Callable[[Matrix], int]


def min_size_column(matrix: Matrix) -> int:
    # Heuristic: choose column with smallest size.
    size = matrix.size
    best = matrix.right[ROOT]
    for c in matrix.active_columns():
        if size[c] < size[best]:
            best = c
            if size[c] == 0:
                break
    return best


def first_column(matrix: Matrix) -> int:
    return matrix.right[ROOT]


@dataclass
class SearchState:
    matrix: Matrix
    columns: list[int] = field(default_factory=list)  # chosen column per depth
    choices: list[int] = field(default_factory=list)  # chosen row cell per depth

    def solution(self) -> tuple[str, ...]:
        names, column = self.matrix.names, self.matrix.column
        # A level whose row is still the header has no row chosen yet.
        return tuple(names[r] for r in self.choices if column[r] != r)

    def unwind(self) -> None:
        """Undo every pending cover, deepest level first."""
        m = self.matrix
        while self.columns:
            c = self.columns.pop()
            r = self.choices.pop()
            if r != c:
                j = m.left[r]
                while j != r:
                    m.uncover(m.column[j])
                    j = m.left[j]
            m.uncover(c)


@dataclass
class SearchResult:
    solutions: int = 0
    cancelled: bool = False


def _claim(matrix: Matrix) -> None:
    if matrix.active:
        raise MatrixBusy("a search is already running on this matrix")
    if config.CHECK_INTEGRITY:
        matrix.check_integrity()
    matrix.active = True


def _release(matrix: Matrix) -> None:
    matrix.active = False
    if config.CHECK_INTEGRITY:
        matrix.check_integrity()


def solve(matrix: Matrix, choose_column: ColumnPolicy = min_size_column) -> Iterator[tuple[str, ...]]:
    """
    Yield every exact cover as a tuple of row names, in search order.

    The search runs on an explicit stack. Closing the generator early
    restores the matrix to its state before the search.
    """
    _claim(matrix)
    state = SearchState(matrix)
    columns, choices = state.columns, state.choices
    left, right, down, column, size = matrix.left, matrix.right, matrix.down, matrix.column, matrix.size
    logger.debug("Search started on %r", matrix)
    try:
        entering = True
        while True:
            if entering:
                if right[ROOT] == ROOT:
                    yield state.solution()
                else:
                    c = choose_column(matrix)
                    if size[c] > 0:
                        matrix.cover(c)
                        columns.append(c)
                        choices.append(c)

            if not columns:
                break

            # Move on to the next row of the deepest chosen column.
            c = columns[-1]
            r = choices[-1]
            if r != c:
                j = left[r]
                while j != r:
                    matrix.uncover(column[j])
                    j = left[j]
            r = down[r]
            if r == c:
                matrix.uncover(c)
                columns.pop()
                choices.pop()
                entering = False
                continue

            choices[-1] = r
            j = right[r]
            while j != r:
                matrix.cover(column[j])
                j = right[j]
            entering = True
    finally:
        state.unwind()
        _release(matrix)
        logger.debug("Search finished on %r", matrix)


def search(
    matrix: Matrix,
    sink: Callable[[tuple[str, ...]], object],
    choose_column: ColumnPolicy = min_size_column,
) -> SearchResult:
    result = SearchResult()
    solutions = solve(matrix, choose_column)
    try:
        for sol in solutions:
            result.solutions += 1
            sink(sol)
    except StopSearch:
        result.cancelled = True
    finally:
        solutions.close()
    return result


def solve_one(matrix: Matrix, choose_column: ColumnPolicy = min_size_column) -> tuple[str, ...] | None:
    solutions = solve(matrix, choose_column)
    try:
        for sol in solutions:
            return sol
        return None
    finally:
        solutions.close()


def solve_steps(matrix: Matrix, choose_column: ColumnPolicy = min_size_column):
    """
    Generator that yields events describing the solving process.
    Events are dicts with 'type', 'data', and 'state'.
    """
    _claim(matrix)
    state = SearchState(matrix)
    columns, choices = state.columns, state.choices
    left, right, down, column, size, names = (
        matrix.left, matrix.right, matrix.down, matrix.column, matrix.size, matrix.names,
    )

    def event(kind: str, **data) -> dict:
        return {"type": kind, "data": data, "state": list(state.solution())}

    try:
        yield event("INIT", message="Starting search...")
        entering = True
        while True:
            if entering:
                if right[ROOT] == ROOT:
                    yield event("SOLUTION", solution=list(state.solution()))
                else:
                    candidates = [{"name": names[c], "size": size[c]} for c in matrix.active_columns()]
                    c = choose_column(matrix)
                    yield event(
                        "CHOOSE_COL",
                        chosen=names[c],
                        size=size[c],
                        candidates=candidates,
                        reason=f"Column {names[c]} has the fewest options ({size[c]}).",
                    )
                    if size[c] == 0:
                        yield event("BACKTRACK", reason=f"Column {names[c]} has no options left.")
                    else:
                        matrix.cover(c)
                        columns.append(c)
                        choices.append(c)
                        yield event("COVER_COL", col=names[c])

            if not columns:
                break

            c = columns[-1]
            r = choices[-1]
            if r != c:
                j = left[r]
                while j != r:
                    matrix.uncover(column[j])
                    j = left[j]
                choices[-1] = c
                yield event("UNSELECT_ROW", row=names[r])
            r = down[r]
            if r == c:
                matrix.uncover(c)
                columns.pop()
                choices.pop()
                yield event("UNCOVER_COL", col=names[c])
                if columns:
                    yield event("BACKTRACK", reason="Tried all options for this column, going back.")
                entering = False
                continue

            choices[-1] = r
            j = right[r]
            while j != r:
                matrix.cover(column[j])
                j = right[j]
            # A chosen row always has its other columns covered at a yield.
            yield event("SELECT_ROW", row=names[r])
            entering = True
    finally:
        state.unwind()
        _release(matrix)
