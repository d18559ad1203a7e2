"""Dense matrix helpers on nested lists of floats."""

from __future__ import annotations

from collections.abc import Sequence


def _is_matrix(m: Sequence) -> bool:
    return bool(m) and isinstance(m[0], (list, tuple))


def subtract(m1: Sequence, m2: Sequence) -> list:
    """Return ``m1 - m2`` element-wise for vectors or matrices."""
    if _is_matrix(m1):
        return [
            [a - b for a, b in zip(row1, row2, strict=True)]
            for row1, row2 in zip(m1, m2, strict=True)
        ]
    return [a - b for a, b in zip(m1, m2, strict=True)]


def scale(m: Sequence, c: float) -> list:
    """Return ``m * c`` for a vector or matrix."""
    if _is_matrix(m):
        return [[value * c for value in row] for row in m]
    return [value * c for value in m]


def multiply_vector(m: Sequence[Sequence[float]], v: Sequence[float]) -> list[float]:
    """Multiply matrix ``m`` by the column vector ``v``."""
    return [sum(a * b for a, b in zip(row, v, strict=True)) for row in m]


def identity(dim: int) -> list[list[float]]:
    """Return the ``dim`` x ``dim`` identity matrix."""
    return [[1.0 if i == j else 0.0 for j in range(dim)] for i in range(dim)]


def append(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> list[list[float]]:
    """Join two matrices side by side."""
    if len(left) != len(right):
        raise ValueError(f"size mismatch: {len(left)} rows against {len(right)}")
    return [list(a) + list(b) for a, b in zip(left, right)]


def separate(m: Sequence[Sequence[float]], index: int) -> tuple[list[list[float]], list[list[float]]]:
    """Split every row at column ``index`` into a left and a right matrix."""
    cut = max(index, 0)
    return [list(row[:cut]) for row in m], [list(row[cut:]) for row in m]


def rref(m: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the reduced row echelon form of ``m``."""
    rows = [list(row) for row in m]
    if not rows:
        return rows
    row_count, column_count = len(rows), len(rows[0])
    lead = 0
    for r in range(row_count):
        if column_count <= lead:
            return rows
        i = r
        while rows[i][lead] == 0:
            i += 1
            if i == row_count:
                i = r
                lead += 1
                if lead == column_count:
                    return rows
        rows[i], rows[r] = rows[r], rows[i]
        if rows[r][lead] != 0:
            rows[r] = scale(rows[r], 1.0 / rows[r][lead])
        pivot = rows[r]
        rows = [
            row if k == r else subtract(row, scale(pivot, row[lead]))
            for k, row in enumerate(rows)
        ]
        lead += 1
    return rows


def inverse(m: Sequence[Sequence[float]]) -> list[list[float]]:
    """Invert a square matrix by Gauss-Jordan elimination."""
    reduced = rref(append(m, identity(len(m))))
    return separate(reduced, len(reduced[0]) // 2)[1]


def from_flat(values: Sequence[float], dim: int) -> list[list[float]]:
    """Build a ``dim`` x ``dim`` matrix from row-major values."""
    if len(values) < dim * dim:
        raise ValueError(f"need {dim * dim} values, got {len(values)}")
    return [list(values[i * dim:(i + 1) * dim]) for i in range(dim)]


def uniform(dim1: int, dim2: int, dim3: int, value: float) -> list[list[list[float]]]:
    """Return a ``dim1`` x ``dim2`` x ``dim3`` array filled with ``value``."""
    return [[[value] * dim3 for _ in range(dim2)] for _ in range(dim1)]


def transpose(m: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the transpose of ``m``."""
    if not m:
        return []
    return [list(column) for column in zip(*m)]