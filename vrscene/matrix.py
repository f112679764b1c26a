"""A small 3x3 matrix of floats used for rotation arithmetic."""

from __future__ import annotations

from collections.abc import Iterable

DIM = 3


class Matrix:
    """A mutable 3x3 matrix stored row by row."""

    __hash__ = None  # mutable: in-place multiplication changes the value

    def __init__(self, values: Iterable[float]) -> None:
        flat = [float(v) for v in values]
        if len(flat) != DIM * DIM:
            raise ValueError(
                f"Matrix needs {DIM * DIM} values, got {len(flat)}"
            )
        self._rows = [flat[start:start + DIM] for start in range(0, DIM * DIM, DIM)]

    @classmethod
    def filled(cls, elem: float) -> Matrix:
        """Return a matrix with every element set to ``elem``."""
        return cls([elem] * (DIM * DIM))

    def _product(self, other: Matrix) -> list[list[float]]:
        columns = list(zip(*other._rows))
        return [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        ]

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = Matrix.filled(0.0)
        result._rows = self._product(other)
        return result

    def __imul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._rows = self._product(other)
        return self

    def __getitem__(self, index: int) -> tuple[float, ...]:
        """Return row ``index`` as a tuple."""
        return tuple(self._rows[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({[v for row in self._rows for v in row]!r})"