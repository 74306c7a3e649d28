"""A dense row-major matrix of floating-point numbers."""

from __future__ import annotations

from collections.abc import Iterable

from linearkit.vector import Vector


class Matrix:
    """A mutable matrix stored as a flat row-major list of floats."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Iterable[float], rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions cannot be negative")
        values = [float(x) for x in data]
        if len(values) != rows * cols:
            raise ValueError(
                f"expected {rows * cols} elements for a {rows}x{cols} matrix, "
                f"got {len(values)}"
            )
        self._data = values
        self._rows = rows
        self._cols = cols

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows`` x ``cols`` matrix of zeros."""
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions cannot be negative")
        return cls([0.0] * (rows * cols), rows, cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"index {index} out of range")
        return self._data[row * self._cols + col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._rows, self._cols, self._data) == (
            other._rows,
            other._cols,
            other._data,
        )

    def __repr__(self) -> str:
        return f"Matrix({self._data!r}, {self._rows}, {self._cols})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(f"{x:f}" for x in self._row(r)) + "]"
            for r in range(self._rows)
        )

    def _row(self, r: int) -> list[float]:
        start = r * self._cols
        return self._data[start:start + self._cols]

    def _apply(self, elements: list[float]) -> list[float]:
        return [
            sum(a * x for a, x in zip(self._row(r), elements))
            for r in range(self._rows)
        ]

    def __matmul__(self, other: object) -> Matrix | Vector:
        if isinstance(other, Vector):
            if self._cols != len(other):
                raise ValueError(
                    f"incompatible vector size of {len(other)} "
                    f"and matrix width of {self._cols}"
                )
            return Vector(self._apply(list(other)))
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("invalid matrix dimensions for multiplication")
        columns = [
            [other._data[k * other._cols + c] for k in range(other._rows)]
            for c in range(other._cols)
        ]
        data = [
            sum(a * b for a, b in zip(self._row(r), column))
            for r in range(self._rows)
            for column in columns
        ]
        return Matrix(data, self._rows, other._cols)

    def transform(self, vector: Vector) -> None:
        """Replace the elements of ``vector`` with this square matrix times it."""
        if self._rows != self._cols or self._cols != len(vector):
            raise ValueError(
                "cannot multiply matrix of uneven dimensions to vector in place"
            )
        vector._data[:] = self._apply(list(vector))

    def _check_same_shape(self, other: Matrix) -> None:
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise ValueError("cannot add matrices of different dimensions")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            (a + b for a, b in zip(self._data, other._data)),
            self._rows,
            self._cols,
        )

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def scaled(self, scalar: float) -> Matrix:
        """Return a new matrix multiplied by ``scalar``."""
        return Matrix((x * scalar for x in self._data), self._rows, self._cols)

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar`` in place."""
        self._data = [x * scalar for x in self._data]