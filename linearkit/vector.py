"""A dense vector of floating-point numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


class Vector:
    """A mutable, fixed-size vector of floats."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, elements: Iterable[float]) -> None:
        self._data = [float(x) for x in elements]

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """Return a vector of ``size`` zeros."""
        if size < 0:
            raise ValueError("vector size cannot be negative")
        return cls([0.0] * size)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __str__(self) -> str:
        return "\n".join(f"[{x:f}]" for x in self._data)

    def sum(self) -> float:
        """Sum of all elements."""
        return math.fsum(self._data)

    def max(self) -> float:
        """Largest element; raises ValueError for an empty vector."""
        if not self._data:
            raise ValueError("max() of an empty vector")
        return max(self._data)

    def add_scalar(self, x: float) -> None:
        """Add ``x`` to every element in place."""
        self._data = [v + x for v in self._data]

    def _check_same_size(self, other: Vector, action: str) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"cannot {action} vectors of different sizes "
                f"({len(self)} and {len(other)})"
            )

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "add")
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __iadd__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "add")
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "subtract")
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __isub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "subtract")
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __mul__(self, other: object) -> Vector:
        """Element-wise product (neither dot nor cross product)."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "multiply")
        return Vector(a * b for a, b in zip(self._data, other._data))

    def __imul__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "multiply")
        self._data = [a * b for a, b in zip(self._data, other._data)]
        return self

    def scaled(self, scalar: float) -> Vector:
        """Return a new vector multiplied by ``scalar``."""
        return Vector(x * scalar for x in self._data)

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar`` in place."""
        self._data = [x * scalar for x in self._data]

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(sum(x * x for x in self._data))