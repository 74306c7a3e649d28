"""Command-line demonstration of vector operations."""

from __future__ import annotations

from collections.abc import Sequence

from linearkit.vector import Vector


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small vector, shift it, and print it and its maximum."""
    vec = Vector([1, 2, 3])
    vec.add_scalar(15.0)
    if len(vec):
        print(vec)
    print(f"{vec.max():f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())