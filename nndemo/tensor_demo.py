"""Element-wise scaling of vectors and matrices."""

from __future__ import annotations

import argparse

import numpy as np
from numpy.typing import ArrayLike


def doubled(values: ArrayLike) -> np.ndarray:
    """Return the values multiplied by two, keeping shape and dtype."""
    return np.asarray(values) * 2


def main(argv: list[str] | None = None) -> int:
    """Print a doubled vector and a doubled matrix."""
    argparse.ArgumentParser(description="Double a vector and a matrix.").parse_args(argv)
    print(doubled([3, 1, 4, 1, 5]))
    print("\n===========\n")
    print(doubled([[1, 2], [3, 4]]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())