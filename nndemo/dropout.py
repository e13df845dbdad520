"""Dropout and the effect it has on the gradient of a linear map."""

from __future__ import annotations

import argparse

import numpy as np
from numpy.typing import ArrayLike


def dropout(
    x: ArrayLike,
    p: float = 0.5,
    train: bool = True,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Zero each element with probability ``p`` and scale survivors by ``1 / (1 - p)``.

    Outside training the input is returned unchanged.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"dropout probability must lie in [0, 1], got {p}")
    values = np.asarray(x)
    if not np.issubdtype(values.dtype, np.floating):
        values = values.astype(np.float64)
    if not train or p == 0.0:
        return values.copy()
    if p == 1.0:
        return np.zeros_like(values)
    rng = rng if rng is not None else np.random.default_rng()
    keep = rng.random(values.shape) >= p
    return np.where(keep, values / (1.0 - p), 0.0).astype(values.dtype)


def sum_matmul_gradient(x: ArrayLike) -> np.ndarray:
    """Gradient of ``sum(x @ w)`` with respect to a column vector ``w``, flattened."""
    values = np.asarray(x, dtype=np.float64)
    if values.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {values.ndim} dimension(s)")
    return values.sum(axis=0)


def main(argv: list[str] | None = None) -> int:
    """Compare the weight gradient with and without dropout on the input."""
    parser = argparse.ArgumentParser(description="Show how dropout changes a gradient.")
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    args = parser.parse_args(argv)
    rng = np.random.default_rng(args.seed)

    x = rng.integers(0, 10, size=(5, 15)).astype(np.float32)
    print(f"Gradient:\n{sum_matmul_gradient(x).tolist()}")

    dropped = dropout(x, 0.8, True, rng)
    print(f"\nDropout Gradient:\n{sum_matmul_gradient(dropped).tolist()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())