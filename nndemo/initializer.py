"""Parameter initialisation schemes for dense layers."""

from __future__ import annotations

import argparse
import math
from enum import Enum

import numpy as np


class Initializer(Enum):
    """Initialisation method for weights and biases."""

    ZEROS = "zeros"
    ONES = "ones"
    RANDOM_UNIFORM = "random_uniform"
    RANDOM_NORMAL = "random_normal"
    XAVIER = "xavier"
    XAVIER_UNIFORM = "xavier_uniform"
    HE = "he"
    HE_UNIFORM = "he_uniform"

    def initialize_weights(
        self,
        input_size: int,
        output_size: int,
        rng: np.random.Generator | None = None,
    ) -> np.ndarray:
        """Return an ``(input_size, output_size)`` float32 weight matrix."""
        if input_size < 0 or output_size < 0:
            raise ValueError("sizes must not be negative")
        rng = rng if rng is not None else np.random.default_rng()
        shape = (input_size, output_size)

        if self is Initializer.ZEROS:
            return np.zeros(shape, dtype=np.float32)
        if self is Initializer.ONES:
            return np.ones(shape, dtype=np.float32)
        if self is Initializer.RANDOM_UNIFORM:
            return rng.uniform(-1.0, 1.0, shape).astype(np.float32)
        if self is Initializer.RANDOM_NORMAL:
            return rng.normal(0.0, 1.0, shape).astype(np.float32)

        fan = input_size + output_size if self in _XAVIER_FAMILY else input_size
        if fan == 0:
            raise ValueError(f"{self.value} initialisation needs a non-zero fan-in")

        if self in (Initializer.XAVIER, Initializer.HE):
            scale = math.sqrt(2.0 / fan)
            return rng.normal(0.0, scale, shape).astype(np.float32)
        limit = math.sqrt(6.0 / fan)
        return rng.uniform(-limit, limit, shape).astype(np.float32)

    def initialize_biases(
        self, size: int, rng: np.random.Generator | None = None
    ) -> np.ndarray:
        """Return a float32 bias vector of length ``size``.

        The Xavier and He schemes leave biases at zero.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        rng = rng if rng is not None else np.random.default_rng()

        if self is Initializer.ONES:
            return np.ones(size, dtype=np.float32)
        if self is Initializer.RANDOM_UNIFORM:
            return rng.uniform(-1.0, 1.0, size).astype(np.float32)
        if self is Initializer.RANDOM_NORMAL:
            return rng.normal(0.0, 1.0, size).astype(np.float32)
        return np.zeros(size, dtype=np.float32)


_XAVIER_FAMILY = frozenset({Initializer.XAVIER, Initializer.XAVIER_UNIFORM})

_DEMO_ORDER = (
    ("Zero", Initializer.ZEROS),
    ("Ones", Initializer.ONES),
    ("Random Uniform", Initializer.RANDOM_UNIFORM),
    ("Xavier", Initializer.XAVIER),
    ("Xavier Uniform", Initializer.XAVIER_UNIFORM),
    ("He", Initializer.HE),
    ("He Uniform", Initializer.HE_UNIFORM),
)


def main(argv: list[str] | None = None) -> int:
    """Print a 3x4 weight matrix for each scheme and a zero bias vector."""
    parser = argparse.ArgumentParser(description="Show weight initialisation schemes.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = np.random.default_rng(args.seed)

    input_size, output_size = 3, 4
    for index, (label, scheme) in enumerate(_DEMO_ORDER):
        prefix = "" if index == 0 else "\n"
        print(f"{prefix}{label} initialization:")
        print(repr(scheme.initialize_weights(input_size, output_size, rng)))

    print("\nBias initialization (zeros):")
    print(repr(Initializer.ZEROS.initialize_biases(output_size, rng)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())