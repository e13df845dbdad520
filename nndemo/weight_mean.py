"""Exponentially weighted moving averages over a sequence."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def exponential_weighted_average(values: Iterable[float], beta: float) -> list[float]:
    """Return the running average ``v_t = beta * v_{t-1} + (1 - beta) * x_t``.

    The first average equals the first value.
    """
    averages: list[float] = []
    for value in values:
        value = float(value)
        if averages:
            value = averages[-1] * beta + (1.0 - beta) * value
        averages.append(value)
    return averages


def sample_temperatures(count: int = 30, seed: int | None = 42) -> np.ndarray:
    """Draw ``count`` non-negative sample readings, ``|N(0, 1)| * 10``."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = np.random.default_rng(seed)
    return (np.abs(rng.standard_normal(count)) * 10.0).astype(np.float32)