"""Activation functions, their derivatives, softmax and sigmoid backprop."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def _unwrap(values: np.ndarray):
    """Return a plain scalar for 0-d results, the array otherwise."""
    return values[()] if values.ndim == 0 else values


def relu(x: ArrayLike):
    """Rectified linear unit, ``max(x, 0)``."""
    return _unwrap(np.maximum(np.asarray(x, dtype=float), 0.0))


def relu_derivative(x: ArrayLike):
    """Derivative of ReLU: 0 for ``x <= 0``, 1 otherwise."""
    return _unwrap(np.where(np.asarray(x, dtype=float) <= 0.0, 0.0, 1.0))


def sigmoid(x: ArrayLike):
    """Logistic sigmoid ``1 / (1 + e^-x)``."""
    return _unwrap(1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float))))


def sigmoid_derivative(x: ArrayLike):
    """Derivative of the sigmoid, ``s(x) * (1 - s(x))``."""
    s = np.asarray(sigmoid(x))
    return _unwrap(s * (1.0 - s))


def tanh(x: ArrayLike):
    """Hyperbolic tangent."""
    return _unwrap(np.tanh(np.asarray(x, dtype=float)))


def tanh_derivative(x: ArrayLike):
    """Derivative of tanh, ``1 - tanh(x)^2``."""
    t = np.tanh(np.asarray(x, dtype=float))
    return _unwrap(1.0 - t**2)


def softmax(z: ArrayLike) -> np.ndarray:
    """Turn a score vector into a probability distribution."""
    values = np.asarray(z, dtype=float)
    if values.size == 0:
        return values.copy()
    exp_z = np.exp(values - values.max())
    return exp_z / exp_z.sum()


def sigmoid_backward(grad_output: ArrayLike, sigmoid_output: ArrayLike) -> np.ndarray:
    """Gradient through a sigmoid given the upstream gradient and its output."""
    grad = np.asarray(grad_output)
    out = np.asarray(sigmoid_output)
    if grad.shape != out.shape:
        raise ValueError(f"shape mismatch: {grad.shape} vs {out.shape}")
    return grad * out * (1.0 - out)