"""A two-layer XOR network trained with the Adam optimiser."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike

from .activations import relu, sigmoid


class Adam:
    """Adam optimiser updating a list of arrays in place."""

    def __init__(
        self,
        params: Iterable[np.ndarray],
        learning_rate: float = 1e-3,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
    ) -> None:
        if learning_rate < 0.0:
            raise ValueError("learning rate must not be negative")
        if not (0.0 <= beta1 < 1.0 and 0.0 <= beta2 < 1.0):
            raise ValueError("betas must lie in [0, 1)")
        if eps < 0.0:
            raise ValueError("eps must not be negative")
        self.params = list(params)
        self.learning_rate = learning_rate
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps
        self.steps = 0
        self._m = [np.zeros_like(p, dtype=np.float64) for p in self.params]
        self._v = [np.zeros_like(p, dtype=np.float64) for p in self.params]

    def step(self, grads: Iterable[ArrayLike]) -> None:
        """Apply one update given one gradient per parameter."""
        grads = [np.asarray(g, dtype=np.float64) for g in grads]
        if len(grads) != len(self.params):
            raise ValueError(f"expected {len(self.params)} gradients, got {len(grads)}")
        for param, grad in zip(self.params, grads):
            if grad.shape != param.shape:
                raise ValueError(f"gradient shape {grad.shape} != parameter shape {param.shape}")

        self.steps += 1
        correction1 = 1.0 - self.beta1**self.steps
        correction2 = 1.0 - self.beta2**self.steps
        step_size = self.learning_rate / correction1
        for param, grad, m, v in zip(self.params, grads, self._m, self._v):
            m *= self.beta1
            m += (1.0 - self.beta1) * grad
            v *= self.beta2
            v += (1.0 - self.beta2) * grad * grad
            denom = np.sqrt(v) / math.sqrt(correction2) + self.eps
            param -= (step_size * m / denom).astype(param.dtype)


def _linear_params(
    fan_in: int, fan_out: int, rng: np.random.Generator
) -> tuple[np.ndarray, np.ndarray]:
    bound = 1.0 / math.sqrt(fan_in)
    weights = rng.uniform(-bound, bound, (fan_in, fan_out)).astype(np.float32)
    biases = rng.uniform(-bound, bound, fan_out).astype(np.float32)
    return weights, biases


class XorNet:
    """``sigmoid(relu(x @ W1 + b1) @ W2 + b2)`` with two inputs and two hidden units."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.w1, self.b1 = _linear_params(2, 2, rng)
        self.w2, self.b2 = _linear_params(2, 1, rng)

    @property
    def parameters(self) -> list[np.ndarray]:
        """The trainable arrays, in a fixed order."""
        return [self.w1, self.b1, self.w2, self.b2]

    def _check(self, inputs: ArrayLike) -> np.ndarray:
        x = np.asarray(inputs, dtype=np.float32)
        if x.ndim != 2 or x.shape[1] != 2:
            raise ValueError(f"expected a batch of shape (n, 2), got {x.shape}")
        return x

    def _layers(self, x: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        z1 = x @ self.w1 + self.b1
        hidden = relu(z1)
        output = sigmoid(hidden @ self.w2 + self.b2)
        return z1, hidden, output

    def forward(self, inputs: ArrayLike) -> np.ndarray:
        """Return the network's predictions for a batch."""
        return self._layers(self._check(inputs))[2]

    def train(
        self,
        inputs: ArrayLike,
        targets: ArrayLike,
        epochs: int = 1000,
        learning_rate: float = 0.1,
    ) -> list[float]:
        """Minimise mean squared error with Adam; return each epoch's loss."""
        x = self._check(inputs)
        y = np.asarray(targets, dtype=np.float32)
        if y.shape != (x.shape[0], 1):
            raise ValueError(f"expected targets of shape ({x.shape[0]}, 1), got {y.shape}")

        optimiser = Adam(self.parameters, learning_rate)
        losses: list[float] = []
        for _ in range(epochs):
            z1, hidden, output = self._layers(x)
            diff = output - y
            losses.append(float(np.mean(diff**2)))

            d_z2 = (2.0 * diff / diff.size) * output * (1.0 - output)
            grad_w2 = hidden.T @ d_z2
            grad_b2 = d_z2.sum(axis=0)
            d_z1 = (d_z2 @ self.w2.T) * (z1 > 0.0)
            grad_w1 = x.T @ d_z1
            grad_b1 = d_z1.sum(axis=0)
            optimiser.step([grad_w1, grad_b1, grad_w2, grad_b2])
        return losses


XOR_INPUTS = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]], dtype=np.float32)
XOR_TARGETS = np.array([[0.0], [1.0], [1.0], [0.0]], dtype=np.float32)


def main(argv: list[str] | None = None) -> int:
    """Train the XOR network with Adam and print predictions against targets."""
    parser = argparse.ArgumentParser(description="Train an XOR network with Adam.")
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    parser.add_argument("--epochs", type=int, default=1000, help="training epochs")
    args = parser.parse_args(argv)

    net = XorNet(np.random.default_rng(args.seed))
    losses = net.train(XOR_INPUTS, XOR_TARGETS, args.epochs, 0.1)
    for epoch, loss in enumerate(losses, start=1):
        if epoch % 100 == 0:
            print(f"Epoch: {epoch:4} Loss: {loss:.6f}")

    print("\nTest results:\n")
    print(f"Inputs:\n{XOR_INPUTS}\n")
    print(f"Predictions:\n{net.forward(XOR_INPUTS)}\n")
    print(f"Targets:\n{XOR_TARGETS}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())