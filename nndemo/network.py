"""A small dense neural network trained with momentum gradient descent."""

from __future__ import annotations

import argparse
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from .initializer import Initializer


class Activation(Enum):
    """Element-wise activation function of a dense layer."""

    SIGMOID = "sigmoid"
    RELU = "relu"
    TANH = "tanh"
    LINEAR = "linear"

    def apply(self, x: ArrayLike) -> np.ndarray:
        """Apply the activation element-wise."""
        values = np.asarray(x, dtype=np.float32)
        if self is Activation.SIGMOID:
            with np.errstate(over="ignore"):
                return (1.0 / (1.0 + np.exp(-values))).astype(np.float32)
        if self is Activation.RELU:
            return np.where(values > 0.0, values, 0.0).astype(np.float32)
        if self is Activation.TANH:
            return np.tanh(values)
        return values.copy()

    def derivative(self, x: ArrayLike) -> np.ndarray:
        """Return the activation's derivative evaluated at ``x``."""
        values = np.asarray(x, dtype=np.float32)
        if self is Activation.SIGMOID:
            s = self.apply(values)
            return s * (1.0 - s)
        if self is Activation.RELU:
            return np.where(values > 0.0, 1.0, 0.0).astype(np.float32)
        if self is Activation.TANH:
            return (1.0 - np.tanh(values) ** 2).astype(np.float32)
        return np.ones_like(values)


class DenseLayer:
    """Fully connected layer ``activation(x @ W + b)``.

    Weights start Xavier-normal, biases at zero.  The layer keeps the values
    of its last forward pass and a moving average of its weight gradient.
    """

    def __init__(
        self,
        input_size: int,
        output_size: int,
        activation: Activation,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.weights = Initializer.XAVIER.initialize_weights(input_size, output_size, rng)
        self.biases = Initializer.XAVIER.initialize_biases(output_size, rng)
        self.activation = activation
        self.input: np.ndarray | None = None
        self.output: np.ndarray | None = None
        self.linear_output: np.ndarray | None = None
        self.weights_grad: np.ndarray | None = None

    def forward(self, inputs: ArrayLike) -> np.ndarray:
        """Run a batch of row vectors through the layer."""
        x = np.asarray(inputs, dtype=np.float32)
        if x.ndim != 2:
            raise ValueError(f"expected a 2-D batch, got {x.ndim} dimension(s)")
        if x.shape[1] != self.weights.shape[0]:
            raise ValueError(
                f"expected {self.weights.shape[0]} input features, got {x.shape[1]}"
            )
        linear = x @ self.weights + self.biases
        output = self.activation.apply(linear)
        self.input = x
        self.linear_output = linear
        self.output = output
        return output

    def backward(
        self,
        grad_output: ArrayLike,
        momentum: float,
        learning_rate: float,
        epoch: int = 0,
    ) -> np.ndarray:
        """Update the parameters and return the gradient for the previous layer.

        ``epoch`` is accepted for interface symmetry; the update does not use it.
        """
        if self.input is None or self.linear_output is None:
            raise RuntimeError("backward called before forward")
        grad = np.asarray(grad_output, dtype=np.float32)
        if grad.shape != self.linear_output.shape:
            raise ValueError(
                f"gradient shape {grad.shape} does not match output shape "
                f"{self.linear_output.shape}"
            )

        delta = grad * self.activation.derivative(self.linear_output)
        weights_grad = self.input.T @ delta
        biases_grad = delta.mean(axis=0)
        grad_input = delta @ self.weights.T

        if self.weights_grad is None:
            self.weights_grad = weights_grad
        else:
            self.weights_grad = momentum * self.weights_grad + (1.0 - momentum) * weights_grad

        self.weights -= (learning_rate * self.weights_grad).astype(np.float32)
        self.biases -= (learning_rate * biases_grad).astype(np.float32)
        return grad_input


class NeuralNetwork:
    """A stack of dense layers trained with full-batch gradient descent."""

    def __init__(self) -> None:
        self.layers: list[DenseLayer] = []

    def add_layer(self, layer: DenseLayer) -> None:
        """Append a layer to the end of the network."""
        self.layers.append(layer)

    def forward(self, inputs: ArrayLike) -> np.ndarray:
        """Run a batch through every layer in order."""
        output = np.array(inputs, dtype=np.float32)
        for layer in self.layers:
            output = layer.forward(output)
        return output

    def backward(
        self,
        grad_output: ArrayLike,
        momentum: float,
        learning_rate: float,
        epoch: int = 0,
    ) -> None:
        """Propagate a loss gradient back through the layers, updating them."""
        grad = np.asarray(grad_output, dtype=np.float32)
        for layer in reversed(self.layers):
            grad = layer.backward(grad, momentum, learning_rate, epoch)

    def train(
        self,
        inputs: ArrayLike,
        targets: ArrayLike,
        epochs: int,
        momentum: float,
        learning_rate: float,
    ) -> list[float]:
        """Train on mean squared error; return the loss of every epoch."""
        x = np.asarray(inputs, dtype=np.float32)
        y = np.asarray(targets, dtype=np.float32)
        if x.ndim != 2 or y.ndim != 2:
            raise ValueError("inputs and targets must be 2-D")
        if x.shape[0] != y.shape[0]:
            raise ValueError(
                f"{x.shape[0]} input rows but {y.shape[0]} target rows"
            )

        losses: list[float] = []
        for epoch in range(epochs):
            predictions = self.forward(x)
            if predictions.shape != y.shape:
                raise ValueError(
                    f"prediction shape {predictions.shape} does not match "
                    f"target shape {y.shape}"
                )
            diff = predictions - y
            losses.append(float(np.mean(diff**2)))
            self.backward(2.0 * diff / x.shape[0], momentum, learning_rate, epoch)
        return losses


XOR_INPUTS = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]], dtype=np.float32)
XOR_TARGETS = np.array([[0.0], [1.0], [1.0], [0.0]], dtype=np.float32)


def main(argv: list[str] | None = None) -> int:
    """Train a 2-4-1 network on XOR and print its predictions."""
    parser = argparse.ArgumentParser(description="Train a small network on XOR.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--epochs", type=int, default=3000, help="training epochs")
    args = parser.parse_args(argv)
    rng = np.random.default_rng(args.seed)

    network = NeuralNetwork()
    network.add_layer(DenseLayer(2, 4, Activation.RELU, rng))
    network.add_layer(DenseLayer(4, 1, Activation.SIGMOID, rng))

    losses = network.train(XOR_INPUTS, XOR_TARGETS, args.epochs, 0.9, 0.1)
    for epoch, loss in enumerate(losses):
        if epoch % 100 == 0:
            print(f"Epoch {epoch}, Loss: {loss}")

    print("\nTesting trained network:")
    for row in XOR_INPUTS:
        sample = row.reshape(1, 2)
        output = network.forward(sample)
        print(f"Input: {sample!r}, Output: {output!r}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())