"""Charts of activation functions, softmax and a weighted moving average."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable
from pathlib import Path

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .activations import (
    relu,
    relu_derivative,
    sigmoid,
    sigmoid_derivative,
    softmax,
    tanh,
    tanh_derivative,
)
from .weight_mean import exponential_weighted_average, sample_temperatures

DEFAULT_OUTPUT = Path("target") / "output.png"
SOFTMAX_SCORES = (0.2, 0.02, 0.15, 0.15, 1.3, 0.5, 0.08, 1.1, 0.09, 3.75)
WEIGHT_MEAN_BETA = 0.6

_WIDTH, _HEIGHT, _DPI = 800, 600, 100


def _new_axes(title: str, xlim: tuple[float, float], ylim: tuple[float, float]):
    figure = Figure(figsize=(_WIDTH / _DPI, _HEIGHT / _DPI), dpi=_DPI)
    FigureCanvasAgg(figure)
    axes = figure.add_subplot()
    axes.set_title(title, fontsize=20)
    axes.set_xlim(*xlim)
    axes.set_ylim(*ylim)
    axes.set_xlabel("x")
    axes.set_ylabel("y")
    axes.grid(True)
    return figure, axes


def _save(figure: Figure, axes, path: str | os.PathLike[str]) -> Path:
    axes.legend(facecolor="white", framealpha=0.8, edgecolor="black")
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(target, format="png", dpi=_DPI)
    return target


def _plot_function_pair(
    path: str | os.PathLike[str],
    title: str,
    label: str,
    xs: np.ndarray,
    function: Callable[[np.ndarray], np.ndarray],
    derivative: Callable[[np.ndarray], np.ndarray],
    xlim: tuple[float, float],
    ylim: tuple[float, float],
) -> Path:
    figure, axes = _new_axes(title, xlim, ylim)
    axes.plot(xs, function(xs), color="red", label=label)
    axes.plot(xs, derivative(xs), color="blue", label="Derivative")
    return _save(figure, axes, path)


def plot_relu(path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> Path:
    """Draw ReLU and its derivative over [-2, 2] to a PNG file."""
    xs = np.arange(-100, 101) / 50.0
    return _plot_function_pair(
        path, "ReLU Function and its Derivative", "ReLu",
        xs, relu, relu_derivative, (-2.0, 2.0), (0.0, 2.0),
    )


def plot_sigmoid(path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> Path:
    """Draw the sigmoid and its derivative over [-6, 6] to a PNG file."""
    xs = np.arange(-60, 61) / 10.0
    return _plot_function_pair(
        path, "Sigmoid Function and its Derivative", "Sigmoid",
        xs, sigmoid, sigmoid_derivative, (-6.0, 6.0), (0.0, 1.0),
    )


def plot_tanh(path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> Path:
    """Draw tanh and its derivative over [-3, 3] to a PNG file."""
    xs = np.arange(-60, 61) / 20.0
    return _plot_function_pair(
        path, "Tanh Function and its Derivative", "Tanh",
        xs, tanh, tanh_derivative, (-3.0, 3.0), (-1.2, 1.2),
    )


def plot_softmax(path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> Path:
    """Scatter each score against its softmax probability to a PNG file."""
    scores = np.array(SOFTMAX_SCORES)
    probabilities = softmax(scores)
    figure, axes = _new_axes(
        "Softmax Function Probability Distribution", (0.0, 4.0), (0.0, 1.0)
    )
    axes.scatter(scores, probabilities, s=50, color="red", label="Probability")
    return _save(figure, axes, path)


def plot_weight_mean(
    path: str | os.PathLike[str] = DEFAULT_OUTPUT, seed: int | None = 42
) -> Path:
    """Draw 30 sample readings and their weighted moving average to a PNG file."""
    temperatures = sample_temperatures(30, seed)
    averages = exponential_weighted_average(temperatures, WEIGHT_MEAN_BETA)
    xs = np.arange(1, len(temperatures) + 1, dtype=float)

    figure, axes = _new_axes("Weight mean", (1.0, 30.0), (0.0, 20.0))
    axes.set_xlabel("X")
    axes.set_ylabel("Y")
    axes.plot(xs, temperatures, color="blue", label="Temperature")
    axes.plot(xs, averages, color="red", label=f"Beta {WEIGHT_MEAN_BETA}")
    return _save(figure, axes, path)


_CHARTS: dict[str, Callable[[Path], Path]] = {
    "relu": plot_relu,
    "sigmoid": plot_sigmoid,
    "tanh": plot_tanh,
    "softmax": plot_softmax,
}


def main(argv: list[str] | None = None) -> int:
    """Render one chart to a PNG file."""
    parser = argparse.ArgumentParser(description="Render a neural-network chart.")
    parser.add_argument("chart", choices=[*_CHARTS, "weight-mean"], help="chart to draw")
    parser.add_argument(
        "-o", "--output", type=Path, default=DEFAULT_OUTPUT, help="PNG file to write"
    )
    parser.add_argument("--seed", type=int, default=42, help="seed for weight-mean data")
    args = parser.parse_args(argv)

    if args.chart == "weight-mean":
        written = plot_weight_mean(args.output, args.seed)
    else:
        written = _CHARTS[args.chart](args.output)
    print(written)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())