# nndemo

A small collection of neural-network building blocks written with NumPy,
meant for reading and experimenting:

- activation functions and their derivatives (ReLU, sigmoid, tanh), softmax,
  and the sigmoid backward pass (`nndemo.activations`);
- weight and bias initializers: zeros, ones, uniform, normal, Xavier and He
  in normal and uniform forms (`nndemo.initializer.Initializer`);
- a fully connected network trained by hand-written backpropagation with a
  momentum-averaged weight gradient, solving XOR (`nndemo.network`);
- a two-layer XOR network trained with an Adam optimizer (`nndemo.adam_xor`);
- dropout and its effect on the gradient of `sum(x @ w)` (`nndemo.dropout`);
- an exponentially weighted moving average (`nndemo.weight_mean`);
- PNG charts of the functions above, drawn with matplotlib (`nndemo.plots`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it does                                                          | Options                       |
|----------------------|-----------------------------------------------------------------------|-------------------------------|
| `nndemo-initializer` | prints a 3x4 weight matrix for each initializer and a zero bias vector | `--seed`                      |
| `nndemo-xor`         | trains a 2-4-1 network on XOR, printing the loss every 100 epochs, then its predictions | `--seed`, `--epochs` (3000) |
| `nndemo-adam-xor`    | trains the 2-2-1 network on XOR with Adam and prints predictions and targets | `--seed` (42), `--epochs` (1000) |
| `nndemo-dropout`     | prints a weight gradient with and without dropout (p = 0.8) on the input | `--seed` (42)              |
| `nndemo-tensor`      | doubles a vector and a matrix and prints them                          |                               |
| `nndemo-plots`       | draws one chart to a PNG file and prints its path                      | see below                     |

`nndemo-plots` takes the chart to draw as its argument — one of `relu`,
`sigmoid`, `tanh`, `softmax` or `weight-mean` — and writes it to
`target/output.png` unless `-o`/`--output` names another file. `--seed`
(default 42) sets the sample data of the `weight-mean` chart.

```
nndemo-plots sigmoid -o sigmoid.png
```

## Using the library

```python
import numpy as np

from nndemo.activations import sigmoid, sigmoid_backward, softmax
from nndemo.network import Activation, DenseLayer, NeuralNetwork, XOR_INPUTS, XOR_TARGETS
from nndemo.weight_mean import exponential_weighted_average

x = np.array([[0.0, 1.0], [-1.0, 2.0]])
out = sigmoid(x)                                # sigmoid(0) == 0.5
grad = sigmoid_backward(np.ones_like(x), out)   # out * (1 - out)

probs = softmax([0.2, 0.02, 0.15, 1.3, 3.75])   # sums to 1

smoothed = exponential_weighted_average([10.0, 12.0, 8.0], 0.6)

rng = np.random.default_rng(0)
network = NeuralNetwork()
network.add_layer(DenseLayer(2, 4, Activation.RELU, rng))
network.add_layer(DenseLayer(4, 1, Activation.SIGMOID, rng))
losses = network.train(XOR_INPUTS, XOR_TARGETS, 3000, 0.9, 0.1)  # one loss per epoch
predictions = network.forward(XOR_INPUTS)
```

Functions and classes that draw random numbers take an optional NumPy
random generator, so results can be made reproducible by passing
`np.random.default_rng(seed)`. Invalid shapes, sizes and probabilities
raise `ValueError`; calling `DenseLayer.backward` before `forward` raises
`RuntimeError`.

## What it does not do

There is no general tensor library and no automatic differentiation: every
gradient here is written out by hand for the particular model. The networks
run on the CPU with NumPy only, models cannot be saved or loaded, and the
charts are written as PNG files rather than shown in a window.