"""Neural-network demonstrations built on NumPy: activations, initializers,
backpropagation and Adam on XOR, dropout, moving averages and charts."""

__version__ = "0.1.0"