[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nndemo"
version = "0.1.0"
description = "Small neural-network demonstrations: activations, initializers, a hand-written XOR network, Adam, dropout and plots"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "matplotlib",
]
keywords = [
    "neural-network",
    "deep-learning",
    "activation",
    "backpropagation",
    "xor",
    "adam",
    "dropout",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nndemo-initializer = "nndemo.initializer:main"
nndemo-xor = "nndemo.network:main"
nndemo-adam-xor = "nndemo.adam_xor:main"
nndemo-dropout = "nndemo.dropout:main"
nndemo-tensor = "nndemo.tensor_demo:main"
nndemo-plots = "nndemo.plots:main"

[tool.hatch.build.targets.wheel]
packages = ["nndemo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
