import numpy as np
import pytest

from nndemo.adam_xor import Adam, XorNet, main

XOR_X = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float32)
XOR_Y = np.array([[0], [1], [1], [0]], dtype=np.float32)


def test_first_step_moves_by_learning_rate_against_sign():
    param = np.array([1.0, -2.0, 3.0], dtype=np.float32)
    before = param.copy()
    grad = np.array([0.5, -4.0, 2.0])
    Adam([param], learning_rate=0.1).step([grad])
    assert np.allclose(before - param, 0.1 * np.sign(grad), atol=1e-5)


def test_zero_gradient_leaves_parameter():
    param = np.array([[1.0, 2.0]], dtype=np.float32)
    optimiser = Adam([param], learning_rate=0.1)
    optimiser.step([np.zeros((1, 2))])
    optimiser.step([np.zeros((1, 2))])
    assert param.tolist() == [[1.0, 2.0]]
    assert optimiser.steps == 2


@pytest.mark.parametrize(
    "kwargs",
    [{"learning_rate": -1.0}, {"beta1": 1.0}, {"beta2": -0.1}, {"eps": -1e-8}],
)
def test_invalid_hyperparameters_raise(kwargs):
    with pytest.raises(ValueError):
        Adam([np.zeros(2)], **kwargs)


def test_gradient_count_mismatch_raises():
    optimiser = Adam([np.zeros(2), np.zeros(3)])
    with pytest.raises(ValueError):
        optimiser.step([np.zeros(2)])


def test_gradient_shape_mismatch_raises_without_update():
    first = np.ones(2, dtype=np.float32)
    second = np.ones(3, dtype=np.float32)
    optimiser = Adam([first, second], learning_rate=0.5)
    with pytest.raises(ValueError):
        optimiser.step([np.ones(2), np.ones(4)])
    assert np.array_equal(first, np.ones(2))
    assert optimiser.steps == 0


def test_forward_outputs_probabilities():
    out = XorNet(np.random.default_rng(0)).forward(XOR_X)
    assert out.shape == (4, 1)
    assert np.all((out > 0) & (out < 1))


def test_same_seed_same_network():
    a = XorNet(np.random.default_rng(11)).forward(XOR_X)
    b = XorNet(np.random.default_rng(11)).forward(XOR_X)
    assert np.array_equal(a, b)


def test_forward_rejects_wrong_width():
    with pytest.raises(ValueError):
        XorNet(np.random.default_rng(0)).forward([[1.0, 0.0, 1.0]])


def test_training_lowers_loss():
    net = XorNet(np.random.default_rng(42))
    losses = net.train(XOR_X, XOR_Y, 300, 0.1)
    assert len(losses) == 300
    assert losses[-1] < losses[0]


def test_train_rejects_bad_targets():
    with pytest.raises(ValueError):
        XorNet(np.random.default_rng(0)).train(XOR_X, XOR_Y[:2], 5, 0.1)


def test_main_reports_every_hundred_epochs(capsys):
    assert main(["--epochs", "200"]) == 0
    out = capsys.readouterr().out
    assert "Epoch:  100 Loss:" in out
    assert "Epoch:  200 Loss:" in out
    assert "Predictions:" in out