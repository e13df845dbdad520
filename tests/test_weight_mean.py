import numpy as np
import pytest

from nndemo.weight_mean import exponential_weighted_average, sample_temperatures


def test_first_value_is_kept():
    result = exponential_weighted_average([7.5, 1.0, 3.0], 0.6)
    assert result[0] == 7.5
    assert len(result) == 3


def test_two_step_average():
    assert exponential_weighted_average([10.0, 20.0], 0.6)[1] == pytest.approx(14.0)


def test_constant_sequence_unchanged():
    assert exponential_weighted_average([4.0] * 10, 0.6) == pytest.approx([4.0] * 10)


def test_beta_zero_follows_input():
    values = [3.0, 1.0, 8.0, 2.0]
    assert exponential_weighted_average(values, 0.0) == pytest.approx(values)


def test_beta_one_holds_first():
    assert exponential_weighted_average([3.0, 1.0, 8.0], 1.0) == pytest.approx([3.0] * 3)


def test_average_stays_within_range():
    values = sample_temperatures(30, seed=1)
    averages = exponential_weighted_average(values, 0.6)
    assert min(averages) >= float(values.min()) - 1e-6
    assert max(averages) <= float(values.max()) + 1e-6


def test_empty_input():
    assert exponential_weighted_average([], 0.6) == []


def test_sample_temperatures_shape_and_sign():
    temps = sample_temperatures()
    assert temps.shape == (30,)
    assert np.all(temps >= 0.0)


def test_sample_temperatures_deterministic():
    np.testing.assert_array_equal(sample_temperatures(10, 5), sample_temperatures(10, 5))


def test_sample_temperatures_negative_count():
    with pytest.raises(ValueError):
        sample_temperatures(-1)