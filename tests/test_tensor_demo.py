import numpy as np

from nndemo.tensor_demo import doubled, main


def test_doubles_vector():
    assert doubled([3, 1, 4, 1, 5]).tolist() == [6, 2, 8, 2, 10]


def test_matrix_keeps_shape_and_equals_self_sum():
    matrix = np.array([[1, 2], [3, 4]])
    out = doubled(matrix)
    assert out.shape == (2, 2)
    assert np.array_equal(out, matrix + matrix)


def test_integer_dtype_preserved():
    result = doubled([1, 2, 3])
    assert result.tolist() == [2, 4, 6]
    assert result.dtype.kind == "i"


def test_halving_round_trip_for_floats():
    values = np.array([0.25, -1.5, 3.0])
    assert np.array_equal(doubled(values) / 2, values)


def test_main_prints_both_results(capsys):
    assert main([]) == 0
    before, after = capsys.readouterr().out.split("===========")
    assert "10" in before
    assert "[[2 4]" in after