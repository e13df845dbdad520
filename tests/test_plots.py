import struct

import pytest

from nndemo.plots import (
    main,
    plot_relu,
    plot_sigmoid,
    plot_softmax,
    plot_tanh,
    plot_weight_mean,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_size(path):
    data = path.read_bytes()
    assert data[:8] == PNG_SIGNATURE
    assert data[12:16] == b"IHDR"
    return struct.unpack(">II", data[16:24])


@pytest.mark.parametrize(
    "plot", [plot_relu, plot_sigmoid, plot_tanh, plot_softmax, plot_weight_mean]
)
def test_writes_800_by_600_png(tmp_path, plot):
    target = tmp_path / "chart.png"
    written = plot(target)
    assert written == target
    assert _png_size(written) == (800, 600)


def test_creates_missing_parent_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "out.png"
    written = plot_sigmoid(target)
    assert written.is_file()
    assert written.read_bytes()[:8] == PNG_SIGNATURE


def test_accepts_string_path(tmp_path):
    target = tmp_path / "relu.png"
    written = plot_relu(str(target))
    assert written == target
    assert target.stat().st_size > 0


def test_weight_mean_same_seed_same_image(tmp_path):
    first = plot_weight_mean(tmp_path / "a.png", seed=7)
    second = plot_weight_mean(tmp_path / "b.png", seed=7)
    assert first.read_bytes() == second.read_bytes()


def test_weight_mean_seed_changes_image(tmp_path):
    first = plot_weight_mean(tmp_path / "a.png", seed=1)
    second = plot_weight_mean(tmp_path / "b.png", seed=2)
    assert first.read_bytes() != second.read_bytes()
    assert _png_size(second) == (800, 600)


def test_different_charts_differ(tmp_path):
    relu_png = plot_relu(tmp_path / "relu.png").read_bytes()
    tanh_png = plot_tanh(tmp_path / "tanh.png").read_bytes()
    assert relu_png != tanh_png


@pytest.mark.parametrize("chart", ["relu", "sigmoid", "tanh", "softmax", "weight-mean"])
def test_main_writes_requested_chart(tmp_path, capsys, chart):
    target = tmp_path / f"{chart}.png"
    assert main([chart, "--output", str(target)]) == 0
    assert _png_size(target) == (800, 600)
    assert str(target) in capsys.readouterr().out


def test_main_weight_mean_uses_seed(tmp_path):
    via_main = tmp_path / "main.png"
    direct = tmp_path / "direct.png"
    main(["weight-mean", "-o", str(via_main), "--seed", "3"])
    plot_weight_mean(direct, seed=3)
    assert via_main.read_bytes() == direct.read_bytes()


def test_main_rejects_unknown_chart(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["cosine", "-o", str(tmp_path / "x.png")])
    assert excinfo.value.code == 2
    assert not (tmp_path / "x.png").exists()