import io

import pytest

from logregkit.dataset import Dataset
from logregkit.model import Model
from logregkit.train import TrainOptions, main, parse_args, train


def _write_data(path):
    path.write_text("".join(f"{x};{1 if x >= 5 else 0}\n" for x in range(10)))
    return path


def test_parse_args_defaults():
    options = parse_args(["data.csv"])
    assert options == TrainOptions(in_file="data.csv")
    assert options.learning_rate == 0.001
    assert options.iterations == 1000
    assert options.split == 0.8


def test_parse_args_options():
    options = parse_args([
        "-l", "0.5", "-i", "20", "-s", "0.5", "--separator", ",",
        "--skip-header", "--seed", "42", "--file", "in.csv", "-o", "out.csv",
    ])
    assert options.learning_rate == 0.5
    assert options.iterations == 20
    assert options.split == 0.5
    assert options.separator == ","
    assert options.skip_header is True
    assert options.seed == 42
    assert options.in_file == "in.csv"
    assert options.out_file == "out.csv"


def test_parse_args_empty_separator_falls_back():
    assert parse_args(["--separator", "", "x"]).separator == ";"


def test_train_decreases_cost_and_separates():
    data = Dataset(2, [[-2.0, 0.0], [-1.0, 0.0], [1.0, 1.0], [2.0, 1.0]])
    reports = []
    theta = train(data, 0.5, 50, data,
                  lambda i, tc, vc, m: reports.append((i, tc, vc, m)))
    assert [r[0] for r in reports] == list(range(50))
    costs = [r[1] for r in reports]
    assert all(b <= a for a, b in zip(costs, costs[1:]))
    assert reports[-1][3].accuracy == 1.0
    assert reports[-1][1] == pytest.approx(reports[-1][2])
    assert theta[1] > 0


def test_train_zero_iterations_returns_zero_weights():
    data = Dataset(3, [[1.0, 2.0, 1.0]])
    assert train(data, 0.1, 0) == [0.0, 0.0, 0.0]


def test_main_trains_and_writes_model(tmp_path, capsys):
    data = _write_data(tmp_path / "data.csv")
    out = tmp_path / "model.csv"
    code = main(["--seed", "7", "-i", "5", "-l", "0.1", "-o", str(out), str(data)])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Dataset split: 8 train examples, 2 validation examples"
    assert [line[:6] for line in lines[1:6]] == [
        "[0000]", "[0001]", "[0002]", "[0003]", "[0004]"
    ]
    assert lines[6] == "Thetas:"
    with out.open() as stream:
        model = Model.read(stream)
    assert len(model.theta) == 2
    assert len(model.means) == 1
    assert model.stddevs[0] > 0


def test_main_is_deterministic_for_seed(tmp_path):
    data = _write_data(tmp_path / "data.csv")
    first, second = tmp_path / "a.csv", tmp_path / "b.csv"
    assert main(["--seed", "3", "-i", "4", "-o", str(first), str(data)]) == 0
    assert main(["--seed", "3", "-i", "4", "-o", str(second), str(data)]) == 0
    assert first.read_text() == second.read_text()


def test_main_writes_model_to_stderr_by_default(tmp_path, capsys):
    data = _write_data(tmp_path / "data.csv")
    assert main(["--seed", "1", "-i", "2", str(data)]) == 0
    model = Model.read(io.StringIO(capsys.readouterr().err))
    assert len(model.theta) == 2


def test_main_without_file(capsys):
    assert main([]) == 1
    assert "No input file specified" in capsys.readouterr().err


def test_main_invalid_split(tmp_path, capsys):
    data = _write_data(tmp_path / "data.csv")
    assert main(["--split", "1.5", str(data)]) == 1
    assert "Invalid split value" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "input file open failed" in capsys.readouterr().err


def test_main_no_data(tmp_path, capsys):
    data = tmp_path / "data.csv"
    data.write_text("1\n2\n")
    assert main([str(data)]) == 1
    assert "No data found" in capsys.readouterr().err


def test_main_bad_csv(tmp_path, capsys):
    data = tmp_path / "data.csv"
    data.write_text("1;0\nx;1\n")
    assert main([str(data)]) == 1
    assert "Failed to parse CSV" in capsys.readouterr().err