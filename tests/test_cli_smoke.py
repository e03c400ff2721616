import json
import math

from tests.helpers import SAMPLE_INPUTS, clone_inputs, write_inputs
from fitrack.__main__ import main


def test_validate_mode_exits_zero(capsys):
    code = main([str(SAMPLE_INPUTS), "--validate"])
    assert code == 0
    assert "Inputs are valid." in capsys.readouterr().out


def test_invalid_inputs_return_one(tmp_path, sample_inputs_dict, capsys):
    data = clone_inputs(sample_inputs_dict)
    data["coast_age"] = data["fire_age"]
    path = write_inputs(tmp_path, data)

    code = main([str(path), "--validate"])
    assert code == 1
    assert "ERROR: coast_age: must be strictly between current_age and fire_age" in capsys.readouterr().err


def test_missing_inputs_file_returns_two(tmp_path):
    missing = tmp_path / "nope.json"
    code = main([str(missing), "--validate"])
    assert code == 2


def test_malformed_inputs_return_two(tmp_path, sample_inputs_dict):
    data = clone_inputs(sample_inputs_dict)
    del data["monthly_expense"]
    path = write_inputs(tmp_path, data)
    assert main([str(path)]) == 2


def test_summary_mode_writes_output(tmp_path, capsys):
    output_path = tmp_path / "out.json"
    code = main([str(SAMPLE_INPUTS), "--summary", "-o", str(output_path)])

    assert code == 0
    assert output_path.exists()
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(data["accumulation"]["conservative"]) == 20
    out = capsys.readouterr().out
    assert "Target fire:" in out
    assert "Wrote report to" in out


def test_overrides_are_applied(tmp_path, capsys):
    output_path = tmp_path / "out.json"
    code = main([str(SAMPLE_INPUTS), "--years", "5", "--conservative", "0", "-o", str(output_path)])

    assert code == 0
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["inputs"]["projection_years"] == 5
    assert data["targets"]["coast"] == data["targets"]["fire"]
    assert "WARNING: projection_years:" in capsys.readouterr().out


def test_override_can_make_inputs_invalid(capsys):
    code = main([str(SAMPLE_INPUTS), "--years", "0"])
    assert code == 1
    assert "ERROR: projection_years: must be >= 1" in capsys.readouterr().err


def test_non_finite_integer_field_returns_two(tmp_path, sample_inputs_dict, capsys):
    data = clone_inputs(sample_inputs_dict)
    data["current_age"] = math.inf
    path = write_inputs(tmp_path, data)

    assert main([str(path), "--validate"]) == 2
    assert "inputs.current_age: expected integer" in capsys.readouterr().err


def test_overflowing_projection_returns_one(tmp_path, sample_inputs_dict, capsys):
    data = clone_inputs(sample_inputs_dict)
    data["inflation_rate_pct"] = 1e10
    data["projection_years"] = 60
    path = write_inputs(tmp_path, data)
    output_path = tmp_path / "out.json"

    assert main([str(path), "-o", str(output_path)]) == 1
    assert not output_path.exists()
    assert "ERROR: not computable: expense schedule overflows" in capsys.readouterr().err
