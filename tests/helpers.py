import copy
import json
from pathlib import Path

from fitrack.schema import ProjectionInputs

SAMPLE_INPUTS = Path(__file__).resolve().parent.parent / "sample_inputs.json"


def write_inputs(tmp_path: Path, data: dict, filename: str = "inputs.json") -> Path:
    path = tmp_path / filename
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def clone_inputs(data: dict) -> dict:
    return copy.deepcopy(data)


def make_inputs(data: dict, **overrides) -> ProjectionInputs:
    merged = clone_inputs(data)
    merged.update(overrides)
    return ProjectionInputs.from_dict(merged)
