import json

import pytest

from tests.helpers import SAMPLE_INPUTS


@pytest.fixture
def sample_inputs_dict() -> dict:
    return json.loads(SAMPLE_INPUTS.read_text(encoding="utf-8"))
