import pytest

from tests.helpers import make_inputs
from fitrack.errors import ArithmeticDegenerateError
from fitrack.progress import ACHIEVED, NOT_COMPUTABLE, REQUIRED, milestone_progress, required_cagr_pct
from fitrack.targets import TargetSet

TARGETS = TargetSet(lean=15_000_000.0, coast=9_000_000.0, fire=25_000_000.0, fat=40_000_000.0)


def test_required_cagr_doubles_in_ten_years():
    assert required_cagr_pct(1_000, 2_000, 10) == pytest.approx((2 ** 0.1 - 1) * 100)


@pytest.mark.parametrize(("current", "target", "years"), [(0, 10, 5), (-5, 10, 5), (10, 20, 0), (10, 20, -3)])
def test_required_cagr_rejects_degenerate_inputs(current, target, years):
    with pytest.raises(ArithmeticDegenerateError):
        required_cagr_pct(current, target, years)


def test_progress_rows_use_milestone_target_ages(sample_inputs_dict):
    inputs = make_inputs(sample_inputs_dict)
    rows = milestone_progress(inputs, TARGETS)

    assert list(rows) == ["lean", "coast", "fire", "fat"]
    assert rows["coast"].target_age == 45
    assert rows["coast"].target_year == 2029
    assert rows["fire"].target_age == 50
    assert rows["fire"].target_year == 2034
    assert rows["fat"].gap == 5_000_000 - 40_000_000


def test_progress_required_growth_outcomes(sample_inputs_dict):
    inputs = make_inputs(sample_inputs_dict, current_net_worth=20_000_000)
    rows = milestone_progress(inputs, TARGETS)

    assert rows["lean"].required_growth.status == ACHIEVED
    assert rows["coast"].required_growth.status == ACHIEVED
    assert rows["coast"].gap == 11_000_000
    fire = rows["fire"].required_growth
    assert fire.status == REQUIRED
    assert fire.rate_pct == pytest.approx(((25 / 20) ** (1 / 10) - 1) * 100)


def test_progress_marks_zero_corpus_not_computable(sample_inputs_dict):
    inputs = make_inputs(sample_inputs_dict, current_net_worth=0)
    rows = milestone_progress(inputs, TARGETS)

    for row in rows.values():
        assert row.required_growth.status == NOT_COMPUTABLE
        assert row.required_growth.rate_pct is None
        assert "must be > 0" in row.required_growth.reason
