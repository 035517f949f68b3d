from src.hr_dashboard.hr_dashboard.common.concurrency import fetch_concurrently
from src.hr_dashboard.hr_dashboard.core.exceptions import ApiError


def test_collects_every_result():
    outcome = fetch_concurrently({"a": lambda: [1, 2], "b": lambda: (3,)})
    assert outcome.ok
    assert outcome["a"] == [1, 2]
    assert outcome["b"] == [3]
    assert outcome["missing"] == []


def test_failed_fetch_falls_back_to_empty():
    def broken():
        raise ApiError("List leaves: 500 Internal Server Error", status_code=500)

    outcome = fetch_concurrently({"attendance": lambda: ["x"], "leaves": broken})
    assert outcome["attendance"] == ["x"]
    assert outcome["leaves"] == []
    assert not outcome.ok
    assert "500" in outcome.errors["leaves"]
