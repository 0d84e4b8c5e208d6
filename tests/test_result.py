import pytest

from twenty48.utils.result import Result


def test_success_value_and_helpers():
    result = Result.success(3)
    assert result.is_success and not result.is_failure
    assert result.value == 3
    assert result.map(lambda v: v * 2).value == 6
    assert result.bind(lambda v: Result.failure("nope")).error == "nope"
    seen = []
    result.on_success(seen.append).on_failure(seen.append)
    assert seen == [3]
    assert str(result) == "Success(3)"


def test_failure_value_access_raises():
    result = Result.failure("broken")
    assert result.is_failure
    assert result.value_or(7) == 7
    assert result.map(lambda v: v + 1).error == "broken"
    with pytest.raises(RuntimeError):
        result.value
    assert str(result) == "Failure(broken)"


def test_failure_requires_message():
    with pytest.raises(ValueError):
        Result.failure("")


def test_unit_result():
    assert Result.unit().is_success
    assert Result.unit().value is None
