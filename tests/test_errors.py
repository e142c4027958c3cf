from __future__ import annotations

import pickle

import pytest

from retrier.errors import InvalidArgumentError, RetrierError


def test_invalid_argument_error() -> None:
    err = InvalidArgumentError("max_delay", -5, ">= 0")
    assert isinstance(err, RetrierError)
    assert isinstance(err, ValueError)
    assert err.code == 100
    assert err.param == "max_delay"
    assert err.value == -5
    assert str(err) == "[100] max_delay must be >= 0 but is -5"


def test_caught_as_value_error() -> None:
    with pytest.raises(ValueError, match="max_attempt_number"):
        raise InvalidArgumentError("max_attempt_number", 0, ">= 1")


def test_details() -> None:
    err = RetrierError("boom", 1, details={"a": 1})
    assert err.details == '{\n  "a": 1\n}'
    assert str(err) == '[001] boom\n{\n  "a": 1\n}'


@pytest.mark.parametrize(
    "err",
    [
        RetrierError("boom", 1),
        RetrierError("boom", 1, details={"a": [1, 2]}),
        InvalidArgumentError("max_attempt_number", 0, ">= 1"),
    ],
)
def test_pickle(err: RetrierError) -> None:
    copy = pickle.loads(pickle.dumps(err))  # noqa: S301
    assert type(copy) is type(err)
    assert str(copy) == str(err)
