"""Domain Types - Outcome construction and invariants."""

import pytest

from app.core.domain_types import Outcome


def test_success_has_no_error():
    outcome = Outcome.success()
    assert outcome.ok is True
    assert outcome.error is None


def test_failure_carries_description():
    outcome = Outcome.failure("connection refused")
    assert outcome.ok is False
    assert outcome.error == "connection refused"


def test_failure_requires_description():
    with pytest.raises(ValueError):
        Outcome.failure("")


def test_success_cannot_carry_error():
    with pytest.raises(ValueError):
        Outcome(ok=True, error="nope")


def test_outcome_is_immutable():
    outcome = Outcome.success()
    with pytest.raises(AttributeError):
        outcome.ok = False
