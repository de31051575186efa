"""
Tests for core interfaces of the argument contract framework.
"""

import copy
from datetime import datetime
from decimal import Decimal

import pytest

from arg_contracts.core.interfaces import (
    UNDEFINED,
    Convention,
    Presence,
    ValidationEvent,
    ValidationSink,
    classify,
    presence_of,
)
from arg_contracts.core.exceptions import (
    ArgContractError,
    ConfigurationError,
    ContractViolationError,
    MissingRequiredError,
    TypeMismatchError,
    ArityError,
)


class RecordingSink(ValidationSink):
    """Mock sink for testing."""

    def __init__(self):
        self.events = []

    def record(self, event: ValidationEvent) -> None:
        self.events.append(event)


class TestUndefined:

    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED

    def test_falsy_and_repr(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"


class TestPresence:

    def test_all_states(self):
        payload = {"null": None, "undefined": UNDEFINED, "zero": 0}

        assert presence_of(payload, "missing") is Presence.ABSENT
        assert presence_of(payload, "null") is Presence.NULL
        assert presence_of(payload, "undefined") is Presence.UNDEFINED
        assert presence_of(payload, "zero") is Presence.VALUE


class TestClassify:

    @pytest.mark.parametrize("value, tag", [
        ("text", "string"),
        (1, "number"),
        (1.5, "number"),
        (Decimal("2.5"), "number"),
        (True, "boolean"),
        (False, "boolean"),
        ({"a": 1}, "object"),
        ([1, 2], "object"),
        (datetime(2020, 5, 1), "object"),
        (len, "function"),
        (lambda: None, "function"),
    ])
    def test_classification(self, value, tag):
        assert classify(value) == tag


def test_validation_sink_is_abstract():
    with pytest.raises(TypeError):
        ValidationSink()

    sink = RecordingSink()
    sink.record(ValidationEvent("F", Convention.NAMED, passed=True))
    assert sink.events[0].contract_name == "F"
    assert sink.events[0].error_kind is None


def test_exception_hierarchy():
    error = MissingRequiredError("missing", "F", ["a", "b"])

    assert isinstance(error, ContractViolationError)
    assert isinstance(error, ArgContractError)
    assert isinstance(error, TypeError)
    assert error.contract_name == "F"
    assert error.missing == ["a", "b"]
    assert error.details == {"missing": ["a", "b"]}
    assert error.kind == "MissingRequiredError"

    assert issubclass(ConfigurationError, ValueError)
    assert not issubclass(ConfigurationError, ContractViolationError)

    mismatch = TypeMismatchError("bad", "F", "b", "number", "y")
    assert mismatch.details["actual_type"] == "str"

    arity = ArityError("too many", "F", 3, 2)
    assert (arity.received, arity.expected) == (3, 2)


if __name__ == "__main__":
    pytest.main([__file__])
