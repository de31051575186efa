"""Tests for hybrid (positional plus destructured mapping) validation."""

from datetime import datetime

import pytest

from arg_contracts.core.exceptions import (
    ArityError,
    MissingRequiredError,
    TypeMismatchError,
    UnexpectedParameterError,
)
from arg_contracts.core.interfaces import UNDEFINED
from arg_contracts.language.compiler import compile_schema
from arg_contracts.validators.argument_validator import ArgumentValidator, validate_hybrid


@pytest.fixture
def func_schema():
    return compile_schema(
        {"id": "!number", "obj": {"sheet_id": "!number", "something": "!string", "other": "string"}},
        "Func")


@pytest.fixture
def func2_schema():
    return compile_schema(
        {"obj": "!object", "_": {"one": "!string", "two": "!number", "three": "!string", "four": "string"}},
        "<>")


class TestHybridValidation:

    def test_positional_then_destructured(self, func_schema):
        validate_hybrid(func_schema, [100, {"sheet_id": 1.5, "something": "nice"}])

    def test_first_param_object(self, func2_schema):
        validate_hybrid(func2_schema, [{"value": 2}, {"one": "", "two": 2, "three": ""}])

    def test_missing_first_param(self, func2_schema):
        with pytest.raises(MissingRequiredError) as exc_info:
            validate_hybrid(func2_schema, [])

        assert exc_info.value.contract_name == "<>"

    def test_mismatched_first_param(self, func2_schema):
        with pytest.raises(TypeMismatchError) as exc_info:
            validate_hybrid(func2_schema, [2, {"two": 2}])

        assert exc_info.value.parameter == "obj"

    def test_destructured_required_missing(self, func_schema):
        with pytest.raises(MissingRequiredError) as exc_info:
            validate_hybrid(func_schema, [200, {"other": "other"}])

        assert exc_info.value.contract_name == "Func destructured arg #1"
        assert exc_info.value.missing == ["sheet_id", "something"]

    @pytest.mark.parametrize("bag", [UNDEFINED, None])
    def test_omitted_mapping_uses_nested_label(self, func_schema, bag):
        with pytest.raises(MissingRequiredError, match="Func destructured arg #1"):
            validate_hybrid(func_schema, [200, bag])

    def test_omitted_trailing_mapping(self, func_schema):
        with pytest.raises(MissingRequiredError) as exc_info:
            validate_hybrid(func_schema, [200])

        assert exc_info.value.contract_name == "Func destructured arg #1"

    def test_wrong_type_inside_mapping(self, func_schema):
        with pytest.raises(TypeMismatchError) as exc_info:
            validate_hybrid(func_schema, [200, {"sheet_id": "slkfjsdf", "something": "x"}])

        assert exc_info.value.contract_name == "Func destructured arg #1"
        assert exc_info.value.parameter == "sheet_id"

    def test_mapping_position_given_a_scalar(self, func_schema):
        with pytest.raises(TypeMismatchError, match="Func destructured arg #1"):
            validate_hybrid(func_schema, [200, 5])

    def test_unexpected_key_inside_mapping(self, func_schema):
        with pytest.raises(UnexpectedParameterError) as exc_info:
            validate_hybrid(func_schema, [200, {"sheet_id": 1, "something": "x", "extra": 1}])

        assert exc_info.value.extras == ["extra"]

    def test_undefined_inside_mapping(self, func_schema):
        with pytest.raises(TypeError):
            validate_hybrid(func_schema, [200, {"sheet_id": 1, "something": UNDEFINED}])

    def test_top_level_checked_first(self, func_schema):
        with pytest.raises(TypeMismatchError) as exc_info:
            validate_hybrid(func_schema, ["200", {}])

        assert exc_info.value.contract_name == "Func"

    def test_nested_validated_independently_of_top_level(self):
        schema = compile_schema({"id": "number", "obj": {"flag": "boolean"}}, "F")

        validate_hybrid(schema, [None, {"flag": True}])
        with pytest.raises(TypeMismatchError, match="F destructured arg #1"):
            validate_hybrid(schema, [None, {"flag": "yes"}])

    def test_arity(self, func_schema):
        with pytest.raises(ArityError):
            validate_hybrid(func_schema, [1, {"sheet_id": 1, "something": "x"}, 3])


class TestMultipleDestructuredPositions:

    def test_options_at_end(self):
        schema = compile_schema({"id": "number", "obj": {"date": datetime}, "object": "object"}, "F")

        validate_hybrid(schema, [100, {"date": datetime(2020, 5, 1)}, {"hi": "hi"}])

    def test_two_mappings(self):
        schema = compile_schema({"left": {"a": "!string"}, "right": {"b": "!number"}}, "Pair")
        validator = ArgumentValidator(schema)

        validator.validate_hybrid([{"a": "x"}, {"b": 1}])
        with pytest.raises(MissingRequiredError) as exc_info:
            validator.validate_hybrid([{"a": "x"}, {}])

        assert exc_info.value.contract_name == "Pair destructured arg #1"

    def test_deeper_mapping_checked_as_object(self):
        schema = compile_schema({"outer": {"inner": {"deep": "string"}}}, "F")

        validate_hybrid(schema, [{"inner": {"deep": 5}}])
        with pytest.raises(TypeMismatchError) as exc_info:
            validate_hybrid(schema, [{"inner": "s"}])

        assert exc_info.value.contract_name == "F destructured arg #0"
        assert exc_info.value.parameter == "inner"
