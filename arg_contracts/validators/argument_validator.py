"""
Call-time argument validation against compiled schemas.

Each calling convention normalizes its raw payload into a single
name -> value mapping and then runs the shared check pipeline:
required presence, per-field types, unexpected extras (named only) and
arity (positional only). Hybrid payloads additionally validate every
destructured mapping against its nested schema. The first violation
raises; nothing is collected except the missing and extra name lists.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..contracts.schema import ClassRef, ExpectedType, HybridBag, Primitive, Schema, Wildcard
from ..core.exceptions import (
    ArgContractError,
    ArityError,
    ConfigurationError,
    MissingRequiredError,
    TypeMismatchError,
    UndefinedValueError,
    UnexpectedParameterError,
)
from ..core.interfaces import (
    ARRAY,
    ARRAY_TYPES,
    UNDEFINED,
    Convention,
    Presence,
    ValidationEvent,
    ValidationSink,
    classify,
    presence_of,
)


logger = logging.getLogger(__name__)


def _quoted(names: Sequence[str]) -> str:
    return ", ".join(f'"{name}"' for name in names)


def normalize_named(schema: Schema, payload: Any) -> Dict[str, Any]:
    """Merge destructured fragments into one flat name -> value mapping."""
    if payload is None or payload is UNDEFINED:
        return {}
    if isinstance(payload, Mapping):
        payload = [payload]
    elif isinstance(payload, (str, bytes)) or not isinstance(payload, Iterable):
        raise ConfigurationError(
            f"Named arguments for {schema.name} must be a mapping or a sequence of mappings, "
            f"got {type(payload).__name__}")

    named: Dict[str, Any] = {}
    for fragment in payload:
        if fragment is None or fragment is UNDEFINED:
            continue
        if not isinstance(fragment, Mapping):
            raise TypeMismatchError(
                f"Expected destructured mapping in {schema.name} but got "
                f"{type(fragment).__name__} instead",
                schema.name, None, "mapping", fragment)
        named.update(fragment)
    return named


def normalize_positional(schema: Schema, payload: Any) -> Tuple[Dict[str, Any], List[Any]]:
    """Zip raw values against declared order, returning the map and the raw values."""
    if payload is None:
        raise ConfigurationError(f"Pass the call arguments to validate {schema.name} positionally")
    if isinstance(payload, (str, bytes, Mapping)) or not isinstance(payload, Iterable):
        raise ConfigurationError(
            f"Positional arguments for {schema.name} must be a sequence, "
            f"got {type(payload).__name__}")
    values = list(payload)
    return dict(zip(schema.ordered_params, values)), values


def check_required(schema: Schema, supplied: Mapping[str, Any]) -> None:
    missing = [name for name in schema.required if name not in supplied]
    if missing:
        raise MissingRequiredError(
            f"Required argument(s) for {schema.name} {_quoted(missing)} missing. "
            "Alternatively, you may have passed them as positional arguments?",
            schema.name, missing)


def check_value(schema: Schema, name: str, expected: ExpectedType, value: Any,
                check_bags: bool = True) -> None:
    """Check one present, non-null value against its expected type.

    With ``check_bags`` off, destructured mappings are left to the hybrid pass.
    """
    if isinstance(expected, Wildcard):
        return
    if isinstance(expected, HybridBag):
        if check_bags and not isinstance(value, Mapping):
            raise TypeMismatchError(
                f'Type mismatch in {schema.name}: "{name}". '
                f"Expected destructured mapping but got {value!r} instead",
                schema.name, name, "mapping", value)
        return
    if isinstance(expected, ClassRef):
        if not isinstance(value, expected.cls):
            raise TypeMismatchError(
                f'Expected instance of class {expected.cls.__name__} in {schema.name} '
                f'for "{name}" but got {type(value).__name__} instead',
                schema.name, name, expected.describe(), value)
        return
    if isinstance(expected, Primitive):
        if expected.tag == ARRAY:
            if not isinstance(value, ARRAY_TYPES):
                raise TypeMismatchError(
                    f'Type mismatch in {schema.name}: "{name}". '
                    f"Expected array but got {classify(value)}",
                    schema.name, name, ARRAY, value)
        elif classify(value) != expected.tag:
            raise TypeMismatchError(
                f'Type mismatch in {schema.name}: "{name}". '
                f"Expected {expected.tag} but got {value!r} instead",
                schema.name, name, expected.tag, value)
        return
    raise ConfigurationError(f"Unknown expected type {expected!r} for {name} in {schema.name}")


def check_types(schema: Schema, supplied: Mapping[str, Any], check_undefined: bool,
                check_bags: bool = True) -> None:
    for name in schema.ordered_params:
        presence = presence_of(supplied, name)
        if presence in (Presence.ABSENT, Presence.NULL):
            continue
        if presence is Presence.UNDEFINED:
            if check_undefined:
                raise UndefinedValueError(
                    f'UNDEFINED was passed to {schema.name} for "{name}"', schema.name, name)
            continue
        check_value(schema, name, schema.type_table[name], supplied[name], check_bags)


def check_extra(schema: Schema, supplied: Mapping[str, Any]) -> None:
    extras = [key for key in supplied if not schema.is_declared(key)]
    if extras:
        raise UnexpectedParameterError(
            f"Unknown parameter(s) passed to {schema.name}: {_quoted(extras)}",
            schema.name, extras)


def check_arity(schema: Schema, received: int) -> None:
    if received > schema.arity:
        raise ArityError(
            f"Too many arguments to {schema.name}. "
            f"Received {received} but expected {schema.arity}",
            schema.name, received, schema.arity)


def typecheck(schema: Schema, supplied: Mapping[str, Any],
              check_undefined: bool = True, check_extra_params: bool = True,
              check_bags: bool = True) -> None:
    """Type-check a normalized payload, then optionally reject undeclared keys."""
    check_types(schema, supplied, check_undefined, check_bags)
    if check_extra_params:
        check_extra(schema, supplied)


def run_named(schema: Schema, payload: Any) -> None:
    supplied = normalize_named(schema, payload)
    check_required(schema, supplied)
    typecheck(schema, supplied, check_undefined=True, check_extra_params=True)


def run_positional(schema: Schema, payload: Any, check_bags: bool = True) -> List[Any]:
    supplied, values = normalize_positional(schema, payload)
    check_required(schema, supplied)
    # extras surface through the arity check instead
    typecheck(schema, supplied, check_undefined=False, check_extra_params=False,
              check_bags=check_bags)
    check_arity(schema, len(values))
    return values


def run_hybrid(schema: Schema, payload: Any) -> None:
    values = run_positional(schema, payload, check_bags=False)
    for index, nested in sorted(schema.hybrid_sub_schemas.items()):
        bag = values[index] if index < len(values) else UNDEFINED
        if bag is None or bag is UNDEFINED:
            bag = {}
        elif not isinstance(bag, Mapping):
            raise TypeMismatchError(
                f'Type mismatch in {nested.name}: "{schema.ordered_params[index]}". '
                f"Expected destructured mapping but got {bag!r} instead",
                nested.name, schema.ordered_params[index], "mapping", bag)
        run_named(nested, [bag])


_RUNNERS: Dict[Convention, Callable[[Schema, Any], Any]] = {
    Convention.NAMED: run_named,
    Convention.POSITIONAL: run_positional,
    Convention.HYBRID: run_hybrid,
}


class ArgumentValidator:
    """Validates call-time arguments against one compiled schema.

    The validator holds no mutable state besides its schema and optional
    sink, so one instance can serve any number of concurrent calls.
    """

    def __init__(self, schema: Schema, sink: Optional[ValidationSink] = None):
        if not isinstance(schema, Schema):
            raise ConfigurationError(
                f"ArgumentValidator needs a compiled Schema, got {type(schema).__name__}")
        self.schema = schema
        self.sink = sink

    @property
    def name(self) -> str:
        return self.schema.name

    def validate_named(self, payload: Any) -> "ArgumentValidator":
        """Validate a sequence of destructured mappings (or a single mapping)."""
        return self._run(Convention.NAMED, payload)

    def validate_positional(self, payload: Any) -> "ArgumentValidator":
        """Validate an ordered sequence of raw argument values."""
        return self._run(Convention.POSITIONAL, payload)

    def validate_hybrid(self, payload: Any) -> "ArgumentValidator":
        """Validate positional values, then every destructured mapping among them."""
        return self._run(Convention.HYBRID, payload)

    def validate(self, convention: Convention, payload: Any) -> "ArgumentValidator":
        return self._run(Convention(convention), payload)

    def _run(self, convention: Convention, payload: Any) -> "ArgumentValidator":
        try:
            _RUNNERS[convention](self.schema, payload)
        except ArgContractError as e:
            self._record(ValidationEvent(
                contract_name=self.schema.name,
                convention=convention,
                passed=False,
                error_kind=type(e).__name__,
                message=str(e),
            ))
            raise
        self._record(ValidationEvent(
            contract_name=self.schema.name,
            convention=convention,
            passed=True,
        ))
        return self

    def _record(self, event: ValidationEvent) -> None:
        if self.sink is None:
            return
        try:
            self.sink.record(event)
        except Exception as e:
            logger.warning(f"Validation sink {type(self.sink).__name__} failed: {e}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(schema={self.schema.name!r})"


def validate_named(schema: Schema, payload: Any,
                   sink: Optional[ValidationSink] = None) -> ArgumentValidator:
    return ArgumentValidator(schema, sink).validate_named(payload)


def validate_positional(schema: Schema, payload: Any,
                        sink: Optional[ValidationSink] = None) -> ArgumentValidator:
    return ArgumentValidator(schema, sink).validate_positional(payload)


def validate_hybrid(schema: Schema, payload: Any,
                    sink: Optional[ValidationSink] = None) -> ArgumentValidator:
    return ArgumentValidator(schema, sink).validate_hybrid(payload)
