"""Decorators that enforce an argument contract on every call."""

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .config import EnforceConfig, get_config, get_sink
from .core.exceptions import ArityError, ConfigurationError
from .core.interfaces import UNDEFINED, Convention, ValidationSink
from .language.compiler import compile_schema
from .validators.argument_validator import ArgumentValidator


logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _positional_values(signature: inspect.Signature, args: Tuple[Any, ...],
                       kwargs: Dict[str, Any]) -> List[Any]:
    """Lay the supplied arguments out in signature order.

    Parameters left to their defaults become UNDEFINED and trailing ones are
    dropped, so only what the caller actually passed is type-checked.
    """
    if not kwargs:
        return list(args)

    bound = signature.bind_partial(*args, **kwargs)
    values: List[Any] = []
    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL_KINDS:
            values.append(bound.arguments.get(parameter.name, UNDEFINED))
        elif parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            values.extend(bound.arguments.get(parameter.name, ()))

    while values and values[-1] is UNDEFINED:
        values.pop()
    return values


def _check_positional_layout(signature: inspect.Signature, name: str) -> None:
    kinds = [parameter.kind for parameter in signature.parameters.values()]
    if (inspect.Parameter.VAR_POSITIONAL in kinds
            and inspect.Parameter.KEYWORD_ONLY in kinds):
        raise ConfigurationError(
            f"{name} declares keyword-only parameters after *args, which have no "
            "positional slot; use the named convention instead")


def enforce(
    spec: Dict[str, Any],
    label: Optional[str] = None,
    convention: Union[str, Convention] = Convention.POSITIONAL,
    sink: Optional[ValidationSink] = None,
    config: Optional[EnforceConfig] = None,
    method: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator validating every call of the wrapped function against ``spec``.

    Args:
        spec: Parameter specification, in the wrapped function's parameter order
        label: Contract name used in error messages (defaults to the function's qualname)
        convention: ``"positional"``, ``"named"`` or ``"hybrid"``
        sink: Validation sink; defaults to the one built from the configuration
        config: Configuration; defaults to the process configuration at call time
        method: Skip the first argument (``self`` or ``cls``)

    Positional and hybrid contracts cannot guard functions that declare
    keyword-only parameters after ``*args``: those have no positional slot,
    so decoration raises ConfigurationError.

    Example:
        >>> @enforce({"sheet_id": "!number", "options": {"title": "!string"}},
        ...          convention="hybrid")
        ... def update_sheet(sheet_id, options=None):
        ...     return sheet_id
    """
    convention = Convention(convention)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        schema = compile_schema(spec, label if label is not None else func.__qualname__)
        signature = inspect.signature(func)
        if method:
            parameters = list(signature.parameters.values())[1:]
            signature = signature.replace(parameters=parameters)
        if convention is not Convention.NAMED:
            _check_positional_layout(signature, schema.name)

        def resolve_sink() -> Optional[ValidationSink]:
            if sink is not None:
                return sink
            return config.build_sink() if config is not None else get_sink()

        validator = ArgumentValidator(schema, resolve_sink())

        def check(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
            if method:
                args = args[1:]
            if convention is Convention.NAMED:
                if args:
                    raise ArityError(
                        f"{schema.name} accepts keyword arguments only, "
                        f"received {len(args)} positional",
                        schema.name, len(args), 0)
                validator.validate_named([kwargs])
            else:
                validator.validate(convention, _positional_values(signature, args, kwargs))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if (config or get_config()).enabled:
                check(args, kwargs)
            return func(*args, **kwargs)

        wrapper.__arg_schema__ = schema  # type: ignore[attr-defined]
        logger.debug(f"Enforcing {convention.value} contract {schema.name!r} on {func.__qualname__}")
        return wrapper

    return decorator
