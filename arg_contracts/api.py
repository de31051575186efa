"""
One-call helpers: compile a specification and validate arguments with it.

Typical use compiles once with ``create`` and keeps the schema next to the
function it guards; ``named``, ``positional`` and ``hybrid`` compile on every
call and suit code where the specification is written inline.
"""

from typing import Any, Mapping, Optional

from .config import get_config, get_sink
from .contracts.schema import Schema
from .core.exceptions import ConfigurationError
from .language.compiler import compile_schema
from .validators.argument_validator import ArgumentValidator


def create(spec: Any, label: Any) -> Schema:
    """Compile ``spec`` into a reusable schema.

    Example:
        >>> lookup = create({"id": "!number", "name": "!string"}, "lookup")
    """
    return compile_schema(spec, label)


def _validator(spec: Any, label: Optional[str], helper: str) -> ArgumentValidator:
    if not isinstance(spec, Mapping):
        raise ConfigurationError(f"{helper} needs parameters as a mapping")
    schema = compile_schema(spec, label or get_config().default_label)
    return ArgumentValidator(schema, get_sink())


def named(args: Any, spec: Any, label: Optional[str] = None) -> ArgumentValidator:
    """Validate destructured keyword arguments, e.g. ``named([kwargs], spec)``."""
    return _validator(spec, label, "named").validate_named(args)


def positional(args: Any, spec: Any, label: Optional[str] = None) -> ArgumentValidator:
    """Validate positional arguments, e.g. ``positional(args, spec)``."""
    return _validator(spec, label, "positional").validate_positional(args)


def hybrid(args: Any, spec: Any, label: Optional[str] = None) -> ArgumentValidator:
    """Validate positional arguments with destructured mappings among them."""
    return _validator(spec, label, "hybrid").validate_hybrid(args)
