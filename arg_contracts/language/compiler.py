"""Schema compiler - turns parameter specification maps into immutable schemas."""

import logging
from typing import Any, List, Mapping

from ..contracts.schema import (
    WILDCARD, ClassRef, HybridBag, ParameterDescriptor, Primitive, Schema
)
from ..core.exceptions import ConfigurationError, ContractViolationError
from ..core.interfaces import ANY, OBJECT, PRIMITIVE_TAGS
from ..validators.argument_validator import run_positional


logger = logging.getLogger(__name__)

REQUIRED_MARKER = "!"
COMPILER_LABEL = "SchemaCompiler.compile"


def destructured_label(label: str, index: int) -> str:
    return f"{label} destructured arg #{index}"


def _describe(name: Any, declared: Any, index: int, label: str,
              allow_hybrid: bool) -> ParameterDescriptor:
    if not isinstance(name, str):
        raise ConfigurationError(
            f"Parameter names in {label} must be strings, got {name!r}",
            {"label": label, "position": index})

    if isinstance(declared, Mapping):
        if not allow_hybrid:
            # deeper mappings are only checked to be objects
            return ParameterDescriptor(name, index, Primitive(OBJECT))
        nested = compile_spec(declared, destructured_label(label, index), allow_hybrid=False)
        return ParameterDescriptor(name, index, HybridBag(nested))

    if isinstance(declared, str):
        required = declared.startswith(REQUIRED_MARKER)
        tag = (declared[len(REQUIRED_MARKER):] if required else declared).lower()
        if tag not in PRIMITIVE_TAGS:
            raise ConfigurationError(
                f'Unknown type "{declared}" for parameter "{name}" in {label}; '
                f"expected one of {sorted(PRIMITIVE_TAGS)}",
                {"label": label, "parameter": name})
        expected = WILDCARD if tag == ANY else Primitive(tag)
        return ParameterDescriptor(name, index, expected, required)

    if isinstance(declared, type):
        return ParameterDescriptor(name, index, ClassRef(declared))

    raise ConfigurationError(
        "Must use strings, classes, or mappings to describe parameters, passed "
        f'"{declared!r}" of type "{type(declared).__name__}" for "{name}" in {label} instead',
        {"label": label, "parameter": name})


def compile_spec(spec_map: Any, label: str, allow_hybrid: bool = True) -> Schema:
    """Compile a specification map without validating the compiler's own inputs."""
    if not isinstance(spec_map, Mapping):
        raise ConfigurationError(
            f"{label} parameters must be described by a mapping, "
            f"got {type(spec_map).__name__}", {"label": label})

    descriptors: List[ParameterDescriptor] = [
        _describe(name, declared, index, label, allow_hybrid)
        for index, (name, declared) in enumerate(spec_map.items())
    ]
    return Schema.from_descriptors(label, descriptors)


# The compiler's own contract, checked positionally on every compile call
COMPILER_SCHEMA = compile_spec({"spec_map": "!object", "label": "!string"}, COMPILER_LABEL)


class SchemaCompiler:
    """Compiles declarative parameter specifications into Schema objects.

    Specification values may be a primitive tag (``"string"``, ``"number"``,
    ``"boolean"``, ``"object"``, ``"array"``, ``"function"``, ``"any"``),
    optionally prefixed with ``!`` to mark the parameter required; a class,
    checked with isinstance; or a nested mapping describing a destructured
    mapping argument at that position.

    Example:
        >>> schema = SchemaCompiler().compile({"id": "!number", "when": datetime}, "lookup")
        >>> schema.required
        ('id',)
    """

    def compile(self, spec_map: Any = None, label: Any = None) -> Schema:
        if label is None:
            raise ConfigurationError(
                f'{COMPILER_LABEL} "label" cannot be None, did you mean an empty string instead?')
        if spec_map is None:
            raise ConfigurationError(f'{COMPILER_LABEL} "spec_map" cannot be None')
        self.selfcheck(spec_map, label)

        schema = compile_spec(spec_map, label)
        logger.debug(f"Compiled schema {label!r} with params {list(schema.ordered_params)}, "
                     f"required {list(schema.required)}, "
                     f"destructured positions {sorted(schema.hybrid_sub_schemas)}")
        return schema

    @staticmethod
    def selfcheck(spec_map: Any, label: Any) -> None:
        """Validate the compiler's own arguments against COMPILER_SCHEMA."""
        try:
            run_positional(COMPILER_SCHEMA, [spec_map, label])
        except ContractViolationError as e:
            raise ConfigurationError(str(e), e.details) from e


_compiler = SchemaCompiler()


def compile_schema(spec_map: Any = None, label: Any = None) -> Schema:
    """Compile ``spec_map`` into a Schema labelled ``label``."""
    return _compiler.compile(spec_map, label)
