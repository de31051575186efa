"""
Compiled schema types for argument contracts.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from ..core.exceptions import ConfigurationError
from ..core.interfaces import ANY


@dataclass(frozen=True)
class Primitive:
    """Expected runtime primitive, compared by tag."""
    tag: str

    def describe(self) -> str:
        return self.tag


@dataclass(frozen=True)
class ClassRef:
    """Expected class, checked with isinstance."""
    cls: type

    def describe(self) -> str:
        return f"instance of {self.cls.__name__}"


@dataclass(frozen=True)
class Wildcard:
    """Accepts any value."""

    def describe(self) -> str:
        return ANY


@dataclass(frozen=True)
class HybridBag:
    """Destructured mapping validated against its own nested schema."""
    schema: "Schema"

    def describe(self) -> str:
        return f"destructured mapping ({self.schema.name})"


ExpectedType = Union[Primitive, ClassRef, Wildcard, HybridBag]

WILDCARD = Wildcard()


@dataclass(frozen=True)
class ParameterDescriptor:
    """One declared parameter, as read from a specification map."""
    name: str
    position: int
    expected: ExpectedType
    required: bool = False


@dataclass(frozen=True, eq=False)
class Schema:
    """Immutable parameter contract for one callable.

    ``ordered_params`` defines the positional slot of every parameter,
    ``required`` lists the names that must be supplied, and
    ``hybrid_sub_schemas`` maps positional indexes to the nested schema of a
    destructured mapping argument.
    """
    name: str
    ordered_params: Tuple[str, ...]
    required: Tuple[str, ...]
    type_table: Mapping[str, ExpectedType]
    positions: Mapping[str, int]
    hybrid_sub_schemas: Mapping[int, "Schema"]

    def __post_init__(self) -> None:
        declared = set(self.ordered_params)
        if len(declared) != len(self.ordered_params):
            raise ConfigurationError(f"Duplicate parameter names in {self.name}")
        undeclared = [name for name in self.required if name not in declared]
        if undeclared:
            raise ConfigurationError(
                f"Required parameter(s) {undeclared} are not declared in {self.name}")
        for index in self.hybrid_sub_schemas:
            if not 0 <= index < len(self.ordered_params):
                raise ConfigurationError(
                    f"Destructured arg #{index} has no declared parameter in {self.name}")
        for name, index in self.positions.items():
            if not 0 <= index < len(self.ordered_params) or self.ordered_params[index] != name:
                raise ConfigurationError(f"Position table out of order for {self.name}")

    @classmethod
    def from_descriptors(cls, name: str, descriptors: Sequence[ParameterDescriptor]) -> "Schema":
        """Build a schema from descriptors listed in declaration order."""
        ordered: List[str] = []
        required: List[str] = []
        type_table: Dict[str, ExpectedType] = {}
        positions: Dict[str, int] = {}
        hybrids: Dict[int, Schema] = {}

        for descriptor in descriptors:
            ordered.append(descriptor.name)
            positions[descriptor.name] = descriptor.position
            type_table[descriptor.name] = descriptor.expected
            if descriptor.required:
                required.append(descriptor.name)
            if isinstance(descriptor.expected, HybridBag):
                hybrids[descriptor.position] = descriptor.expected.schema

        return cls(
            name=name,
            ordered_params=tuple(ordered),
            required=tuple(required),
            type_table=MappingProxyType(type_table),
            positions=MappingProxyType(positions),
            hybrid_sub_schemas=MappingProxyType(hybrids),
        )

    @property
    def arity(self) -> int:
        return len(self.ordered_params)

    def is_declared(self, name: Any) -> bool:
        return name in self.positions

    def describe(self) -> Dict[str, Any]:
        """Plain-data view of the schema, mostly for diagnostics."""
        return {
            "name": self.name,
            "params": {name: self.type_table[name].describe() for name in self.ordered_params},
            "required": list(self.required),
            "hybrid": {index: sub.describe() for index, sub in self.hybrid_sub_schemas.items()},
        }

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, params={list(self.ordered_params)!r})"
