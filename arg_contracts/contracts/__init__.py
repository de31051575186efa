"""
Schema data types for argument contracts.
"""

from .schema import (
    Schema,
    ParameterDescriptor,
    ExpectedType,
    Primitive,
    ClassRef,
    Wildcard,
    HybridBag,
    WILDCARD,
)

__all__ = [
    "Schema",
    "ParameterDescriptor",
    "ExpectedType",
    "Primitive",
    "ClassRef",
    "Wildcard",
    "HybridBag",
    "WILDCARD",
]
