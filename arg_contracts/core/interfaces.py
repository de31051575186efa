"""
Core interfaces for the argument contract framework.

Defines the UNDEFINED sentinel, the presence model used by the validator,
runtime primitive classification and the diagnostics sink interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional
import numbers
import time


class _Undefined:
    """Sentinel for a parameter that is present but was never given a value."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Any) -> "_Undefined":
        return self


UNDEFINED = _Undefined()


class Presence(Enum):
    """How a declared parameter shows up in a normalized payload."""
    ABSENT = "absent"
    NULL = "null"
    UNDEFINED = "undefined"
    VALUE = "value"


def presence_of(payload: Mapping[str, Any], name: str) -> Presence:
    """Classify the presence of ``name`` in a normalized payload."""
    if name not in payload:
        return Presence.ABSENT
    value = payload[name]
    if value is None:
        return Presence.NULL
    if value is UNDEFINED:
        return Presence.UNDEFINED
    return Presence.VALUE


# Primitive tags accepted in parameter specifications
STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
OBJECT = "object"
ARRAY = "array"
FUNCTION = "function"
ANY = "any"

PRIMITIVE_TAGS = frozenset({STRING, NUMBER, BOOLEAN, OBJECT, ARRAY, FUNCTION, ANY})
ARRAY_TYPES = (list, tuple)


def classify(value: Any) -> str:
    """Return the primitive tag describing a runtime value.

    Arrays are reported as ``object``; the ``array`` tag is matched
    separately against ARRAY_TYPES.
    """
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, numbers.Number):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if callable(value):
        return FUNCTION
    return OBJECT


class Convention(Enum):
    """Argument passing conventions understood by the validator."""
    NAMED = "named"
    POSITIONAL = "positional"
    HYBRID = "hybrid"


@dataclass
class ValidationEvent:
    """Outcome of one validation call, as reported to a sink."""
    contract_name: str
    convention: Convention
    passed: bool
    error_kind: Optional[str] = None
    message: str = ""
    timestamp: float = field(default_factory=time.time)


class ValidationSink(ABC):
    """Receiver for validation outcomes; injected, never global."""

    @abstractmethod
    def record(self, event: ValidationEvent) -> None:
        """Record a single validation outcome."""
        pass
