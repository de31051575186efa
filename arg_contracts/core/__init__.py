"""
Core components for the argument contract framework.
"""

from .interfaces import (
    UNDEFINED,
    Presence,
    Convention,
    ValidationEvent,
    ValidationSink,
    presence_of,
    classify,
)
from .exceptions import (
    ArgContractError,
    ConfigurationError,
    ContractViolationError,
    MissingRequiredError,
    UndefinedValueError,
    TypeMismatchError,
    UnexpectedParameterError,
    ArityError,
)

__all__ = [
    "UNDEFINED",
    "Presence",
    "Convention",
    "ValidationEvent",
    "ValidationSink",
    "presence_of",
    "classify",
    "ArgContractError",
    "ConfigurationError",
    "ContractViolationError",
    "MissingRequiredError",
    "UndefinedValueError",
    "TypeMismatchError",
    "UnexpectedParameterError",
    "ArityError",
]
