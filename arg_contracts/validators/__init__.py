"""
Validator implementations for the argument contract framework.
"""

from .argument_validator import (
    ArgumentValidator,
    validate_named,
    validate_positional,
    validate_hybrid,
)
from .sinks import LoggingSink, CompositeSink

__all__ = [
    "ArgumentValidator",
    "validate_named",
    "validate_positional",
    "validate_hybrid",
    "LoggingSink",
    "CompositeSink",
]
