"""
Argument Contracts

Runtime enforcement of declarative argument contracts: compile a parameter
specification once, then validate positional, named (destructured) or
hybrid call-time arguments against it.
"""

__version__ = "0.1.0"

from .core.interfaces import UNDEFINED, Convention, ValidationEvent, ValidationSink
from .core.exceptions import (
    ArgContractError,
    ConfigurationError,
    ContractViolationError,
    MissingRequiredError,
    UndefinedValueError,
    TypeMismatchError,
    UnexpectedParameterError,
    ArityError,
)
from .contracts.schema import Schema
from .language.compiler import SchemaCompiler, compile_schema
from .validators.argument_validator import (
    ArgumentValidator,
    validate_named,
    validate_positional,
    validate_hybrid,
)
from .validators.sinks import LoggingSink, CompositeSink
from .config import EnforceConfig, get_config, set_config
from .api import create, named, positional, hybrid
from .decorators import enforce

__all__ = [
    "UNDEFINED",
    "Convention",
    "ValidationEvent",
    "ValidationSink",
    "ArgContractError",
    "ConfigurationError",
    "ContractViolationError",
    "MissingRequiredError",
    "UndefinedValueError",
    "TypeMismatchError",
    "UnexpectedParameterError",
    "ArityError",
    "Schema",
    "SchemaCompiler",
    "compile_schema",
    "ArgumentValidator",
    "validate_named",
    "validate_positional",
    "validate_hybrid",
    "LoggingSink",
    "CompositeSink",
    "EnforceConfig",
    "get_config",
    "set_config",
    "create",
    "named",
    "positional",
    "hybrid",
    "enforce",
]
