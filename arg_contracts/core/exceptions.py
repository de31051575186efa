"""
Exception classes for the argument contract framework.
"""

from typing import Any, Dict, List, Optional


class ArgContractError(Exception):
    """Base exception for all argument contract errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ArgContractError, ValueError):
    """Raised when a parameter specification cannot be compiled."""
    pass


class ContractViolationError(ArgContractError, TypeError):
    """Raised when call-time arguments violate a compiled contract."""

    def __init__(
        self,
        message: str,
        contract_name: str,
        violation_details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, violation_details)
        self.contract_name = contract_name

    @property
    def kind(self) -> str:
        return type(self).__name__


class MissingRequiredError(ContractViolationError):
    """Raised when required parameters are absent from the payload."""

    def __init__(self, message: str, contract_name: str, missing: List[str]):
        super().__init__(message, contract_name, {"missing": list(missing)})
        self.missing = list(missing)


class UndefinedValueError(ContractViolationError):
    """Raised when a named parameter is explicitly UNDEFINED."""

    def __init__(self, message: str, contract_name: str, parameter: str):
        super().__init__(message, contract_name, {"parameter": parameter})
        self.parameter = parameter


class TypeMismatchError(ContractViolationError):
    """Raised when a value does not match its declared type or class."""

    def __init__(
        self,
        message: str,
        contract_name: str,
        parameter: Optional[str],
        expected: str,
        actual: Any
    ):
        super().__init__(message, contract_name, {
            "parameter": parameter,
            "expected": expected,
            "actual_type": type(actual).__name__,
        })
        self.parameter = parameter
        self.expected = expected
        self.actual = actual


class UnexpectedParameterError(ContractViolationError):
    """Raised when a named payload carries keys the contract does not declare."""

    def __init__(self, message: str, contract_name: str, extras: List[str]):
        super().__init__(message, contract_name, {"extras": list(extras)})
        self.extras = list(extras)


class ArityError(ContractViolationError):
    """Raised when more positional values are supplied than declared."""

    def __init__(self, message: str, contract_name: str, received: int, expected: int):
        super().__init__(message, contract_name, {"received": received, "expected": expected})
        self.received = received
        self.expected = expected
