#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the scribex library.

The transformation functions themselves are total: sanitizing, parsing and
serializing never raise on string input. The exceptions below cover
precondition violations by callers (wrong options, malformed trees, broken
rule callbacks, corrupted serialized nodes).

Exception Hierarchy
-------------------
- ScribexError (base exception)

  - ValidationError (parameter/option/tree validation)
    - InvalidOptionsError (wrong options class for a component)

  - SerializationError (dict/JSON node conversion failures)

  - InputRuleError (malformed input rule or rule callback contract violation)

"""

from typing import Any


class ScribexError(Exception):
    """Base exception class for all scribex-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ScribexError):
    """Exception raised for invalid input parameters, options or trees.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a component receives the wrong options class.

    Parameters
    ----------
    component_name : str
        Name of the component that received the options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        """Initialize with the component name and the mismatched types."""
        message = (
            f"{component_name} expected options of type '{expected_type.__name__}', "
            f"but received '{received_type.__name__}'."
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class SerializationError(ScribexError):
    """Exception raised when a node cannot be converted to or from a dict/JSON."""

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the serialization error with the offending node type."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class InputRuleError(ScribexError):
    """Exception raised for a malformed input rule or a misbehaving rule callback.

    Parameters
    ----------
    message : str
        Description of the error
    rule_name : str, optional
        Name of the rule involved

    """

    def __init__(self, message: str, rule_name: str | None = None, original_error: Exception | None = None):
        """Initialize the input rule error with the rule name."""
        super().__init__(message, original_error=original_error)
        self.rule_name = rule_name


__all__ = [
    "ScribexError",
    "ValidationError",
    "InvalidOptionsError",
    "SerializationError",
    "InputRuleError",
]
