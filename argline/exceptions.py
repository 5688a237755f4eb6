# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in Argline.

Two families matter to callers. Configuration errors are programmer mistakes
in a command declaration and are raised at registration time; they are fatal
by intent. Everything else signals misuse of the argument model or the
request lifecycle. Bad user input is never an exception: it is reported as a
`Conversion` with an ERROR or INCOMPLETE status.

Exception Hierarchy:
- ArglineError
    ├── ConfigurationError
    │     ├── TypeSpecError
    │     ├── UnknownTypeError
    │     ├── ParameterError
    │     └── CommandError
    ├── CommandAlreadyExistsError
    ├── TypeRegistryError
    ├── ArgumentError
    ├── ArgumentMismatchError
    └── ReentrantRequestError
"""


class ArglineError(Exception):
    """Base exception for Argline."""


class ConfigurationError(ArglineError):
    """Exception raised when a command, parameter or type is declared incorrectly."""


class TypeSpecError(ConfigurationError):
    """Exception raised when a type spec carries invalid or unsupported options."""


class UnknownTypeError(ConfigurationError):
    """Exception raised when a type name cannot be resolved from the registry."""


class ParameterError(ConfigurationError):
    """Exception raised when a parameter declaration is invalid."""


class CommandError(ConfigurationError):
    """Exception raised when a command declaration is invalid."""


class CommandAlreadyExistsError(ArglineError):
    """Exception raised when a command with the same name is already registered."""


class TypeRegistryError(ArglineError):
    """Exception raised when a frozen type registry is modified."""


class ArgumentError(ArglineError):
    """Exception raised when an argument variant cannot perform an operation."""


class ArgumentMismatchError(ArglineError):
    """Exception raised when arguments of different variant kinds are compared."""


class ReentrantRequestError(ArglineError):
    """Exception raised when a request is completed while a completion is in flight."""
