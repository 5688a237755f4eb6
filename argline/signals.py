# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by Argline.

These signals are raised to interrupt or redirect the interactive shell
(e.g., quitting, or abandoning argument collection) without being treated as
traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- QuitSignal: Terminate the shell session.
- CancelSignal: Cancel the current request while its arguments are collected.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argline.

    These are not errors. They're used to control flow like quitting or
    abandoning a prompt from user input.
    """


class QuitSignal(FlowSignal):
    """Raised to signal an immediate exit from the shell."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)


class CancelSignal(FlowSignal):
    """Raised to cancel the current request or argument collection."""

    def __init__(self, message: str = "Cancel signal received."):
        super().__init__(message)
