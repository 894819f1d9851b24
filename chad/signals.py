# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by chad.

Signals interrupt the parse flow without being treated as errors. They inherit
from `BaseException` so that `except Exception` blocks do not swallow them.

Signals:
- HelpSignal: The user asked for help (`--help`); validation stops immediately.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in chad."""


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
