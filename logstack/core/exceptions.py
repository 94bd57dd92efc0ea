"""
Exception hierarchy for the logger core

Both concrete errors also derive from the matching builtin so callers may
catch ValueError / RuntimeError as well.
"""


class LoggerError(Exception):
    """Base class for all errors raised by logstack."""


class InvalidArgumentError(LoggerError, ValueError):
    """
    Raised when a caller passes a value the core cannot accept.

    Examples: an unknown level name or rank, a non-callable processor,
    a duplicate registry name without ``replace=True``.
    """


class LogicError(LoggerError, RuntimeError):
    """
    Raised on programmer misuse of a logger.

    Popping from an empty handler or processor stack is the usual cause.
    """
