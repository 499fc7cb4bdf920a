"""
Custom exceptions for the sorted map.
"""

from typing import Any


class KeyNotFound(KeyError):
    """
    Raised when a key is absent and no default was supplied.

    Subclasses KeyError so that code written against dict keeps working.
    """

    def __init__(self, key: Any):
        """
        Initialize lookup error.

        Args:
            key: The key that was looked up.
        """
        self.key = key
        super().__init__(key)


class UsageError(TypeError):
    """
    Raised when a variadic accessor gets the wrong number of arguments.
    """

    def __init__(self, method: str, got: int, at_most: int = 2, at_least: int = 1):
        """
        Initialize usage error.

        Args:
            method: Name of the called method, e.g. "get".
            got: Number of positional arguments received.
            at_most: Maximum accepted argument count.
            at_least: Minimum accepted argument count.
        """
        self.method = method
        self.got = got
        if got > at_most:
            message = f"{method}() expected at most {at_most} arguments, got {got}"
        else:
            noun = "argument" if at_least == 1 else "arguments"
            message = f"{method}() expected at least {at_least} {noun}, got {got}"
        super().__init__(message)


class MapChangedError(RuntimeError):
    """
    Raised when key comparisons keep mutating the container being searched.

    The container is left unchanged by the failed call and stays sorted.
    """

    def __init__(self, key: Any, attempts: int):
        """
        Initialize mutation error.

        Args:
            key: The key whose search kept being invalidated.
            attempts: Number of searches attempted.
        """
        self.key = key
        self.attempts = attempts
        super().__init__(
            f"sorted map changed during key comparison {attempts} times in a row"
        )
