"""Exceptions for the inflection system.

Only declaration and configuration problems are errors. Unknown values,
missing accessors and malformed markers degrade gracefully instead.
"""

from typing import Any


class InflectionError(Exception):
    """Base exception for all inflection-related errors.

    Example:
        try:
            registry = InflectionRegistry.from_data(data)
        except InflectionError as e:
            logger.error("inflection_error", error=str(e))
    """

    pass


class BadDeclaration(InflectionError):
    """Raised when a method-to-kind assignment is missing or malformed.

    Example:
        >>> Controller.inflection_method({"users_gender": None})
        Traceback (most recent call last):
        ...
        BadDeclaration: Bad inflection method assignment: 'users_gender' => None
    """

    def __init__(self, assignment: Any = None):
        self.assignment = assignment
        super().__init__(f"Bad inflection method assignment: {assignment}")


class InflectionConfigurationError(InflectionError):
    """Raised when inflection data for a locale cannot be loaded.

    Covers alias cycles, aliases pointing at unknown tokens and kinds
    that are not mappings.

    Example:
        >>> InflectionRegistry.from_data({"gender": {"a": "@b", "b": "@a"}})
        Traceback (most recent call last):
        ...
        InflectionConfigurationError: Alias cycle in kind 'gender': a -> b -> a
    """

    def __init__(self, message: str, kind: str | None = None):
        self.kind = kind
        super().__init__(message)
