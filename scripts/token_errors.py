"""Errors raised while building design-token artifacts."""

from __future__ import annotations


class TokenBuildError(Exception):
    """Base class for every failure that aborts a token build."""


class InvalidInputError(TokenBuildError):
    """The token tree root is not a mapping."""


class SerializationError(TokenBuildError):
    """A token value cannot be written in a target syntax."""

    def __init__(self, path: str, value: object, reason: str = "unsupported value"):
        self.path = path
        self.value = value
        super().__init__(f"cannot render token '{path}' ({value!r}): {reason}")


class SourceUnavailableError(TokenBuildError):
    """The token definition could not be located or read."""


class MalformedSourceError(TokenBuildError):
    """The token definition could not be parsed into a tree."""
