"""Custom exception hierarchy for the descrambler."""

from __future__ import annotations


class DescrambleError(Exception):
    """Base class for all descrambling related errors."""


class ParseError(DescrambleError):
    """Raised when a player script cannot be turned into an operation program."""


class EntryFunctionNotFound(ParseError):
    """Raised when no function is associated with the signature key."""


class FunctionBodyNotFound(ParseError):
    """Raised when the entry function has no extractable definition."""


class UnknownOperation(ParseError):
    """Raised for unclassified helper calls under the fail-fast policy."""

    def __init__(self, identifier: str, statement: str) -> None:
        super().__init__(f"Unclassified helper {identifier!r} in statement {statement!r}")
        self.identifier = identifier
        self.statement = statement


class ApplyError(DescrambleError):
    """Raised when an operation program cannot be applied to a signature."""


class SwapIndexOutOfRange(ApplyError):
    """Raised when a swap targets a position beyond the current signature."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Swap index {index} out of range for signature of length {length}")
        self.index = index
        self.length = length


class PlayerVersionNotFound(DescrambleError):
    """Raised when a watch page does not reference a player script version."""


class ConfigError(DescrambleError):
    """Raised for malformed descrambler configuration."""


__all__ = [
    "DescrambleError",
    "ParseError",
    "EntryFunctionNotFound",
    "FunctionBodyNotFound",
    "UnknownOperation",
    "ApplyError",
    "SwapIndexOutOfRange",
    "PlayerVersionNotFound",
    "ConfigError",
]
