from __future__ import annotations

from .charsets import MIN_PASSWORD_LENGTH


class GenerationError(Exception):
    """Base class for every failure raised while generating a password."""


class InvalidLength(GenerationError, ValueError):
    """The requested length is below the minimum."""

    def __init__(self, length: int, minimum: int = MIN_PASSWORD_LENGTH) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(f'password length must be at least {minimum} characters')


class NoCharacterClassSelected(GenerationError, ValueError):
    """Every character class was disabled."""

    def __init__(self) -> None:
        super().__init__('at least one character type must be selected')


class RngError(GenerationError):
    """The secure random source could not produce a value."""
