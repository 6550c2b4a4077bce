from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .charsets import (
    LOWERCASE_CHARS,
    MIN_PASSWORD_LENGTH,
    NUMBER_CHARS,
    SPECIAL_CHARS,
    UPPERCASE_CHARS,
)
from .errors import InvalidLength, NoCharacterClassSelected
from .secure_random import SecureRandom


class RandomSource(Protocol):
    """Anything that can draw a uniform index below a bound."""

    def random_index(self, bound: int) -> int: ...


@dataclass(frozen=True)
class PasswordConfig:
    """Length and character classes requested for one password."""

    length: int
    use_lowercase: bool = True
    use_uppercase: bool = True
    use_numbers: bool = True
    use_special: bool = True

    def enabled_classes(self) -> list[str]:
        """Return the enabled character tables in canonical order."""
        flags = (
            (self.use_lowercase, LOWERCASE_CHARS),
            (self.use_uppercase, UPPERCASE_CHARS),
            (self.use_numbers, NUMBER_CHARS),
            (self.use_special, SPECIAL_CHARS),
        )
        return [chars for enabled, chars in flags if enabled]


def validate_config(config: PasswordConfig) -> None:
    """
    Check a configuration before any randomness is consumed.

    Raises:
        InvalidLength: If the length is below the minimum.
        NoCharacterClassSelected: If every character class is disabled.
    """
    if config.length < MIN_PASSWORD_LENGTH:
        raise InvalidLength(config.length)
    if not config.enabled_classes():
        raise NoCharacterClassSelected


def generate_password(
    config: PasswordConfig,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Return a password satisfying ``config``.

    One character from each enabled class is placed first, the rest is
    filled from the combined alphabet, and a Fisher-Yates shuffle then
    removes the positional signal of the guaranteed characters.

    Args:
        config: Requested length and character classes.
        rng: Source of uniform indices. Defaults to ``SecureRandom()``.

    Raises:
        InvalidLength: If the length is below the minimum.
        NoCharacterClassSelected: If every character class is disabled.
        RngError: If the random source fails at any step.
    """
    validate_config(config)

    if rng is None:
        rng = SecureRandom()

    classes = config.enabled_classes()
    alphabet = ''.join(classes)

    password = [chars[rng.random_index(len(chars))] for chars in classes]

    remaining = config.length - len(password)
    for _ in range(remaining):
        password.append(alphabet[rng.random_index(len(alphabet))])

    for i in range(len(password) - 1, 0, -1):
        j = rng.random_index(i + 1)
        password[i], password[j] = password[j], password[i]

    return ''.join(password)


class PasswordGenerator:
    """Generate passwords from a single random source."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng = rng if rng is not None else SecureRandom()

    def generate(self, config: PasswordConfig) -> str:
        return generate_password(config, self.rng)
