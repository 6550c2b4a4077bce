from __future__ import annotations

from typing import Final

MIN_PASSWORD_LENGTH: Final[int] = 6

LOWERCASE_CHARS: Final[str] = 'abcdefghijklmnopqrstuvwxyz'
UPPERCASE_CHARS: Final[str] = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
NUMBER_CHARS: Final[str] = '0123456789'
SPECIAL_CHARS: Final[str] = '!@#$%^&*()_+-=[]{}|;:,.<>?'

# Canonical order used both for the alphabet and for guaranteed inclusion.
CHARACTER_CLASSES: Final[tuple[str, ...]] = (
    LOWERCASE_CHARS,
    UPPERCASE_CHARS,
    NUMBER_CHARS,
    SPECIAL_CHARS,
)
