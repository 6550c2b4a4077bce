from __future__ import annotations

from .errors import (
    GenerationError,
    InvalidLength,
    NoCharacterClassSelected,
    RngError,
)
from .password_generator import PasswordConfig, PasswordGenerator, generate_password
from .secure_random import SecureRandom

__all__ = [
    'GenerationError',
    'InvalidLength',
    'NoCharacterClassSelected',
    'PasswordConfig',
    'PasswordGenerator',
    'RngError',
    'SecureRandom',
    'generate_password',
]
