from __future__ import annotations

import re
import sys

from typing import Final

from .charsets import MIN_PASSWORD_LENGTH
from .errors import GenerationError
from .password_generator import PasswordConfig, PasswordGenerator

BANNER: Final[str] = 'Welcome to Pass-inator - Your Secure Password Generator'
RULE: Final[str] = '-' * len(BANNER)
DELIMITER: Final[str] = '-' * 24
LENGTH_PATTERN: Final[re.Pattern[str]] = re.compile(r'[+-]?[0-9]+')


def read_user_input(prompt: str) -> str:
    """Prompt the user and return the stripped answer."""
    return input(prompt).strip()


def read_yes_no(prompt: str) -> bool:
    """
    Ask a yes/no question until the answer is recognised.

    Accepts ``y``, ``yes``, ``n`` and ``no`` in any case.
    """
    while True:
        answer = read_user_input(prompt).lower()

        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False

        print("[!] Please enter 'y' or 'n'")


def read_length() -> int:
    """
    Prompt for the password length.

    Unparseable input falls back to the minimum length. Numbers below the
    minimum are returned as entered and rejected by the generator.
    """
    raw = read_user_input(f'Enter password length (minimum {MIN_PASSWORD_LENGTH}): ')

    if not LENGTH_PATTERN.fullmatch(raw):
        print(f'[!] Invalid length. Using minimum length of {MIN_PASSWORD_LENGTH}')
        return MIN_PASSWORD_LENGTH

    return int(raw)


def prompt_config() -> PasswordConfig:
    """Collect a full password configuration from the user."""
    length = read_length()
    return PasswordConfig(
        length=length,
        use_lowercase=read_yes_no('Include lowercase letters? (y/n): '),
        use_uppercase=read_yes_no('Include uppercase letters? (y/n): '),
        use_numbers=read_yes_no('Include numbers? (y/n): '),
        use_special=read_yes_no('Include special characters? (y/n): '),
    )


def show_password(password: str) -> None:
    """Print the password between delimiter lines."""
    print('\nYour generated password is:')
    print(DELIMITER)
    print(password)
    print(DELIMITER)


def main() -> None:
    """Main entry point for the CLI."""
    print(BANNER)
    print(RULE)

    try:
        config = prompt_config()
    except (EOFError, KeyboardInterrupt):
        print('\n[!] Aborted.')
        sys.exit(1)

    generator = PasswordGenerator()

    try:
        password = generator.generate(config)
    except GenerationError as exc:
        print(f'[!] Error generating password: {exc}')
        sys.exit(1)

    show_password(password)


if __name__ == '__main__':
    main()
