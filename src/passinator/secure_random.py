from __future__ import annotations

import random

from .errors import RngError


class SecureRandom:
    """
    Draw uniform integers from the operating system's CSPRNG.

    ``SystemRandom.randrange`` rejects out-of-range draws instead of reducing
    them modulo the bound, so every value in ``[0, bound)`` is equally likely.
    The instance keeps no state between draws.
    """

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def random_index(self, bound: int) -> int:
        """
        Return an integer drawn uniformly from ``[0, bound)``.

        Args:
            bound: Exclusive upper limit, must be positive.

        Raises:
            RngError: If ``bound`` is not positive or the entropy source
                cannot be read.
        """
        if bound <= 0:
            msg = f'bound must be positive, got {bound}'
            raise RngError(msg)

        try:
            return self._rng.randrange(bound)
        except (OSError, NotImplementedError) as exc:
            msg = f'failed to read from the entropy source: {exc}'
            raise RngError(msg) from exc
