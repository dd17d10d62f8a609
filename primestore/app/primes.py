from __future__ import annotations

from math import isqrt


__all__ = (
    "is_prime",
)


def is_prime(n: int) -> bool:
    if n <= 1:
        return False

    if n <= 3:
        return True

    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            return False

    return True
