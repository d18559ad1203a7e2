"""Measures of how well an agent's reward follows the system reward."""

from __future__ import annotations

from collections.abc import Sequence


def step(d: float) -> float:
    """Return 1.0 for positive ``d``, else 0.0."""
    value = float(d)
    if value > 0.0:
        return 1.0
    return 0.0


def factoredness(gi: Sequence[float], gi_prime: Sequence[float],
                 g: Sequence[float], g_prime: Sequence[float]) -> float:
    """Count pairs where the agent and system rewards change in the same direction.

    Every sample ``z`` is compared with every alternative ``z'``; the count is
    divided by the number of samples.
    """
    size = len(gi)
    if size == 0:
        raise ValueError("at least one sample is needed")
    if any(len(seq) != size for seq in (gi_prime, g, g_prime)):
        raise ValueError("all reward sequences must have the same length")
    total = sum(
        step((a - a_prime) * (b - b_prime))
        for a, b in zip(gi, g)
        for a_prime, b_prime in zip(gi_prime, g_prime)
    )
    return total / size