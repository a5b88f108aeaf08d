"""Signed permutation generator used by the Leibniz determinant."""

from __future__ import annotations

from typing import Iterator


def heap_permutations(n: int) -> Iterator[tuple[tuple[int, ...], int]]:
    """
    Lazily yield every permutation of ``0..n-1`` with its sign.

    Iterative Heap's algorithm: the identity comes first with sign +1 and
    each following permutation differs from the previous one by a single
    transposition, so the sign flips on every step. At ``level`` (a prefix
    of length ``level + 1``) the element at ``level`` is swapped with index
    0 when the prefix length is odd and with ``counters[level]`` when it is
    even.

    Args:
        n: Number of elements (0 yields the single empty permutation)

    Yields:
        (permutation, sign) with sign in {+1, -1}

    Example:
        >>> list(heap_permutations(2))
        [((0, 1), 1), ((1, 0), -1)]
    """
    if n < 0:
        raise ValueError(f"Permutation size must be non-negative, got {n}")

    permutation = list(range(n))
    sign = 1
    yield tuple(permutation), sign

    counters = [0] * n
    level = 1
    while level < n:
        if counters[level] < level:
            partner = 0 if level % 2 == 0 else counters[level]
            permutation[partner], permutation[level] = permutation[level], permutation[partner]
            sign = -sign
            yield tuple(permutation), sign
            counters[level] += 1
            level = 1
        else:
            counters[level] = 0
            level += 1
