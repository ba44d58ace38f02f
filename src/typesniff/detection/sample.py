# topmark:header:start
#
#   project      : TypeSniff
#   file         : sample.py
#   file_relpath : src/typesniff/detection/sample.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic, centre-biased sampling.

`normal_distributed` picks at most ``k`` items from a sequence, favouring the
middle. Target indices are the quantiles at ``(i + 0.5) / k`` of a normal
distribution centred on the middle index with ``sigma = n / 6`` (so three
standard deviations on either side span the sequence). Rounded indices that
collide are moved to the nearest free index, preferring the side closer to the
centre. The selection depends on ``(n, k)`` only, and is returned in the
original order.
"""

from __future__ import annotations

from statistics import NormalDist
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def _nearest_free(target: int, taken: set[int], n: int, centre: float) -> int:
    """Return the free index nearest to ``target`` (ties go towards ``centre``)."""
    for distance in range(1, n):
        candidates: list[int] = [
            i for i in (target - distance, target + distance) if 0 <= i < n and i not in taken
        ]
        if candidates:
            return min(candidates, key=lambda i: abs(i - centre))
    raise ValueError("no free index left")  # unreachable while len(taken) < n


def sample_indices(n: int, k: int) -> list[int]:
    """Return the sorted indices selected from a population of ``n`` items.

    Args:
        n (int): Population size.
        k (int): Requested sample size.

    Returns:
        list[int]: ``min(n, max(k, 0))`` distinct indices in ascending order.
    """
    if k <= 0 or n <= 0:
        return []
    if n <= k:
        return list(range(n))

    centre: float = (n - 1) / 2
    dist = NormalDist(mu=centre, sigma=n / 6)
    taken: set[int] = set()
    for i in range(k):
        target: int = min(max(round(dist.inv_cdf((i + 0.5) / k)), 0), n - 1)
        if target in taken:
            target = _nearest_free(target, taken, n, centre)
        taken.add(target)
    return sorted(taken)


def normal_distributed(items: Sequence[T], k: int) -> list[T]:
    """Select at most ``k`` items from ``items``, biased towards the middle.

    Args:
        items (Sequence[T]): Population, in a meaningful (e.g. sorted) order.
        k (int): Maximum number of items to return.

    Returns:
        list[T]: The selected items in their original order. The whole population
            when ``len(items) <= k``; empty when ``k <= 0``.
    """
    return [items[i] for i in sample_indices(len(items), k)]
