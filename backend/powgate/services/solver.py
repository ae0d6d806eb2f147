"""Reference client-side solver. Brute-forces decimal counters from zero."""

import hashlib
import itertools
from dataclasses import dataclass


@dataclass(frozen=True)
class Solution:
    data: str
    added_value: str
    hash: str


def solve_challenge(data: str, criteria: str, max_iterations: int | None = None) -> Solution:
    """Find the first counter whose sha256(data + counter) starts with criteria."""
    prefix = data.encode()
    counters = itertools.count() if max_iterations is None else range(max_iterations)

    for counter in counters:
        added_value = str(counter)
        digest = hashlib.sha256(prefix + added_value.encode()).hexdigest()
        if digest.startswith(criteria):
            return Solution(data=data, added_value=added_value, hash=digest)

    raise RuntimeError("Failed to solve PoW within iteration limit")
