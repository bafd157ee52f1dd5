"""Small standalone puzzles: capital usage and the race car problem."""

from __future__ import annotations

from functools import lru_cache


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def detect_capital_use(word: str) -> bool:
    """Return True when the word is all capitals, all lower case, or capitalised."""
    if all(_is_upper(c) for c in word):
        return True
    if not any(_is_upper(c) for c in word):
        return True
    return _is_upper(word[0]) and not any(_is_upper(c) for c in word[1:])


@lru_cache(maxsize=None)
def _racecar(target: int) -> int:
    if target == 0:
        return 0
    n = target.bit_length()
    full = (1 << n) - 1
    if full == target:
        return n
    best = n + 1 + _racecar(full - target)
    for m in range(n - 1):
        position = ((1 << (n - 1)) - 1) - ((1 << m) - 1)
        best = min(best, (n - 1) + 1 + m + 1 + _racecar(target - position))
    return best


def racecar(target: int) -> int:
    """Return the fewest accelerate/reverse instructions to reach ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    return _racecar(target)