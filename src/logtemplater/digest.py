"""Token keys for the word frequency table.

By default tokens are keyed by their 64-bit FNV-1a digest, which keeps the
table small at the cost of rare collisions (two distinct tokens sharing a
digest are counted together). ``exact_key`` keys by the literal token bytes
for collision-free counting.
"""

from __future__ import annotations

from typing import Callable, Hashable

FNV_PRIME_64 = 1099511628211
FNV1_OFFSET_BASIS_64 = 14695981039346656037
_MASK_64 = (1 << 64) - 1

TokenKey = Callable[[bytes], Hashable]


def fnv1a_64(data: bytes) -> int:
    """Return the 64-bit FNV-1a hash of *data*."""
    h = FNV1_OFFSET_BASIS_64
    for b in data:
        h = ((h ^ b) * FNV_PRIME_64) & _MASK_64
    return h


def digest_key(token: bytes) -> int:
    return fnv1a_64(token)


def exact_key(token: bytes) -> bytes:
    return bytes(token)


def key_for(exact_words: bool) -> TokenKey:
    """Pick the token key function for the ``exact_words`` option."""
    return exact_key if exact_words else digest_key
