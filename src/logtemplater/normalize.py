"""Chunk-to-template rewriting.

Every token whose corpus frequency is below the word threshold is replaced
by a single ``*`` byte. Everything else, including each whitespace run, is
copied through unchanged, so two chunks that differ only in spacing stay
distinct templates and a template can be printed with its original layout.

The wildcard is written after the frequency lookup and never looked up
itself, so it cannot collide with a frequent token's key.
"""

from __future__ import annotations

import re
from typing import Hashable, Mapping

from .digest import TokenKey, digest_key

WILDCARD = b"*"

# A token followed by its trailing whitespace; leading whitespace is handled separately
_TOKEN_RE = re.compile(rb"([^ \t\n\r\x0b\x0c]+)([ \t\n\r\x0b\x0c]*)")
_LEADING_WS_RE = re.compile(rb"[ \t\n\r\x0b\x0c]*")


def clusterify(
    chunk: bytes,
    word_freq: Mapping[Hashable, int],
    word_threshold: int,
    key: TokenKey = digest_key,
) -> bytes:
    """Return the template for *chunk*.

    A token stays literal when ``word_freq[key(token)] >= word_threshold``;
    tokens missing from *word_freq* count as zero.
    """
    lead = _LEADING_WS_RE.match(chunk)
    pos = lead.end()
    out = bytearray(chunk[:pos])

    for m in _TOKEN_RE.finditer(chunk, pos):
        token, trailing = m.group(1), m.group(2)
        if word_freq.get(key(token), 0) < word_threshold:
            out += WILDCARD
        else:
            out += token
        out += trailing

    return bytes(out)


def has_tokens(template: bytes) -> bool:
    """False for empty or whitespace-only templates."""
    return bool(template.strip())
