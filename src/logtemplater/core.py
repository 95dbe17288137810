"""Core analysis pipeline: count words, templatize chunks, cluster, and rank.

Two passes over the same sources:

  1. ``count_words`` builds the corpus-wide word frequency table.
  2. ``calc_clusters`` turns every chunk into a template using that table
     (read-only from here on) and counts identical templates.

``rank_clusters`` then filters and orders the cluster table for display.
Nothing here prints; presentation lives in ``report``.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import BinaryIO, Hashable, List, Mapping, NamedTuple, Sequence

from .chunks import iter_chunks
from .config import Options
from .digest import key_for
from .normalize import clusterify, has_tokens
from .words import count_words, rewind

logger = logging.getLogger(__name__)


class RankedCluster(NamedTuple):
    """One displayed cluster, as a ``(count, template)`` pair."""
    count: int
    template: bytes


@dataclass
class AnalysisResult:
    """Outcome of one run.

    Attributes:
        unique_words: Distinct word-table keys seen in pass 1.
        unique_clusters: Distinct templates seen in pass 2 (before filtering).
        clusters: Templates that passed the display filter, highest count first.
    """
    unique_words: int
    unique_clusters: int
    clusters: List[RankedCluster]


def calc_clusters(
    sources: Sequence[BinaryIO],
    word_freq: Mapping[Hashable, int],
    options: Options,
) -> Counter[bytes]:
    """Second pass: count how often each template occurs across *sources*.

    Chunks over ``options.max_line_length`` are dropped by ``iter_chunks``;
    templates without any token are never counted.
    """
    key = key_for(options.exact_words)
    clusters: Counter[bytes] = Counter()

    for stream in sources:
        rewind(stream)
        for chunk in iter_chunks(stream, options.merge_lines, options.max_line_length):
            template = clusterify(chunk, word_freq, options.word_threshold, key)
            if not has_tokens(template):
                continue
            clusters[template] += 1

    return clusters


def rank_clusters(clusters: Mapping[bytes, int], cluster_threshold: int, show_rare: bool) -> List[RankedCluster]:
    """Filter *clusters* by count and sort them by count, descending.

    Common mode keeps ``count >= cluster_threshold``; rare mode keeps
    ``count <= cluster_threshold``. A template exactly at the threshold
    shows up in both.
    """
    if show_rare:
        selected = [RankedCluster(c, t) for t, c in clusters.items() if c <= cluster_threshold]
    else:
        selected = [RankedCluster(c, t) for t, c in clusters.items() if c >= cluster_threshold]
    selected.sort(key=lambda rc: rc.count, reverse=True)
    return selected


def analyze(sources: Sequence[BinaryIO], options: Options) -> AnalysisResult:
    """Run both passes over *sources* and rank the result.

    Every source must be seekable, since it is read once per pass. Any
    error aborts the run and nothing is returned.

    Raises:
        ConfigError: If *options* are invalid.
        OSError: On read failure or an unseekable source.
    """
    options.validate()
    key = key_for(options.exact_words)

    logger.info("pass 1: counting words in %d source(s)", len(sources))
    word_freq = count_words(sources, options.max_line_length, key, options.merge_lines)
    logger.info("found %d unique words", len(word_freq))

    frozen = MappingProxyType(word_freq)
    logger.info("pass 2: clustering (word_threshold=%d, merge_lines=%s)", options.word_threshold, options.merge_lines)
    clusters = calc_clusters(sources, frozen, options)
    logger.info("found %d clusters", len(clusters))

    ranked = rank_clusters(clusters, options.cluster_threshold, options.show_rare)
    return AnalysisResult(
        unique_words=len(word_freq),
        unique_clusters=len(clusters),
        clusters=ranked,
    )
