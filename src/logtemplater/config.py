"""Analysis options shared by the CLI and the core pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping


class ConfigError(ValueError):
    """Raised for a malformed option value, before any input is read."""


@dataclass(frozen=True)
class Options:
    """Knobs for one analysis run.

    Attributes:
        cluster_threshold: Display boundary for template counts. Common
            templates (``count >= cluster_threshold``) are shown by default,
            rare ones (``count <= cluster_threshold``) with ``show_rare``.
        word_threshold: Minimum corpus-wide count for a token to stay
            literal; rarer tokens become ``*``.
        max_line_length: Longest accepted line / chunk in bytes, 0 for no limit.
        show_rare: Invert the display filter.
        merge_lines: Append lines starting with whitespace to the previous record.
        exact_words: Key word counts by token bytes instead of a 64-bit digest.
    """
    cluster_threshold: int = 1000
    word_threshold: int = 1000
    max_line_length: int = 1000
    show_rare: bool = False
    merge_lines: bool = False
    exact_words: bool = False

    def validate(self) -> "Options":
        """Check every field and return ``self``.

        Raises:
            ConfigError: If a count is negative or not an int, or a flag is not a bool.
        """
        for name in ("cluster_threshold", "word_threshold", "max_line_length"):
            v = getattr(self, name)
            # bool is an int subclass but never a valid count
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigError(f"{name} must be an integer, got {v!r}")
            if v < 0:
                raise ConfigError(f"{name} must be >= 0, got {v}")
        for name in ("show_rare", "merge_lines", "exact_words"):
            v = getattr(self, name)
            if not isinstance(v, bool):
                raise ConfigError(f"{name} must be true or false, got {v!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Options":
        """Build validated Options from a plain mapping.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(Options)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")
        return Options(**d).validate()


def parse_count(s: str) -> int:
    """Parse a non-negative integer option value.

    Raises:
        ConfigError: If *s* is not a base-10 integer >= 0.
    """
    try:
        n = int(s.strip(), 10)
    except ValueError:
        raise ConfigError(f"Invalid number: {s!r}")
    if n < 0:
        raise ConfigError(f"Expected a non-negative number, got {n}")
    return n
