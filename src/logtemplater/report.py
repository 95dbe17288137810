"""Report data structures and output formatters (text and JSON).

Templates come out of the core as raw bytes. They are decoded here, strictly
as UTF-8, and a template that does not decode fails the whole report rather
than printing mangled text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .config import Options
from .core import AnalysisResult


class TemplateDecodeError(ValueError):
    """A template's bytes are not valid UTF-8 text."""

    def __init__(self, template: bytes, reason: UnicodeDecodeError) -> None:
        super().__init__(f"Cannot decode template {template[:80]!r}: {reason.reason} at byte {reason.start}")
        self.template = template


@dataclass
class ReportItem:
    """One displayed cluster."""
    count: int
    template: str


@dataclass
class Report:
    """Top-level report container with run totals and the ranked clusters."""
    unique_words: int
    unique_clusters: int
    options: Dict[str, Any]
    clusters: List[ReportItem]


def decode_template(template: bytes) -> str:
    """Decode *template* as UTF-8.

    Raises:
        TemplateDecodeError: If the bytes are not valid UTF-8.
    """
    try:
        return template.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TemplateDecodeError(template, e) from e


def build_report(result: AnalysisResult, options: Options) -> Report:
    """Decode every ranked template into a printable Report."""
    return Report(
        unique_words=result.unique_words,
        unique_clusters=result.unique_clusters,
        options=options.to_dict(),
        clusters=[ReportItem(count=rc.count, template=decode_template(rc.template)) for rc in result.clusters],
    )


def format_text_report(report: Report) -> str:
    """Render the report as ``count<TAB>template`` lines under two summary lines."""
    lines: List[str] = []
    lines.append(f"found {report.unique_words} unique words")
    lines.append(f"found {report.unique_clusters} clusters")
    for it in report.clusters:
        lines.append(f"{it.count}\t{it.template}")
    return "\n".join(lines) + "\n"


def print_text_report(report: Report) -> None:
    """Print a human-readable report to stdout."""
    print(format_text_report(report), end="")


def report_to_json(report: Report) -> str:
    """Serialize the full report to a pretty-printed JSON string."""
    return json.dumps(asdict(report), indent=2)
