"""CLI entry point for log-templater.

Parses arguments, opens the input files, runs the two-pass analysis, and
prints the ranked templates as text or JSON.
"""

from __future__ import annotations

import argparse
import sys
import tracemalloc

from .config import Options, parse_count
from .core import analyze
from .log import LOG_LEVEL_ENV, LOG_LEVELS, configure_logging
from .report import build_report, format_text_report, report_to_json
from .sources import open_sources


def _count_arg(s: str) -> int:
    try:
        return parse_count(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = argparse.ArgumentParser(
        prog="log-templater",
        description="Find recurring line templates in log files; rare words become '*'.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Log files to analyze ('-' for stdin)")

    parser.add_argument("-c", "--cluster-threshold", type=_count_arg, default=1000,
                        help="Cluster appearance threshold for display")
    parser.add_argument("-w", "--word-threshold", type=_count_arg, default=1000,
                        help="Minimum frequency of a word to be kept in a cluster")
    parser.add_argument("--max-line-length", type=_count_arg, default=1000,
                        help="Discard lines (or merged records) longer than this many bytes; 0 disables")
    parser.add_argument("-r", "--rare", action="store_true", help="Display only clusters at or below the threshold")
    parser.add_argument("--merge-lines", action="store_true",
                        help="Treat lines starting with whitespace as continuations of the previous line")
    parser.add_argument("--exact-words", action="store_true",
                        help="Count words by exact content instead of a 64-bit hash (no collisions, more memory)")

    parser.add_argument("-m", "--mem-stats", action="store_true", help="Print peak memory usage to stderr at the end")
    parser.add_argument("--json", action="store_true", help="Output report as JSON")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)")

    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> Options:
    return Options(
        cluster_threshold=args.cluster_threshold,
        word_threshold=args.word_threshold,
        max_line_length=args.max_line_length,
        show_rare=args.rare,
        merge_lines=args.merge_lines,
        exact_words=args.exact_words,
    ).validate()


def main(argv=None) -> None:
    """Entry point: open files, run both passes, print the report."""
    args = parse_args(argv)

    if args.mem_stats:
        tracemalloc.start()

    try:
        configure_logging(args.log_level)
        options = options_from_args(args)
        with open_sources(args.files) as streams:
            result = analyze(streams, options)
        # Render fully before printing so a decode error leaves no partial output
        report = build_report(result, options)
        out = report_to_json(report) + "\n" if args.json else format_text_report(report)
    except (RuntimeError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    sys.stdout.write(out)

    if args.mem_stats:
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        print(f"memory: current={current} bytes peak={peak} bytes", file=sys.stderr)


if __name__ == "__main__":
    main()
