"""Shared pytest fixtures for the log-templater test suite.

Provides in-memory byte streams, on-disk log files, and a small realistic
corpus so individual test modules stay focused on assertions rather than
boilerplate setup.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest


@pytest.fixture
def make_stream():
    """Factory fixture that turns text or bytes into a seekable binary stream.

    Text is encoded as UTF-8. Lists are joined with newlines and get a
    trailing newline, like a real log file.

    Example::

        stream = make_stream(["a b", "c d"])
    """

    def _make(content) -> io.BytesIO:
        if isinstance(content, list):
            content = "\n".join(content) + "\n"
        if isinstance(content, str):
            content = content.encode("utf-8")
        return io.BytesIO(content)

    return _make


@pytest.fixture
def write_log(tmp_path: Path):
    """Factory fixture that writes a log file under ``tmp_path`` and returns its path."""

    def _write(name: str, lines) -> Path:
        p = tmp_path / name
        p.write_bytes(("\n".join(lines) + "\n").encode("utf-8"))
        return p

    return _write


@pytest.fixture
def connect_corpus() -> list[str]:
    """950 connects from each of two hosts.

    ``connect`` and ``ok`` occur 1900 times each while each IP occurs only
    950 times, so with the default word threshold of 1000 the IPs become
    wildcards and everything collapses into ``connect * ok``.
    """
    return ["connect 1.2.3.4 ok"] * 950 + ["connect 5.6.7.8 ok"] * 950


@pytest.fixture
def sample_lines() -> list[str]:
    """A short mixed log with repeating structure and variable fields."""
    return [
        "Jan 15 10:30:46 web sshd[101]: Failed password for root from 10.0.0.1",
        "Jan 15 10:30:47 web sshd[102]: Failed password for root from 10.0.0.2",
        "Jan 15 10:30:48 web sshd[103]: Failed password for admin from 10.0.0.3",
        "Jan 15 10:30:49 web cron[7]: job started",
        "Jan 15 10:30:50 web cron[8]: job started",
    ]
