"""Helpers for resolving bean content, tags and link cycles from command input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from beans.bean import Bean

STDIN_MARKER = "-"
CYCLE_ARROW = " → "


def resolve_content(value: str, file: str) -> str:
    """Return content given directly, read from stdin ("-"), or read from a file.

    Raises ValueError when both a value and a file are given; errors while
    reading the file propagate as OSError.
    """
    if value and file:
        raise ValueError("cannot use both --body and --body-file")
    if value == STDIN_MARKER:
        return sys.stdin.read()
    if value:
        return value
    if file:
        return Path(file).read_text(encoding="utf-8")
    return ""


def apply_tags(bean: Bean, tags: Iterable[str]) -> None:
    """Add each tag to the bean; raise InvalidTagError at the first invalid one."""
    for tag in tags:
        bean.add_tag(tag)


def format_cycle(path: Sequence[str]) -> str:
    """Format a cycle path for display."""
    return CYCLE_ARROW.join(path)


def merge_tags(
    existing: Iterable[str] | None,
    add: Iterable[str] | None,
    remove: Iterable[str] | None,
) -> list[str]:
    """Combine existing tags with additions, then drop removals; no duplicates."""
    tags = dict.fromkeys(existing or ())
    tags.update(dict.fromkeys(add or ()))
    for tag in remove or ():
        tags.pop(tag, None)
    return list(tags)