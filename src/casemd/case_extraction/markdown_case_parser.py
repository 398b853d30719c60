"""Markdown inspection sheet parser."""

from __future__ import annotations

import io
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import IO

from .case_models import Case

MAJOR_PREFIX = "## "
MEDIUM_PREFIX = "### "
MINOR_PREFIX = "#### "
TITLE_PREFIX = "# "

ORDERED_LIST_REGEX = re.compile(r"^\d+\.\s+(.*)", re.ASCII)
TASK_LIST_REGEX = re.compile(r"^\*\s+\[[ x]\]\s+(.*)", re.ASCII)

MarkdownInput = str | bytes | IO[str] | IO[bytes]


@dataclass
class _OpenCase:
    """Case still collecting list items."""

    major_item: str
    medium_item: str
    minor_item: str
    validation_steps: list[str] = field(default_factory=list)
    checkpoints: list[str] = field(default_factory=list)

    def freeze(self) -> Case:
        return Case(
            major_item=self.major_item,
            medium_item=self.medium_item,
            minor_item=self.minor_item,
            validation_steps=tuple(self.validation_steps),
            checkpoints=tuple(self.checkpoints),
        )


@dataclass
class CaseScanState:
    """Mutable state of one extraction pass.

    ``major_item`` and ``medium_item`` hold the hierarchy context seen so far;
    ``current_case`` is the case receiving list items, if any.
    """

    major_item: str = ""
    medium_item: str = ""
    current_case: _OpenCase | None = None
    cases: list[Case] = field(default_factory=list)

    def feed(self, line: str) -> None:
        """Advance the state machine by one line (without its terminator)."""
        if line.startswith(MAJOR_PREFIX):
            self.major_item = line[len(MAJOR_PREFIX) :]
            self.medium_item = ""
            return
        if line.startswith(MEDIUM_PREFIX):
            self.medium_item = line[len(MEDIUM_PREFIX) :]
            return
        if line.startswith(MINOR_PREFIX):
            self._close_case()
            self.current_case = _OpenCase(
                major_item=self.major_item,
                medium_item=self.medium_item,
                minor_item=line[len(MINOR_PREFIX) :],
            )
            return

        if self.current_case is None:
            return
        trimmed = line.strip()
        step = ORDERED_LIST_REGEX.match(trimmed)
        if step:
            self.current_case.validation_steps.append(step.group(1))
            return
        if TASK_LIST_REGEX.match(trimmed):
            # Checkpoints keep their "* [ ]" / "* [x]" marker for reviewers.
            self.current_case.checkpoints.append(trimmed)

    def finish(self) -> list[Case]:
        """Close any open case and return every case in input order."""
        self._close_case()
        return list(self.cases)

    def _close_case(self) -> None:
        if self.current_case is not None:
            self.cases.append(self.current_case.freeze())
            self.current_case = None


def extract_cases(markdown: MarkdownInput) -> list[Case]:
    """Extract test cases from Markdown text.

    Args:
      markdown: Markdown as text, UTF-8 bytes, or a readable stream.

    Returns:
      Cases in the order their level-4 headings appear.

    Raises:
      OSError: If reading the stream fails.
      UnicodeDecodeError: If byte input is not valid UTF-8.
    """
    state = CaseScanState()
    for line in iter_lines(markdown):
        state.feed(line)
    return state.finish()


def extract_headings(markdown: MarkdownInput) -> list[str]:
    """Collect the text of every level-1 heading."""
    headings: list[str] = []
    for line in iter_lines(markdown):
        trimmed = line.strip()
        if trimmed.startswith(TITLE_PREFIX):
            headings.append(trimmed[len(TITLE_PREFIX) :].strip())
    return headings


def iter_lines(markdown: MarkdownInput) -> Iterator[str]:
    """Yield lines of ``markdown`` with their line terminators removed."""
    if isinstance(markdown, bytes):
        markdown = markdown.decode("utf-8")
    lines: Iterable[str | bytes] = io.StringIO(markdown) if isinstance(markdown, str) else markdown
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        yield line.rstrip("\r\n")
