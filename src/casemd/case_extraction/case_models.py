"""Case extraction entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Case:
    """One test case extracted from an inspection sheet."""

    major_item: str
    medium_item: str
    minor_item: str
    validation_steps: tuple[str, ...] = ()
    checkpoints: tuple[str, ...] = ()


@dataclass(frozen=True)
class Source:
    """Named Markdown input; ``content`` is raw text or UTF-8 bytes."""

    name: str
    content: str | bytes = field(repr=False)
