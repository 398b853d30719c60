"""Conversion run exports."""

from .conversion_run_use_case import (
    ConversionRunError,
    execute_conversion,
    execute_headings,
    read_sources,
)
from .run_contracts import ConversionOutcome, ConversionRequest, HeadingsRequest

__all__ = [
    "ConversionOutcome",
    "ConversionRequest",
    "ConversionRunError",
    "HeadingsRequest",
    "execute_conversion",
    "execute_headings",
    "read_sources",
]
