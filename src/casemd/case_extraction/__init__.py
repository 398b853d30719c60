"""Case extraction exports."""

from .case_models import Case, Source
from .markdown_case_parser import CaseScanState, extract_cases, extract_headings

__all__ = [
    "Case",
    "Source",
    "CaseScanState",
    "extract_cases",
    "extract_headings",
]
