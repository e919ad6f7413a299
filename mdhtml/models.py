"""Data models for tables and batch conversion jobs."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Table:
    """GFM table recognized in the text."""

    headers: list[str]
    alignments: list[str]  # "left", "center" or "right" per separator column
    rows: list[list[str]] = field(default_factory=list)


@dataclass
class ConversionJob:
    """One markdown document to convert."""

    name: str
    markdown_text: Optional[str]
    wrap_with_html: bool = False
    default_style: bool = False
    title: Optional[str] = None
