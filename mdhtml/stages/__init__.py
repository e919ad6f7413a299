"""ordered markdown rewrite stages."""

from typing import Callable

from mdhtml.stages.blocks import (
    process_blockquotes,
    process_code_blocks,
    process_headers,
    process_horizontal_rules,
)
from mdhtml.stages.inline import (
    process_bold_text,
    process_images,
    process_inline_code,
    process_italic_text,
    process_links,
    process_strikethrough,
)
from mdhtml.stages.lists import process_lists
from mdhtml.stages.paragraphs import process_paragraphs
from mdhtml.stages.tables import process_tables

Stage = Callable[[str], str]

# order is significant: later patterns see the HTML emitted by earlier ones
PIPELINE: tuple[Stage, ...] = (
    process_code_blocks,
    process_headers,
    process_horizontal_rules,
    process_blockquotes,
    process_lists,
    process_bold_text,
    process_italic_text,
    process_strikethrough,
    process_inline_code,
    process_links,
    process_images,
    process_tables,
    process_paragraphs,
)

__all__ = [
    "PIPELINE",
    "Stage",
    "process_blockquotes",
    "process_bold_text",
    "process_code_blocks",
    "process_headers",
    "process_horizontal_rules",
    "process_images",
    "process_inline_code",
    "process_italic_text",
    "process_links",
    "process_lists",
    "process_paragraphs",
    "process_strikethrough",
    "process_tables",
]
