"""paragraph stage: wraps the remaining text blocks in <p>."""

import re

BLOCK_SPLIT_PATTERN = re.compile(r"\n\s*\n")
BLOCK_TAG_PATTERN = re.compile(r"<(h[1-6]|hr|blockquote|ul|ol|pre|table)")


def process_paragraphs(html: str) -> str:
    """
    wraps blank-line separated blocks in <p>, turning newlines into <br>.

    Blocks that already start with a block-level tag pass through, and
    empty blocks are dropped.
    """
    paragraphs = []
    for block in BLOCK_SPLIT_PATTERN.split(html):
        block = block.strip()
        if not block:
            continue
        if BLOCK_TAG_PATTERN.match(block):
            paragraphs.append(block)
        else:
            paragraphs.append("<p>" + block.replace("\n", "<br>") + "</p>")
    return "\n\n".join(paragraphs)
