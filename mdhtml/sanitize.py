"""input sanitation applied before any markdown rule runs."""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# 100MB of characters caps the cost of the regex passes downstream
MAX_LENGTH = 104857600
TRUNCATION_MARKER = "[Content truncated due to length limit]"

SCRIPT_PATTERN = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
IFRAME_PATTERN = re.compile(r"<iframe[^>]*>[\s\S]*?</iframe>", re.IGNORECASE)


def validate_and_clean_input(markdown: Any) -> str:
    """
    returns text that is safe to hand to the conversion pipeline.

    Args:
        markdown: raw input; anything that isn't a non-empty string becomes ""

    Returns:
        text with script/iframe regions removed, CRLF and CR line endings
        turned into LF, truncated to MAX_LENGTH
    """
    if not markdown or not isinstance(markdown, str):
        return ""

    cleaned = SCRIPT_PATTERN.sub("", markdown)
    cleaned = IFRAME_PATTERN.sub("", cleaned)

    # every later pattern treats \n as the only line end
    cleaned = cleaned.replace("\r\n", "\n").replace("\r", "\n")

    if len(cleaned) > MAX_LENGTH:
        logger.warning(
            "Input truncated from %d to %d characters", len(cleaned), MAX_LENGTH
        )
        cleaned = f"{cleaned[:MAX_LENGTH]}\n\n{TRUNCATION_MARKER}"

    return cleaned
