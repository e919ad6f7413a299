"""list stage: flat ordered and unordered lists."""

import re
from typing import Callable

# items may follow each other on separate lines or inline on one line;
# item numbers are ASCII digits only
ORDERED_LIST_PATTERN = re.compile(
    r"^([0-9]+\.\s+.+(?:\s+[0-9]+\.\s+.+)*"
    r"(?:\n[0-9]+\.\s+.+(?:\s+[0-9]+\.\s+.+)*)*)",
    re.MULTILINE,
)
ORDERED_ITEM_PATTERN = re.compile(r"[0-9]+\.\s*[^0-9]+?(?=[0-9]+\.|$)")
ORDERED_ITEM_TEXT = re.compile(r"[0-9]+\.\s*(.+)$")

UNORDERED_LIST_PATTERN = re.compile(
    r"^([-*+]\s+.+(?:\s+[-*+]\s+.+)*(?:\n[-*+]\s+.+(?:\s+[-*+]\s+.+)*)*)",
    re.MULTILINE,
)
UNORDERED_ITEM_PATTERN = re.compile(r"[-*+]\s*[^-*+]+?(?=[-*+]|$)")
UNORDERED_ITEM_TEXT = re.compile(r"[-*+]\s*(.+)$")


def _list_replacer(
    tag: str, item_pattern: re.Pattern[str], item_text: re.Pattern[str]
) -> Callable[[re.Match[str]], str]:
    """builds a re.sub callback that flattens a matched region into one list."""

    def replace(match: re.Match[str]) -> str:
        region = match.group(0)
        items: list[str] = []

        for line in region.split("\n"):
            for item in item_pattern.findall(line):
                text = item_text.match(item)
                if text:
                    items.append(f"<li>{text.group(1).strip()}</li>")

        if not items:
            return region
        return f"<{tag}>\n" + "\n".join(items) + f"\n</{tag}>"

    return replace


def process_lists(html: str) -> str:
    """
    converts runs of "N. item" and "-/*/+ item" to <ol> and <ul>.

    Nesting is not recognized: every item in a run lands in a single flat
    list. Ordered lists are converted first.
    """
    html = ORDERED_LIST_PATTERN.sub(
        _list_replacer("ol", ORDERED_ITEM_PATTERN, ORDERED_ITEM_TEXT), html
    )
    return UNORDERED_LIST_PATTERN.sub(
        _list_replacer("ul", UNORDERED_ITEM_PATTERN, UNORDERED_ITEM_TEXT), html
    )
