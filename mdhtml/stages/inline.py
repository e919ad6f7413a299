"""inline stages: emphasis, strikethrough, inline code, links and images."""

import re

BOLD_STAR_PATTERN = re.compile(r"\*\*(.*?)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"__(.*?)__")
ITALIC_STAR_PATTERN = re.compile(r"\*(.*?)\*")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"_(.*?)_")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")

LINK_WITH_TITLE_PATTERN = re.compile(r'\[([^\]]+)\]\(([^)]+)\s+"([^"]+)"\)')
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
IMAGE_WITH_TITLE_PATTERN = re.compile(r'!\[([^\]]*)\]\(([^)]+)\s+"([^"]+)"\)')
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")


def process_bold_text(html: str) -> str:
    """converts **text** and __text__ to <strong>."""
    html = BOLD_STAR_PATTERN.sub(r"<strong>\1</strong>", html)
    return BOLD_UNDERSCORE_PATTERN.sub(r"<strong>\1</strong>", html)


def process_italic_text(html: str) -> str:
    """converts *text* and _text_ to <em>; must run after bold."""
    html = ITALIC_STAR_PATTERN.sub(r"<em>\1</em>", html)
    return ITALIC_UNDERSCORE_PATTERN.sub(r"<em>\1</em>", html)


def process_strikethrough(html: str) -> str:
    """converts ~~text~~ to <del>."""
    return STRIKETHROUGH_PATTERN.sub(r"<del>\1</del>", html)


def process_inline_code(html: str) -> str:
    """converts `text` to <code>; the content is left unescaped."""
    return INLINE_CODE_PATTERN.sub(r"<code>\1</code>", html)


def process_links(html: str) -> str:
    """converts [text](url) and [text](url "title") to anchors."""
    html = LINK_WITH_TITLE_PATTERN.sub(r'<a href="\2" title="\3">\1</a>', html)
    return LINK_PATTERN.sub(r'<a href="\2">\1</a>', html)


def process_images(html: str) -> str:
    """
    converts ![alt](src) and ![alt](src "title") to <img>.

    Runs after process_links, which already claims any image with non-empty
    alt text, so in the full pipeline only ![](src) reaches this stage.
    """
    html = IMAGE_WITH_TITLE_PATTERN.sub(
        r'<img src="\2" alt="\1" title="\3">', html
    )
    return IMAGE_PATTERN.sub(r'<img src="\2" alt="\1">', html)
