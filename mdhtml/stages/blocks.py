"""block-level stages: fenced code, headers, rules and blockquotes."""

import html as html_lib
import re

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_]+)?\n([\s\S]*?)```")

# longest prefix first so the number of # is exact
HEADER_PATTERNS = [
    (level, re.compile("^" + "#" * level + r"\s+(.+)$", re.MULTILINE))
    for level in range(6, 0, -1)
]

DASH_RULE_PATTERN = re.compile(r"^---+$", re.MULTILINE)
STAR_RULE_PATTERN = re.compile(r"^\*\*\*+$", re.MULTILINE)

BLOCKQUOTE_PATTERN = re.compile(r"^>\s+(.+)$", re.MULTILINE)


def escape_html(text: str) -> str:
    """escapes &, <, >, double and single quotes."""
    return html_lib.escape(text).replace("&#x27;", "&#39;")


def process_code_blocks(html: str) -> str:
    """
    converts fenced code blocks to <pre><code>.

    This is the only stage that escapes its content. The language after the
    opening fence becomes a language-* class.
    """

    def replace(match: re.Match[str]) -> str:
        lang, code = match.group(1), match.group(2)
        language = f' class="language-{lang}"' if lang else ""
        return f"<pre><code{language}>{escape_html(code.strip())}</code></pre>"

    return CODE_BLOCK_PATTERN.sub(replace, html)


def process_headers(html: str) -> str:
    """converts # through ###### lines to h1-h6."""
    for level, pattern in HEADER_PATTERNS:
        html = pattern.sub(rf"<h{level}>\1</h{level}>", html)
    return html


def process_horizontal_rules(html: str) -> str:
    """converts lines of three or more - or * to <hr>."""
    html = DASH_RULE_PATTERN.sub("<hr>", html)
    return STAR_RULE_PATTERN.sub("<hr>", html)


def process_blockquotes(html: str) -> str:
    """converts single "> text" lines to blockquotes."""
    return BLOCKQUOTE_PATTERN.sub(r"<blockquote><p>\1</p></blockquote>", html)
