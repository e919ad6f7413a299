"""Markdown to HTML conversion entry points."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from mdhtml.document import DEFAULT_TITLE, wrap_with_html_document
from mdhtml.sanitize import validate_and_clean_input
from mdhtml.stages import PIPELINE

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error: Unable to convert markdown content."


def markdown_to_html(markdown: str) -> str:
    """
    runs every stage of the pipeline over the text, in order.

    Args:
        markdown: sanitized markdown text

    Returns:
        HTML fragment
    """
    if not markdown or not isinstance(markdown, str):
        return ""

    html = markdown
    for stage in PIPELINE:
        html = stage(html)
    return html


def convert(
    markdown_text: Any,
    wrap_with_html: bool = False,
    default_style: bool = False,
    title: Optional[str] = None,
) -> str:
    """
    converts markdown to an HTML fragment or document; never raises.

    Args:
        markdown_text: markdown input; absent or non-text input converts as ""
        wrap_with_html: if True, return a complete HTML document
        default_style: if True (and wrapping), embed the default stylesheet
        title: document title used when wrapping

    Returns:
        HTML text, or an error paragraph if conversion failed
    """
    doc_title = str(title) if title else DEFAULT_TITLE
    try:
        clean_markdown = validate_and_clean_input(markdown_text)
        html_content = markdown_to_html(clean_markdown)
        if wrap_with_html:
            return wrap_with_html_document(html_content, default_style, doc_title)
        return html_content
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Markdown conversion failed")
        error_html = f"<p>{ERROR_MESSAGE} {e}</p>"
        if wrap_with_html:
            return wrap_with_html_document(error_html, title=doc_title)
        return error_html


def run(params: Mapping[str, Any]) -> dict[str, str]:
    """
    converts using named inputs.

    Args:
        params: mapping with markdownText and optional wrapWithHtml and
            defaultStyle flags

    Returns:
        {"htmlText": ...}
    """
    html_text = convert(
        params.get("markdownText"),
        wrap_with_html=bool(params.get("wrapWithHtml", False)),
        default_style=bool(params.get("defaultStyle", False)),
    )
    return {"htmlText": html_text}
