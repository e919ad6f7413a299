"""tests for the conversion entry points."""

import logging
from typing import Any

import pytest

from mdhtml.converter import convert, markdown_to_html, run
from mdhtml.sanitize import TRUNCATION_MARKER


def test_header() -> None:
    """converts # Title to h1."""
    assert convert("# Title") == "<h1>Title</h1>"


def test_h6() -> None:
    """converts ###### x to h6."""
    assert convert("###### x") == "<h6>x</h6>"


def test_seven_hashes_stay_text() -> None:
    """does not produce a header for seven hashes."""
    assert convert("####### x") == "<p>####### x</p>"


def test_inline_code() -> None:
    """converts inline code inside a paragraph."""
    assert convert("`code`") == "<p><code>code</code></p>"


def test_inline_code_content_is_not_escaped() -> None:
    """passes HTML inside inline code through unescaped."""
    assert convert("`<b>`") == "<p><code><b></code></p>"


def test_fenced_code_block() -> None:
    """renders fenced code with escaped content and language class."""
    result = convert("```js\nif (a < b) {}\n```")
    assert result == '<pre><code class="language-js">if (a &lt; b) {}</code></pre>'


def test_table_alignment() -> None:
    """renders left and right aligned table columns."""
    result = convert("| A | B |\n|:---|---:|\n| 1 | 2 |")
    assert result.startswith("<table>")
    assert '<td style="text-align: left">1</td>' in result
    assert '<td style="text-align: right">2</td>' in result


def test_full_document() -> None:
    """converts a mix of block and inline markup."""
    markdown = "# Title\n\nSome **bold** and *italic* text.\n\n- one\n- two"
    assert convert(markdown) == (
        "<h1>Title</h1>\n\n"
        "<p>Some <strong>bold</strong> and <em>italic</em> text.</p>\n\n"
        "<ul>\n<li>one</li>\n<li>two</li>\n</ul>"
    )


def test_ordered_list() -> None:
    """passes ordered lists through the paragraph stage."""
    assert convert("1. first\n2. second") == (
        "<ol>\n<li>first</li>\n<li>second</li>\n</ol>"
    )


def test_blockquote_and_strikethrough() -> None:
    """converts quotes and struck text."""
    result = convert("> quote\n\n~~old~~ new")
    assert result == (
        "<blockquote><p>quote</p></blockquote>\n\n<p><del>old</del> new</p>"
    )


def test_link_with_title() -> None:
    """converts titled links inside paragraphs."""
    result = convert('See [docs](https://example.com "Docs").')
    assert result == (
        '<p>See <a href="https://example.com" title="Docs">docs</a>.</p>'
    )


def test_image_without_alt() -> None:
    """converts images with empty alt text."""
    assert convert("![](pic.png)") == '<p><img src="pic.png" alt=""></p>'


def test_links_stage_claims_images_with_alt_text() -> None:
    """runs links before images, so alt-text images become anchors."""
    assert convert("![logo](logo.png)") == '<p>!<a href="logo.png">logo</a></p>'


def test_removes_scripts_before_markdown() -> None:
    """strips script blocks before any markdown rule applies."""
    result = convert("# Hi\n<script>alert('x')</script>\nbody")
    assert result == "<h1>Hi</h1>\n\n<p>body</p>"


def test_removes_iframes() -> None:
    """strips iframe blocks regardless of case."""
    assert convert("<IFRAME src='x'></IFRAME>text") == "<p>text</p>"


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", 0, 1.5, [], {"a": 1}, "***", "|", "```", "[a](b", "_", "1."],
)
def test_always_returns_string(value: Any) -> None:
    """returns a string for any input."""
    assert isinstance(convert(value), str)


def test_absent_input_is_empty_fragment() -> None:
    """converts None to an empty fragment."""
    assert convert(None) == ""


def test_truncated_input(monkeypatch: pytest.MonkeyPatch) -> None:
    """renders the truncation marker as its own paragraph."""
    monkeypatch.setattr("mdhtml.sanitize.MAX_LENGTH", 10)
    result = convert("a" * 15)
    assert result == f"<p>aaaaaaaaaa</p>\n\n<p>{TRUNCATION_MARKER}</p>"


def test_fragment_when_not_wrapped() -> None:
    """returns a bare fragment by default."""
    assert "<html" not in convert("# T")


def test_wrapped_document() -> None:
    """returns a complete document when wrapping."""
    result = convert("# T", wrap_with_html=True)
    assert result.startswith("<!DOCTYPE html>")
    assert "<body>\n<h1>T</h1>\n</body>" in result
    assert "<style>" not in result


def test_wrapped_document_with_style() -> None:
    """embeds the stylesheet when requested."""
    result = convert("# T", wrap_with_html=True, default_style=True)
    assert "<style>" in result


def test_style_ignored_without_wrap() -> None:
    """ignores default_style for fragments."""
    assert convert("# T", default_style=True) == "<h1>T</h1>"


def test_custom_title() -> None:
    """uses the given document title."""
    result = convert("x", wrap_with_html=True, title="Notes")
    assert "<title>Notes</title>" in result


def _boom(_markdown: str) -> str:
    raise RuntimeError("boom")


def test_failure_yields_error_paragraph(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """returns an error paragraph and logs the failure."""
    monkeypatch.setattr("mdhtml.converter.markdown_to_html", _boom)

    with caplog.at_level(logging.ERROR, logger="mdhtml.converter"):
        result = convert("# T")

    assert result == "<p>Error: Unable to convert markdown content. boom</p>"
    assert "Markdown conversion failed" in caplog.text


def test_failure_is_wrapped_when_requested(monkeypatch: pytest.MonkeyPatch) -> None:
    """wraps the error paragraph in a document when wrapping."""
    monkeypatch.setattr("mdhtml.converter.markdown_to_html", _boom)

    result = convert("# T", wrap_with_html=True, default_style=True)

    assert result.startswith("<!DOCTYPE html>")
    assert "Error: Unable to convert markdown content." in result
    assert result.endswith("</html>")
    assert "<style>" not in result


def test_markdown_to_html_empty() -> None:
    """returns empty string for empty text."""
    assert markdown_to_html("") == ""


def test_run_named_inputs() -> None:
    """maps named inputs to htmlText."""
    assert run({"markdownText": "**hi**"}) == {
        "htmlText": "<p><strong>hi</strong></p>"
    }


def test_run_defaults() -> None:
    """treats missing inputs as empty and unwrapped."""
    assert run({}) == {"htmlText": ""}


def test_run_wraps_with_style() -> None:
    """honors wrapWithHtml and defaultStyle."""
    result = run({"markdownText": "x", "wrapWithHtml": True, "defaultStyle": True})
    assert result["htmlText"].startswith("<!DOCTYPE html>")
    assert "<style>" in result["htmlText"]


def test_crlf_horizontal_rule() -> None:
    """recognizes a rule line ending in CRLF."""
    assert convert("---\r\ntext") == "<hr>\ntext"


def test_crlf_header_has_no_stray_carriage_return() -> None:
    """keeps CR out of header text."""
    assert convert("# T\r\n\r\nbody") == "<h1>T</h1>\n\n<p>body</p>"


def test_crlf_list_and_table() -> None:
    """converts lists and tables written with CRLF line endings."""
    result = convert("- a\r\n- b\r\n\r\n| A |\r\n|---:|\r\n| 1 |")
    assert result.startswith("<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n\n<table>")
    assert '<td style="text-align: right">1</td>' in result
    assert "\r" not in result


def test_non_ascii_digits_do_not_start_a_list() -> None:
    """treats only ASCII digits as list numbers."""
    assert convert("١. item") == "<p>١. item</p>"
