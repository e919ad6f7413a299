"""table stage and the builder that renders GFM tables."""

import re

from mdhtml.models import Table

TABLE_PATTERN = re.compile(r"(\|.+\|\n\|[-:| ]+\|\n(?:\|.+\|\n?)*)")


def parse_table_row(row: str) -> list[str]:
    """splits a |-delimited row, dropping the outer pipes and trimming cells."""
    return [cell.strip() for cell in row.split("|")[1:-1]]


def parse_table_alignments(separator_row: str) -> list[str]:
    """derives left/center/right per column from a |:---:|---:| separator."""
    alignments = []
    for sep in parse_table_row(separator_row):
        if sep.startswith(":") and sep.endswith(":"):
            alignments.append("center")
        elif sep.endswith(":"):
            alignments.append("right")
        else:
            alignments.append("left")
    return alignments


def parse_table(header_row: str, separator_row: str, data_rows: list[str]) -> Table:
    """builds a Table from its raw header, separator and data lines."""
    return Table(
        headers=parse_table_row(header_row),
        alignments=parse_table_alignments(separator_row),
        rows=[parse_table_row(row) for row in data_rows],
    )


def _align_attr(alignments: list[str], index: int) -> str:
    """returns the style attribute for a column, or "" past the known columns."""
    if index < len(alignments) and alignments[index]:
        return f' style="text-align: {alignments[index]}"'
    return ""


def build_table_header(headers: list[str], alignments: list[str]) -> str:
    """renders <thead> with one aligned <th> per header cell."""
    parts = ["<thead>\n<tr>\n"]
    for i, header in enumerate(headers):
        parts.append(f"<th{_align_attr(alignments, i)}>{header}</th>\n")
    parts.append("</tr>\n</thead>\n")
    return "".join(parts)


def build_table_body(rows: list[list[str]], alignments: list[str]) -> str:
    """renders <tbody>; rows keep their own cell count."""
    parts = ["<tbody>\n"]
    for cells in rows:
        parts.append("<tr>\n")
        for i, cell in enumerate(cells):
            parts.append(f"<td{_align_attr(alignments, i)}>{cell}</td>\n")
        parts.append("</tr>\n")
    parts.append("</tbody>\n")
    return "".join(parts)


def render_table(table: Table) -> str:
    """renders a parsed Table to HTML."""
    return (
        "<table>\n"
        + build_table_header(table.headers, table.alignments)
        + build_table_body(table.rows, table.alignments)
        + "</table>"
    )


def build_table_html(
    header_row: str, separator_row: str, data_rows: list[str]
) -> str:
    """
    builds complete table HTML from raw rows.

    Args:
        header_row: first line, e.g. "| A | B |"
        separator_row: alignment line, e.g. "|:---|---:|"
        data_rows: remaining lines of the table

    Returns:
        <table> with <thead> and <tbody>
    """
    return render_table(parse_table(header_row, separator_row, data_rows))


def process_tables(html: str) -> str:
    """converts GFM tables; a match with fewer than two lines stays as text."""

    def replace(match: re.Match[str]) -> str:
        block = match.group(0)
        lines = block.strip().split("\n")
        if len(lines) < 2:
            return block
        return build_table_html(lines[0], lines[1], lines[2:])

    return TABLE_PATTERN.sub(replace, html)
