"""Batch conversion of markdown files, archives and JSON job files."""

import logging
import re
import tempfile
import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Optional

import ijson

from mdhtml.converter import convert
from mdhtml.models import ConversionJob
from mdhtml.progress import ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown", ".txt")
JOB_SUFFIX = ".json"
HTML_SUFFIXES = (".html", ".htm")


def _is_source_file(path: Path) -> bool:
    suffix = path.suffix.lower()
    return suffix in MARKDOWN_SUFFIXES or suffix == JOB_SUFFIX


def discover_sources(source: Path, extract_dir: Optional[Path] = None) -> list[Path]:
    """
    discovers markdown and job files from source path.

    Args:
        source: path to a markdown file, JSON job file, directory or ZIP archive
        extract_dir: directory that receives the members of a ZIP archive;
            the caller owns its cleanup

    Returns:
        list of paths to markdown and JSON job files

    Raises:
        FileNotFoundError: if source doesn't exist
        ValueError: if source is a ZIP archive and no extract_dir was given
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        if source.suffix.lower() == ".zip":
            if extract_dir is None:
                raise ValueError(f"{source.name}: ZIP archives need an extract_dir")
            return _extract_zip(source, extract_dir)
        if _is_source_file(source):
            return [source]
        return []

    if source.is_dir():
        return sorted(
            p for p in source.iterdir() if p.is_file() and _is_source_file(p)
        )

    return []


def _extract_zip(zip_path: Path, extract_dir: Path) -> list[Path]:
    """extracts markdown and job files from ZIP archive into extract_dir."""
    extract_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path, "r") as zf:
        for name in zf.namelist():
            # extracts using only the filename, preventing path traversal
            safe_name = Path(name).name
            if not safe_name or not _is_source_file(Path(safe_name)):
                continue
            target_path = extract_dir / safe_name
            target_path.write_bytes(zf.read(zf.getinfo(name)))

    return sorted(p for p in extract_dir.iterdir() if _is_source_file(p))


def _peek_first_char(f: Any) -> int:
    """returns first non-whitespace byte from file."""
    while True:
        char = f.read(1)
        if not char:
            return 0
        if not char.isspace():
            return int(char[0])


def _flag(params: dict[str, Any], key: str, default: bool, name: str) -> bool:
    """reads a boolean job flag; JSON strings such as "false" are rejected."""
    value = params.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"job {name}: {key} must be true or false, got {value!r}")
    return value


def _job_from_params(
    params: Any, name: str, wrap_with_html: bool, default_style: bool
) -> ConversionJob:
    """builds a job from a decoded job-file object, applying CLI defaults."""
    if not isinstance(params, dict):
        raise ValueError(f"job {name} is not an object")

    title = params.get("title")
    return ConversionJob(
        name=str(params.get("name") or name),
        markdown_text=params.get("markdownText"),
        wrap_with_html=_flag(params, "wrapWithHtml", wrap_with_html, name),
        default_style=_flag(params, "defaultStyle", default_style, name),
        title=str(title) if title is not None else None,
    )


def _iter_params(path: Path) -> Iterator[tuple[str, Any]]:
    """
    yields (fallback name, raw job object) pairs from one source file.

    Markdown files yield a single object; job-file arrays are stream-parsed
    so large job files are never fully loaded.
    """
    if path.suffix.lower() != JOB_SUFFIX:
        yield path.stem, {"markdownText": path.read_text(encoding="utf-8")}
        return

    with open(path, "rb") as f:
        first_char = _peek_first_char(f)
        f.seek(0)

        if first_char == ord("{"):
            for params in ijson.items(f, ""):
                yield path.stem, params
        elif first_char == ord("["):
            for i, params in enumerate(ijson.items(f, "item")):
                yield f"{path.stem}-{i}", params
        else:
            raise ValueError(f"{path.name} is not a JSON object or array")


def iter_jobs(
    path: Path, wrap_with_html: bool = False, default_style: bool = False
) -> Iterator[ConversionJob]:
    """
    yields conversion jobs from a markdown file or a JSON job file.

    A job file holds either one object or an array of objects with the
    markdownText, wrapWithHtml, defaultStyle, name and title keys.

    Raises:
        ValueError: if a job file is neither an object nor an array, or a
            job is not an object or carries a non-boolean flag
        ijson.JSONError: if a job file is malformed
    """
    for name, params in _iter_params(path):
        yield _job_from_params(params, name, wrap_with_html, default_style)


def safe_filename(name: str) -> str:
    """turns a document name into a file name stem."""
    safe = re.sub(r"[^\w\s-]", "", name)
    safe = re.sub(r"[-\s]+", "_", safe).strip("_")
    return safe or "document"


def _unique_target(target: Path, written: set[Path]) -> Path:
    """returns target, or target_2, target_3... if this run already wrote it."""
    candidate = target
    n = 2
    while candidate in written:
        candidate = target.with_name(f"{target.stem}_{n}{target.suffix}")
        n += 1
    written.add(candidate)
    return candidate


def _write_job(
    job: ConversionJob,
    target: Path,
    title: Optional[str],
    handler: ProgressHandler,
) -> bool:
    """converts one job and writes its HTML; returns False on I/O failure."""
    html_text = convert(
        job.markdown_text,
        wrap_with_html=job.wrap_with_html,
        default_style=job.default_style,
        title=job.title or title,
    )

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html_text, encoding="utf-8")
    except OSError as e:
        handler.log_error(f"Failed: {job.name}: {e}")
        return False

    logger.debug("Wrote %s", target)
    return True


def _convert_file(
    file_path: Path,
    output_dir: Path,
    output_file: Optional[Path],
    written: set[Path],
    options: dict[str, Any],
    handler: ProgressHandler,
) -> None:
    """converts every job of one source file, recording each outcome."""
    handler.start_source(file_path.name)
    try:
        for name, params in _iter_params(file_path):
            try:
                job = _job_from_params(
                    params, name, options["wrap_with_html"], options["default_style"]
                )
            except ValueError as e:
                handler.log_error(f"Failed: {file_path.name}: {e}")
                handler.record(name, ok=False)
                continue

            target = output_file or output_dir / f"{safe_filename(job.name)}.html"
            unique = _unique_target(target, written)
            if unique != target:
                handler.log_info(
                    f"{job.name}: {target.name} already written, using {unique.name}"
                )
            ok = _write_job(job, unique, options["title"], handler)
            handler.record(job.name, ok)
    except (OSError, ValueError, ijson.JSONError) as e:
        handler.fail_source(f"Failed: {file_path.name}: {e}")


def convert_sources(
    source: Path,
    output: Optional[Path] = None,
    wrap_with_html: bool = False,
    default_style: bool = False,
    title: Optional[str] = None,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    converts every markdown document found at source to an HTML file.

    Output names that collide within one run get a numeric suffix, so no
    document overwrites another.

    Args:
        source: path to markdown file, JSON job file, directory or ZIP archive
        output: output directory, or an .html file when source is a single
            markdown file (defaults to the source's directory)
        wrap_with_html: default for wrapping output in a full document
        default_style: default for embedding the built-in stylesheet
        title: document title for wrapped output
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)
    """
    options = {
        "wrap_with_html": wrap_with_html,
        "default_style": default_style,
        "title": title,
    }

    with tempfile.TemporaryDirectory(prefix="mdhtml_") as temp_dir, ProgressHandler(
        quiet=quiet, show_progress=progress
    ) as handler:
        handler.start_discovery()

        files = discover_sources(source, Path(temp_dir))
        if not files:
            handler.log_info(f"No markdown files found in {source}")
            return 0

        output_file: Optional[Path] = None
        if source.is_dir():
            output_dir = output or source
        elif output is not None and output.suffix.lower() in HTML_SUFFIXES:
            output_dir = output.parent
            if source.suffix.lower() in MARKDOWN_SUFFIXES:
                output_file = output
        else:
            output_dir = output or source.parent

        handler.log_info(f"Found {len(files)} file(s) to convert")
        handler.start_conversion(len(files))

        written: set[Path] = set()
        for file_path in files:
            _convert_file(
                file_path, output_dir, output_file, written, options, handler
            )

        handler.finish()

        if handler.failed > 0:
            return 1
        return 0
