"""Heuristic title and description extraction for markdown files.

This is deliberately not a markdown parser: the title is the first level-1
heading and the description is the single line that follows it after a blank
line. Anything fancier (multi-line paragraphs, lists) yields no description.
"""

import re

DESCRIPTION_LIMIT = 150

_TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_DESCRIPTION_RE = re.compile(r"^#\s+.+\r?\n\r?\n(.+)", re.MULTILINE)
_MD_SUFFIX_RE = re.compile(r"\.md$")
_NUMERIC_PREFIX_RE = re.compile(r"^\d+-")


def _capitalize_segments(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split("-"))


def humanize_file_name(name: str) -> str:
    """``"04-understanding-databases.md"`` -> ``"Understanding Databases"``."""
    stem = _NUMERIC_PREFIX_RE.sub("", _MD_SUFFIX_RE.sub("", name))
    return _capitalize_segments(stem)


def humanize_directory_name(name: str) -> str:
    """``"getting-started"`` -> ``"Getting Started"``. Numeric prefixes are kept."""
    return _capitalize_segments(name)


def extract_title(content: str, fallback_name: str) -> str:
    """Return the first ``# heading`` of *content*, else a humanized *fallback_name*."""
    match = _TITLE_RE.search(content)
    if match:
        title = match.group(1).strip()
        if title:
            return title
    return humanize_file_name(fallback_name).strip() or fallback_name or "Untitled"


def extract_description(content: str) -> str:
    """Return the line after the first heading and a blank line, truncated, or ``""``."""
    match = _DESCRIPTION_RE.search(content)
    if not match:
        return ""
    return match.group(1).strip()[:DESCRIPTION_LIMIT] + "..."
