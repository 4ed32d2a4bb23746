"""Build the documentation tree from a directory of markdown files.

Layout::

    docs_root/<section>/*.md
    docs_root/<section>/<subsection>/*.md

Anything nested deeper than a subsection is not scanned. Entries keep the
order the filesystem lists them in.
"""

import os
import time
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from observability.logging import log_performance
from observability.prometheus_metrics import record_docs_scan

from .metadata import extract_description, extract_title, humanize_directory_name
from .models import DocFile, DocSection, DocSubsection, DocsStructure

logger = logging.getLogger(__name__)

MAX_DEPTH = 2
MARKDOWN_SUFFIX = ".md"
TUTORIAL_SECTIONS = frozenset({"beginner", "tutorials"})


@dataclass
class ScanContext:
    """Counters owned by a single structure build."""
    docs_root: str
    total_files: int = 0
    total_tutorials: int = 0
    failures: int = 0

    def count_file(self, section_id: str, file_name: str, depth: int) -> None:
        self.total_files += 1
        # Subsection files always count as tutorials; section files only by
        # name or by living in a tutorial section.
        if depth >= MAX_DEPTH or "tutorial" in file_name or section_id in TUTORIAL_SECTIONS:
            self.total_tutorials += 1


def _list_entries(directory: str, ctx: ScanContext) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        logger.error(f"Error reading docs directory {directory}: {e}")
        ctx.failures += 1
        return []


def _read_doc_file(entry: os.DirEntry, rel_path: str, ctx: ScanContext) -> Optional[DocFile]:
    try:
        with open(entry.path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable doc file {rel_path}: {e}")
        ctx.failures += 1
        return None

    return DocFile(
        name=entry.name,
        title=extract_title(content, entry.name),
        description=extract_description(content),
        path=rel_path,
        size=len(content),
    )


def _scan_directory(
    directory: str,
    rel_parts: List[str],
    depth: int,
    ctx: ScanContext,
) -> Tuple[List[DocFile], List[DocSubsection]]:
    """Collect markdown files in *directory*; recurse into subsections until MAX_DEPTH."""
    files: List[DocFile] = []
    subsections: List[DocSubsection] = []
    section_id = rel_parts[0]

    for entry in _list_entries(directory, ctx):
        if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
            rel_path = "/".join(rel_parts + [entry.name])
            doc = _read_doc_file(entry, rel_path, ctx)
            if doc is None:
                continue
            files.append(doc)
            ctx.count_file(section_id, entry.name, depth)
        elif entry.is_dir() and depth < MAX_DEPTH:
            sub_parts = rel_parts + [entry.name]
            sub_files, _ = _scan_directory(entry.path, sub_parts, depth + 1, ctx)
            if sub_files:
                subsections.append(DocSubsection(
                    id=entry.name,
                    title=humanize_directory_name(entry.name),
                    path="/".join(sub_parts),
                    files=sub_files,
                ))

    return files, subsections


@log_performance(threshold_ms=500.0)
def build_docs_structure(docs_root) -> DocsStructure:
    """Scan *docs_root* and return the section/subsection tree with counts.

    Never raises for filesystem problems: unreadable directories and files are
    logged and left out, and a missing root yields an empty structure.
    """
    root = os.fspath(docs_root)
    ctx = ScanContext(docs_root=root)
    start_time = time.time()
    sections: List[DocSection] = []

    for entry in _list_entries(root, ctx):
        if not entry.is_dir() or entry.name.startswith("."):
            continue

        files, subsections = _scan_directory(entry.path, [entry.name], 1, ctx)
        if not files and not subsections:
            continue

        sections.append(DocSection(
            id=entry.name,
            title=humanize_directory_name(entry.name),
            path=entry.name,
            files=files,
            subsections=subsections,
        ))

    record_docs_scan(time.time() - start_time, ctx.total_files, ctx.failures)
    logger.debug(
        f"Built docs structure: {len(sections)} sections, "
        f"{ctx.total_files} files, {ctx.total_tutorials} tutorials"
    )

    return DocsStructure(
        sections=sections,
        total_files=ctx.total_files,
        total_tutorials=ctx.total_tutorials,
    )
