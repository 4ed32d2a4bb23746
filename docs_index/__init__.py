"""Documentation tree scanning, metadata extraction and sitemap generation."""

from .models import DocFile, DocSubsection, DocSection, DocsStructure, DocContent
from .metadata import (
    extract_title,
    extract_description,
    humanize_file_name,
    humanize_directory_name
)
from .paths import is_safe_path, resolve_doc_path, UnsafePathError
from .scanner import build_docs_structure, ScanContext, MAX_DEPTH
from .sitemap import generate_sitemap, write_sitemap, doc_url

__all__ = [
    'DocFile',
    'DocSubsection',
    'DocSection',
    'DocsStructure',
    'DocContent',
    'extract_title',
    'extract_description',
    'humanize_file_name',
    'humanize_directory_name',
    'is_safe_path',
    'resolve_doc_path',
    'UnsafePathError',
    'build_docs_structure',
    'ScanContext',
    'MAX_DEPTH',
    'generate_sitemap',
    'write_sitemap',
    'doc_url'
]
