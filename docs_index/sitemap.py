"""Sitemap XML for the site pages and every documentation file."""

from typing import List
from urllib.parse import quote
from xml.sax.saxutils import escape

from .models import DocsStructure
from .scanner import build_docs_structure

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Characters encodeURIComponent leaves alone besides the unreserved set
_URI_COMPONENT_SAFE = "!~*'()"

# (changefreq, priority) per depth in the docs tree
_FILE_ENTRY = {
    1: ("monthly", "0.8"),
    2: ("monthly", "0.7"),
}


def doc_url(base_url: str, path: str) -> str:
    """Link to a doc in the viewer, e.g. ``/docs?file=beginner%2F01-intro.md``."""
    return f"{base_url}/docs?file={quote(path, safe=_URI_COMPONENT_SAFE)}"


def _url_entry(loc: str, changefreq: str, priority: str) -> str:
    return (
        "  <url>\n"
        f"    <loc>{escape(loc)}</loc>\n"
        f"    <changefreq>{changefreq}</changefreq>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
    )


def generate_sitemap(structure: DocsStructure, base_url: str) -> str:
    base_url = base_url.rstrip("/")
    entries: List[str] = [
        _url_entry(f"{base_url}/", "weekly", "1.0"),
        _url_entry(f"{base_url}/docs", "weekly", "0.9"),
    ]
    for doc, depth in structure.iter_files():
        changefreq, priority = _FILE_ENTRY[depth]
        entries.append(_url_entry(doc_url(base_url, doc.path), changefreq, priority))

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NS}">',
        *entries,
        "</urlset>",
    ]
    return "\n".join(lines) + "\n"


def write_sitemap(docs_root, base_url: str, output_path) -> int:
    """Scan *docs_root* and write its sitemap to *output_path*. Returns the URL count."""
    structure = build_docs_structure(docs_root)
    xml = generate_sitemap(structure, base_url)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(xml)
    return 2 + sum(1 for _ in structure.iter_files())
