import xml.etree.ElementTree as ET

from docs_index import build_docs_structure, doc_url, generate_sitemap, write_sitemap
from docs_index.sitemap import SITEMAP_NS

from conftest import write_doc

BASE_URL = "https://codexcrafters.example.org"
NS = {"sm": SITEMAP_NS}


def _entries(xml):
    root = ET.fromstring(xml.encode("utf-8"))
    return [
        (
            url.find("sm:loc", NS).text,
            url.find("sm:changefreq", NS).text,
            url.find("sm:priority", NS).text,
        )
        for url in root.findall("sm:url", NS)
    ]


class TestDocUrl:

    def test_path_is_component_encoded(self):
        assert doc_url(BASE_URL, "beginner/01-intro.md") == f"{BASE_URL}/docs?file=beginner%2F01-intro.md"

    def test_spaces_and_reserved_characters(self):
        url = doc_url(BASE_URL, "guides/a b&c?.md")
        assert url == f"{BASE_URL}/docs?file=guides%2Fa%20b%26c%3F.md"


class TestGenerateSitemap:

    def test_single_section(self, beginner_docs):
        xml = generate_sitemap(build_docs_structure(beginner_docs), BASE_URL)

        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        entries = _entries(xml)
        assert len(entries) == 4
        assert entries[0] == (f"{BASE_URL}/", "weekly", "1.0")
        assert entries[1] == (f"{BASE_URL}/docs", "weekly", "0.9")
        assert {loc for loc, _, _ in entries[2:]} == {
            f"{BASE_URL}/docs?file=beginner%2F01-understanding-code-basics.md",
            f"{BASE_URL}/docs?file=beginner%2F02-first-steps.md",
        }
        assert all(freq == "monthly" and prio == "0.8" for _, freq, prio in entries[2:])

    def test_subsection_files_have_lower_priority(self, docs_root):
        entries = _entries(generate_sitemap(build_docs_structure(docs_root), BASE_URL))
        priorities = {loc: prio for loc, _, prio in entries}

        assert len(entries) == 2 + 7
        assert priorities[doc_url(BASE_URL, "advanced/tips.md")] == "0.8"
        assert priorities[doc_url(BASE_URL, "advanced/notes/misc.md")] == "0.7"
        assert priorities[doc_url(BASE_URL, "tutorials/frontend/react-basics.md")] == "0.7"

    def test_section_files_before_its_subsections(self, docs_root):
        entries = _entries(generate_sitemap(build_docs_structure(docs_root), BASE_URL))
        locs = [loc for loc, _, _ in entries]
        assert locs.index(doc_url(BASE_URL, "advanced/tips.md")) < locs.index(
            doc_url(BASE_URL, "advanced/notes/misc.md"))

    def test_empty_tree_lists_site_pages(self, tmp_path):
        entries = _entries(generate_sitemap(build_docs_structure(tmp_path), BASE_URL))
        assert [loc for loc, _, _ in entries] == [f"{BASE_URL}/", f"{BASE_URL}/docs"]

    def test_trailing_slash_on_base_url(self, beginner_docs):
        entries = _entries(generate_sitemap(build_docs_structure(beginner_docs), BASE_URL + "/"))
        assert entries[0][0] == f"{BASE_URL}/"
        assert entries[1][0] == f"{BASE_URL}/docs"

    def test_xml_special_characters_are_escaped(self, tmp_path):
        root = tmp_path / "docs"
        write_doc(root, "guides/q&a.md", "# Q and A\n")

        xml = generate_sitemap(build_docs_structure(root), BASE_URL)
        # Already percent-encoded, so the raw ampersand never reaches the XML
        assert "q%26a.md" in xml
        assert len(_entries(xml)) == 3


class TestWriteSitemap:

    def test_writes_file_and_returns_count(self, beginner_docs, tmp_path):
        output = tmp_path / "public" / "sitemap.xml"
        output.parent.mkdir()

        count = write_sitemap(beginner_docs, BASE_URL, output)

        assert count == 4
        assert len(_entries(output.read_text(encoding="utf-8"))) == 4
