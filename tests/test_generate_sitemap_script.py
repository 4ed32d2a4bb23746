import os
import sys
from unittest.mock import Mock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))

import generate_sitemap


@pytest.fixture(autouse=True)
def keep_test_logging(monkeypatch):
    # The script reconfigures the root logger
    monkeypatch.setattr(generate_sitemap, "setup_logging", Mock())


def test_writes_sitemap(beginner_docs, tmp_path, capsys):
    output = tmp_path / "sitemap.xml"
    code = generate_sitemap.main([
        "--docs-dir", str(beginner_docs),
        "--base-url", "https://docs.example.org",
        "--output", str(output),
    ])

    assert code == 0
    assert "Wrote 4 URLs" in capsys.readouterr().out
    assert "https://docs.example.org/docs?file=beginner%2F02-first-steps.md" in output.read_text(encoding="utf-8")


def test_missing_docs_dir(tmp_path, capsys):
    code = generate_sitemap.main(["--docs-dir", str(tmp_path / "missing"), "--output", str(tmp_path / "s.xml")])

    assert code == 1
    assert "not found" in capsys.readouterr().err
    assert not (tmp_path / "s.xml").exists()


def test_prints_to_stdout(beginner_docs, tmp_path, capsys):
    code = generate_sitemap.main([
        "--docs-dir", str(beginner_docs),
        "--base-url", "https://docs.example.org",
        "--output", "-",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert out.count("<url>") == 4
    generate_sitemap.setup_logging.assert_not_called()
