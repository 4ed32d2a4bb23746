import os

import pytest

from docs_index.paths import UnsafePathError, is_safe_path, resolve_doc_path


class TestIsSafePath:
    """Requested paths must stay under the documentation root."""

    @pytest.mark.parametrize("requested", [
        "beginner/01-intro.md",
        "tutorials/backend/server.md",
        "beginner/../tutorials/x.md",
        "./beginner/x.md",
        "nonexistent/file.md",
    ])
    def test_paths_inside_root(self, tmp_path, requested):
        assert is_safe_path(tmp_path / "docs", requested)

    @pytest.mark.parametrize("requested", [
        "../../etc/passwd",
        "../secret.md",
        "beginner/../../secret.md",
        "/etc/passwd",
    ])
    def test_paths_escaping_root(self, tmp_path, requested):
        assert not is_safe_path(tmp_path / "docs", requested)

    def test_root_itself_is_allowed(self, tmp_path):
        assert is_safe_path(tmp_path / "docs", ".")

    def test_trailing_slash_on_root(self, tmp_path):
        root = str(tmp_path / "docs") + os.sep
        assert is_safe_path(root, "beginner/x.md")
        assert not is_safe_path(root, "../x.md")

    def test_sibling_with_shared_prefix_passes(self, tmp_path):
        # Known limitation of the prefix comparison
        assert is_safe_path(tmp_path / "docs", "../docs-private/x.md")


class TestResolveDocPath:

    def test_returns_normalized_path(self, tmp_path):
        root = tmp_path / "docs"
        resolved = resolve_doc_path(root, "beginner/../tutorials/x.md")
        assert resolved == os.path.join(str(root), "tutorials", "x.md")

    def test_raises_outside_root(self, tmp_path):
        with pytest.raises(UnsafePathError):
            resolve_doc_path(tmp_path / "docs", "../../etc/passwd")

    def test_error_is_a_value_error(self):
        assert issubclass(UnsafePathError, ValueError)
