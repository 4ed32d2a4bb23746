"""Path safety checks for serving files from the documentation root.

The check is a string-prefix comparison after normalization. It does not
resolve symlinks, and a sibling directory sharing the root's name as a prefix
(``docs`` vs ``docs-private``) also passes.
"""

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class UnsafePathError(ValueError):
    """Raised when a requested path resolves outside the documentation root."""


def is_safe_path(docs_root: PathLike, requested: str) -> bool:
    root = os.path.normpath(os.fspath(docs_root))
    # An absolute *requested* replaces root in os.path.join, so "/etc/passwd"
    # is rejected here (403) instead of being looked up as root/etc/passwd (404).
    candidate = os.path.normpath(os.path.join(root, requested))
    return candidate.startswith(root)


def resolve_doc_path(docs_root: PathLike, requested: str) -> str:
    """Return the normalized absolute path for *requested* or raise UnsafePathError."""
    if not is_safe_path(docs_root, requested):
        raise UnsafePathError(requested)
    return os.path.normpath(os.path.join(os.fspath(docs_root), requested))
