import os
import sys

import pytest
from fastapi.testclient import TestClient

# Settings and the limiter are read once at import time
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DATABASE", "true")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.pop("REDIS_URL", None)

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config.database import DatabaseConfig
from config.settings import Settings
from server.security.rate_limiting import limiter
from server.site_api import create_app


def write_doc(root, rel_path, content):
    """Write *content* to ``root/rel_path``, creating parent directories."""
    path = root.joinpath(*rel_path.split("/"))
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def beginner_docs(tmp_path):
    """A docs root with a single section holding two files."""
    root = tmp_path / "docs"
    write_doc(root, "beginner/01-understanding-code-basics.md",
              "# Understanding Code Basics\n\nLearn what code is and how computers read it.\n")
    write_doc(root, "beginner/02-first-steps.md",
              "Some notes without a heading.\n")
    return root


@pytest.fixture
def docs_root(tmp_path):
    """A docs root with sections, subsections and the things the scanner skips."""
    root = tmp_path / "docs"
    write_doc(root, "beginner/01-understanding-code-basics.md",
              "# Understanding Code Basics\n\nLearn what code is and how computers read it.\n")
    write_doc(root, "beginner/02-first-steps.md", "Some notes without a heading.\n")
    write_doc(root, "tutorials/backend/understanding-server-setup.md",
              "# Understanding Server Setup\n\nHow a web server starts.\n")
    write_doc(root, "tutorials/frontend/react-basics.md", "# React Basics\n")
    write_doc(root, "tutorials/backend/deeper/too-deep.md", "# Too Deep\n")
    write_doc(root, "advanced/tips.md", "# Tips\n\nAssorted tips.\n")
    write_doc(root, "advanced/tutorial-deep-dive.md", "# Deep Dive\n")
    write_doc(root, "advanced/notes/misc.md", "# Misc\n")
    write_doc(root, "advanced/notes.txt", "not markdown")
    write_doc(root, ".hidden/secret.md", "# Secret\n")
    write_doc(root, "README.md", "# Root readme\n")
    (root / "empty-section" / "empty-sub").mkdir(parents=True)
    return root


@pytest.fixture
def make_settings(tmp_path):
    """Build Settings pointing at *docs_dir* with a throwaway SQLite database."""

    def _make(docs_dir, **overrides):
        overrides.setdefault("database", DatabaseConfig(url=f"sqlite:///{tmp_path / 'site.db'}"))
        return Settings(docs_dir=str(docs_dir), **overrides)

    return _make


@pytest.fixture
def make_client(make_settings):
    """Start an app with its lifespan running and yield a client factory."""
    clients = []

    def _make(docs_dir, **overrides):
        client = TestClient(create_app(make_settings(docs_dir, **overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
