"""
conftest.py
-----------
Shared pytest fixtures for blogsite tests.

Provides fixtures for:
- Temporary directories
- Sample post and manifest content
- A factory that lays out a posts directory
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from datetime import datetime, timezone

from blogsite.dataclasses.post import RawPost, build_post_time, post_url


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Content Fixtures -----

@pytest.fixture
def minimal_post_content():
    """Smallest valid post: header and one paragraph."""
    return "---\ntitle: T\nauthor: A\n---\n\nBody"


@pytest.fixture
def rich_post_content():
    """Post exercising headings, tables, footnotes and raw HTML."""
    return """---
title: "Announcing 1.0: what's new"
author: The Core Team
---

# Release notes

We shipped it.[^1]

| Feature | Status |
|---------|--------|
| Posts   | done   |

<div class="note">Raw <b>HTML</b> stays.</div>

[^1]: After a long wait.
"""


@pytest.fixture
def manifest_content():
    """Valid blog.yml."""
    return "title: Example Blog\nindex-title: Example Blog | Home\n"


# ----- Posts Directory Factory -----

def write_post(directory: Path, filename: str, title: str = "Title", author: str = "Author", body: str = "Body") -> Path:
    """Write a post file with a valid header."""
    path = directory / filename
    path.write_text(
        f"---\ntitle: {title}\nauthor: {author}\n---\n\n{body}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def posts_dir(tmp_dir, manifest_content):
    """
    Factory creating a posts directory with a manifest and the given posts.

    Usage:
        directory = posts_dir({"2024-01-15-hello.md": "Hello"})
    """
    def _make(posts=None, manifest=None):
        directory = tmp_dir / "posts"
        directory.mkdir(exist_ok=True)
        (directory / "blog.yml").write_text(
            manifest if manifest is not None else manifest_content,
            encoding="utf-8",
        )
        for filename, title in (posts or {}).items():
            write_post(directory, filename, title=title)
        return directory

    return _make


# ----- Record Factories -----

def make_raw_post(year, month, day, slug, updated=None, title=None):
    """Build a RawPost directly, optionally with a custom updated timestamp."""
    published = build_post_time(year, month, day)
    return RawPost(
        slug=slug,
        title=title or slug,
        author="Author",
        year=year,
        month=month,
        day=day,
        contents="<p>Body</p>\n",
        url=post_url(year, month, day, slug),
        published=published,
        updated=updated or published,
    )


@pytest.fixture
def raw_post_factory():
    """Expose make_raw_post as a fixture."""
    return make_raw_post


@pytest.fixture
def fixed_time():
    """A fixed UTC timestamp for deterministic feeds."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
