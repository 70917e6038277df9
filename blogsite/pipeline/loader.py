#!/usr/bin/env python3
"""
loader.py
-------------------
Load a blog from its posts directory.

    posts/
    ├── blog.yml
    ├── 2023-12-24-holiday-notes.md
    └── 2024-01-15-my-first-post.md

Every ``.md`` file is parsed on its own, then the whole set is handed to
the assembler. The first file that fails aborts the load; no partial blog
is ever returned.

Programmatic API:
    from blogsite.pipeline.loader import load_blog
    blog = load_blog(Path("posts"), logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from blogsite.core.exceptions import SourceReadError
from blogsite.core.logging_manager import BlogLogger, safe_logger
from blogsite.core.paths import MANIFEST_FILE, POSTS_EXT
from blogsite.dataclasses.blog import Blog, assemble
from blogsite.dataclasses.manifest import Manifest
from blogsite.dataclasses.post import RawPost


def load_manifest(posts_dir: Path) -> Manifest:
    """Load ``blog.yml`` from the posts directory."""
    return Manifest.from_file(posts_dir / MANIFEST_FILE)


def find_post_files(posts_dir: Path) -> List[Path]:
    """
    List the post files of a blog.

    Only regular files with the posts extension count; subdirectories and
    other files (the manifest, images, drafts saved as .txt) are ignored.

    Raises:
        SourceReadError: The directory cannot be listed
    """
    try:
        entries = list(posts_dir.iterdir())
    except OSError as e:
        raise SourceReadError(posts_dir, str(e)) from e

    return sorted(
        path for path in entries if path.suffix == POSTS_EXT and path.is_file()
    )


def load_posts(
    posts_dir: Path, logger: Optional[BlogLogger] = None
) -> List[RawPost]:
    """
    Parse every post file in the directory.

    Raises:
        PostParseError: Any post fails to parse (first failure wins)
        SourceReadError: The directory or a post cannot be read
    """
    log = safe_logger(logger)
    posts: List[RawPost] = []
    for path in find_post_files(posts_dir):
        try:
            post = RawPost.from_file(path)
        except Exception as e:
            log.log_error(e, {"operation": "parse_post", "file": str(path)})
            raise
        log.log_debug(f"Parsed {path.name}", {"url": post.url, "title": post.title})
        posts.append(post)
    return posts


def load_blog(posts_dir: Path, logger: Optional[BlogLogger] = None) -> Blog:
    """
    Load the manifest and all posts, and assemble the blog.

    Args:
        posts_dir: Directory holding ``blog.yml`` and the post files
        logger: Optional logger

    Returns:
        Assembled Blog

    Raises:
        ManifestDecodeError: ``blog.yml`` is invalid
        PostParseError: A post is invalid
        SourceReadError: A file cannot be read
    """
    log = safe_logger(logger)
    posts_dir = Path(posts_dir)

    manifest = load_manifest(posts_dir)
    posts = load_posts(posts_dir, logger)
    if not posts:
        log.log_warning(f"No posts found in {posts_dir}")

    blog = assemble(manifest, posts)
    log.log_operation(
        "load_blog",
        {"posts_dir": str(posts_dir), "title": blog.title, "posts": len(blog.posts)},
    )
    return blog
