#!/usr/bin/env python3
"""
sitebuilder.py
-------------------
Write an assembled Blog to the output directory.

Output layout:

    site/
    ├── index.html
    ├── feed.xml
    ├── <YYYY>/<MM>/<DD>/<slug>.html
    └── fonts/ images/ styles/ scripts/    (copied from static/)

Usage:
    builder = SiteBuilder(
        blog=blog,
        output_dir=Path("site"),
        static_dir=Path("static"),
        logger=logger,
    )
    stats = builder.build()
"""
from __future__ import annotations

import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import TemplateError

from blogsite.builders.base import BaseBuilder
from blogsite.core.cli import OperationStats
from blogsite.core.exceptions import SiteBuildError
from blogsite.core.logging_manager import BlogLogger
from blogsite.core.paths import STATIC_SUBDIRS
from blogsite.dataclasses.blog import Blog
from blogsite.dataclasses.post import Post
from blogsite.render.renderer import SiteRenderer

# Post pages live three directories below the blog root (YYYY/MM/DD/)
POST_DEPTH_TO_ROOT = "../../../"


@dataclass
class SiteBuildStats(OperationStats):
    """
    Statistics for a site build.

    Attributes:
        pages_written: Pages whose content changed and were written
        pages_unchanged: Pages left alone because their content was identical
        static_dirs_copied: Static subdirectories copied to the output
        index_url: file:// URL of the generated index page
        latest_post_url: file:// URL of the newest post, if any
    """

    pages_written: int = 0
    pages_unchanged: int = 0
    static_dirs_copied: int = 0
    index_url: str = ""
    latest_post_url: Optional[str] = None

    def summary(self) -> str:
        return (
            f"{self.files_processed} posts, "
            f"{self.pages_written} pages written, "
            f"{self.pages_unchanged} unchanged, "
            f"{self.static_dirs_copied} static dirs copied, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "pages_written": self.pages_written,
            "pages_unchanged": self.pages_unchanged,
            "static_dirs_copied": self.static_dirs_copied,
            "index_url": self.index_url,
            "latest_post_url": self.latest_post_url,
        })
        return d


class SiteBuilder(BaseBuilder):
    """
    Render index, post pages and feed, and copy static assets.

    Attributes:
        blog: Assembled blog to render
        output_dir: Site output directory
        renderer: Template renderer
        static_dir: Directory holding fonts/, images/, styles/, scripts/
            (None skips asset copying)
        base_url: Absolute URL prefix used for links in the feed
        feed_updated: Feed-level ``updated`` timestamp (build time by default)
    """

    def __init__(
        self,
        blog: Blog,
        output_dir: Path,
        renderer: Optional[SiteRenderer] = None,
        static_dir: Optional[Path] = None,
        base_url: str = "",
        feed_updated: Optional[datetime] = None,
        logger: Optional[BlogLogger] = None,
    ):
        super().__init__(logger)
        self.blog = blog
        self.output_dir = Path(output_dir)
        self.renderer = renderer if renderer is not None else SiteRenderer()
        self.static_dir = Path(static_dir) if static_dir is not None else None
        self.base_url = base_url
        self.feed_updated = feed_updated

    def build(self) -> SiteBuildStats:
        """
        Write the whole site.

        Returns:
            SiteBuildStats with page counts and the index/latest-post URLs

        Raises:
            SiteBuildError: If any page or asset cannot be written
        """
        stats = SiteBuildStats(files_processed=len(self.blog.posts))

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SiteBuildError(
                f"Cannot create output directory {self.output_dir}: {e}"
            ) from e

        index_path = self.render_index(stats)
        stats.index_url = self.file_url(index_path)

        for i, post in enumerate(self.blog.posts):
            path = self.render_post(post, stats)
            if i == 0:
                stats.latest_post_url = self.file_url(path)

        self.render_feed(stats)

        self.copy_static_files(stats)

        self._log_operation("build_site", stats.to_dict())
        return stats

    def file_url(self, path: Path) -> str:
        """file:// URL of a path relative to the output directory."""
        return (self.output_dir.resolve() / path).as_uri()

    def render_index(self, stats: SiteBuildStats) -> Path:
        context = {
            "title": self.blog.index_title,
            "blog": self.blog,
            "root": self.blog.path_back_to_root,
        }
        path = Path("index.html")
        self._render("index.html.jinja2", context, path, stats)
        return path

    def render_post(self, post: Post, stats: SiteBuildStats) -> Path:
        context = {
            "title": f"{post.title} | {self.blog.title}",
            "blog": self.blog,
            "post": post,
            "root": self.blog.path_back_to_root + POST_DEPTH_TO_ROOT,
        }
        path = Path(post.url)
        self._render("post.html.jinja2", context, path, stats)
        return path

    def render_feed(self, stats: SiteBuildStats) -> Path:
        """
        Write ``feed.xml``.

        Atom ids must be absolute IRIs; without a base URL the entry links
        and ids are relative, so the feed is still written but flagged.
        """
        if not self.base_url:
            self._log_warning(
                "No base URL set: feed.xml links and ids are relative "
                "(pass --base-url for a valid Atom feed)"
            )
        context = {
            "blog": self.blog,
            "base_url": self.base_url,
            "feed_updated": self.feed_updated or datetime.now(timezone.utc),
        }
        path = Path("feed.xml")
        self._render("feed.xml.jinja2", context, path, stats)
        return path

    def copy_static_files(self, stats: SiteBuildStats) -> None:
        """
        Copy each static subdirectory into the output, overwriting files.

        Missing subdirectories are skipped with a warning.
        """
        if self.static_dir is None:
            return
        for name in STATIC_SUBDIRS:
            source = self.static_dir / name
            if not source.is_dir():
                self._log_warning(f"Static directory {source} not found, skipping")
                continue
            try:
                shutil.copytree(source, self.output_dir / name, dirs_exist_ok=True)
            except (OSError, shutil.Error) as e:
                raise SiteBuildError(f"Cannot copy {source}: {e}") from e
            stats.static_dirs_copied += 1
            self._log_debug(f"Copied {source} to {self.output_dir / name}")

    def _render(
        self,
        template_name: str,
        context: Dict[str, Any],
        path: Path,
        stats: SiteBuildStats,
    ) -> None:
        output_path = self.output_dir / path
        try:
            written = self.renderer.render_to_file(template_name, context, output_path)
        except (OSError, TemplateError) as e:
            self._log_error(e, {"template": template_name, "output": str(output_path)})
            raise SiteBuildError(
                f"Cannot render {template_name} to {output_path}: {e}"
            ) from e

        if written:
            stats.pages_written += 1
            self._log_debug(f"Wrote {output_path}")
        else:
            stats.pages_unchanged += 1
