#!/usr/bin/env python3
"""
renderer.py
-----------
Jinja2 template engine for blog pages.

Holds the Jinja2 environment and its filters as an explicit object that
is handed to the site builder. Supports filesystem templates (the
packaged defaults or a blog's own) and dict templates (tests).

Usage:
    from blogsite.render.renderer import SiteRenderer

    renderer = SiteRenderer()
    html = renderer.render("index.html.jinja2", context)
    changed = renderer.render_to_file("post.html.jinja2", context, path)

    renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})

Dependencies:
    - jinja2>=3.1.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third-party imports ---
from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

# --- Local imports ---
from blogsite.core.paths import TEMPLATES_DIR
from blogsite.render import filters as blog_filters


class SiteRenderer:
    """
    Jinja2-based page renderer.

    Undefined template variables raise instead of rendering empty, so a
    template referring to a field the Blog does not have fails the build.

    Attributes:
        env: Configured Jinja2 Environment
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Args:
            templates_dir: Directory of templates (FileSystemLoader)
            templates: Dict of template name to source (DictLoader)

        Raises:
            ValueError: If both templates_dir and templates are given
        """
        if templates_dir and templates:
            raise ValueError("Provide either templates_dir or templates, not both")

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        elif templates_dir is not None:
            loader = FileSystemLoader(str(templates_dir))
        else:
            loader = FileSystemLoader(str(TEMPLATES_DIR))

        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml", "html.jinja2", "xml.jinja2"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["month_name"] = blog_filters.month_name
        self.env.filters["rfc3339"] = blog_filters.rfc3339

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_to_file(
        self,
        template_name: str,
        context: Dict[str, Any],
        output_path: Path,
    ) -> bool:
        """
        Render a template to a file, writing only if the content changed.

        Args:
            template_name: Template name relative to the loader root
            context: Template variables
            output_path: Destination file (parent directories are created)

        Returns:
            True if the file was written, False if it already held the
            same content
        """
        content = self.render(template_name, context)

        if output_path.exists():
            try:
                if output_path.read_text(encoding="utf-8") == content:
                    return False
            except UnicodeDecodeError:
                # Not text we wrote; overwrite it
                pass

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return True
