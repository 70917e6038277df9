#!/usr/bin/env python3
"""
md.py
-------------------
Markdown utilities for post files.

Provides:
- Text normalization (BOM, CRLF line endings)
- Splitting the fenced YAML header from the Markdown body
- Rendering Markdown bodies to HTML with markdown-it-py

Post files look like:

    ---
    title: Hello
    author: Jane
    ---

    Body text in *Markdown*.
"""
from __future__ import annotations

# --- Standard library imports ---
from functools import lru_cache
from typing import Optional, Tuple

# --- Third-party imports ---
from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.footnote import footnote_plugin

HEADER_FENCE = "---"
HEADER_MARKER = HEADER_FENCE + "\n"


def normalize_text(content: str) -> str:
    """Strip a leading BOM and convert CRLF/CR line endings to LF."""
    return content.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")


def split_header(content: str) -> Optional[Tuple[str, str]]:
    """
    Split post content into header text and Markdown body.

    The content must open with the 4-byte marker ``---\\n``. The header ends
    at the first ``---`` found after that marker; the body is everything
    after it, without the newlines separating it from the fence.

    Args:
        content: Normalized file content

    Returns:
        Tuple of (header_text, body), or None when the content does not
        open with the marker or the header is never closed

    Examples:
        >>> split_header("---\\ntitle: T\\nauthor: A\\n---\\n\\nBody")
        ('title: T\\nauthor: A\\n', 'Body')
        >>> split_header("---\\ntitle: T\\n") is None
        True
    """
    if not content.startswith(HEADER_MARKER):
        return None

    end = content.find(HEADER_FENCE, len(HEADER_MARKER))
    if end == -1:
        return None

    header = content[len(HEADER_MARKER):end]
    body = content[end + len(HEADER_FENCE):].lstrip("\n")
    return header, body


@lru_cache(maxsize=1)
def markdown_parser() -> MarkdownIt:
    """
    Build the shared markdown-it parser used for post bodies.

    CommonMark with raw HTML passthrough, tables, footnotes and ``id``
    anchors on every heading level.
    """
    return (
        MarkdownIt("commonmark", {"html": True})
        .enable("table")
        .use(footnote_plugin)
        .use(anchors_plugin, min_level=1, max_level=6)
    )


def render_markdown(body: str) -> str:
    """
    Render a Markdown body to HTML.

    Examples:
        >>> render_markdown("# Hi")
        '<h1 id="hi">Hi</h1>\\n'
    """
    return markdown_parser().render(body)
