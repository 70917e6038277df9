#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for blogsite.

Exception Hierarchy:
    Exception (built-in)
    ├── PostParseError - Base for all single-post parsing failures
    │   ├── MalformedFilenameError - Date/slug segments missing or non-numeric
    │   ├── InvalidDateError - Filename date is not a calendar date
    │   ├── HeaderNotTerminatedError - No closing header fence
    │   └── HeaderDecodeError - Header YAML does not match the schema
    ├── ManifestDecodeError - blog.yml does not match the schema
    ├── SourceReadError - Post or manifest file cannot be read
    ├── SiteBuildError - Writing the rendered site failed
    └── ValidationError - Decoded data does not match a schema

Usage:
    from blogsite.core.exceptions import PostParseError, ManifestDecodeError

    try:
        blog = load_blog(posts_dir)
    except PostParseError as e:
        click.echo(f"Build aborted: {e}", err=True)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class PostParseError(Exception):
    """
    Base exception for failures while parsing a single post file.

    Every subclass records the offending file so the CLI can report
    which post aborted the build.

    Attributes:
        path: Post file that failed to parse (None for in-memory text)

    Examples:
        >>> raise PostParseError("Unreadable post", Path("posts/2024-01-15-a.md"))
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class MalformedFilenameError(PostParseError):
    """
    Exception for post filenames that do not match ``YYYY-MM-DD-<slug>``.

    Raised when the filename has fewer than four hyphen-delimited segments
    or the year, month or day segment is not a number.

    Examples:
        >>> raise MalformedFilenameError("expected YYYY-MM-DD-<slug>", path)
        >>> raise MalformedFilenameError("month 'ab' is not a number", path)
    """

    pass


class InvalidDateError(PostParseError):
    """
    Exception for filename dates that are not real calendar dates.

    Examples:
        >>> raise InvalidDateError("2024-02-30 is not a valid date", path)
        >>> raise InvalidDateError("month must be in 1..12, got 13", path)
    """

    pass


class HeaderNotTerminatedError(PostParseError):
    """
    Exception for posts whose YAML header has no closing ``---`` fence.

    Examples:
        >>> raise HeaderNotTerminatedError("no closing '---' after header", path)
    """

    pass


class HeaderDecodeError(PostParseError):
    """
    Exception for post headers that fail to decode into ``{title, author}``.

    Raised for:
    - YAML syntax errors
    - A header that is not a mapping
    - Missing ``title`` or ``author``
    - Any additional key (``draft``, ``tags``, ...)
    - Non-string values

    Examples:
        >>> raise HeaderDecodeError("unknown header field(s): draft", path)
        >>> raise HeaderDecodeError("missing header field(s): author", path)
    """

    pass


class ManifestDecodeError(Exception):
    """
    Exception for ``blog.yml`` manifests that fail to decode.

    The manifest schema is strict: exactly ``title`` and ``index-title``,
    both strings.

    Attributes:
        path: Manifest file that failed to decode

    Examples:
        >>> raise ManifestDecodeError("unknown manifest field(s): theme", path)
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class SourceReadError(Exception):
    """
    Exception for post or manifest files that cannot be read.

    Wraps the underlying OSError or UnicodeDecodeError.

    Attributes:
        path: File that could not be read

    Examples:
        >>> raise SourceReadError(Path("posts/blog.yml"), "No such file or directory")
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: cannot read file ({reason})")


class SiteBuildError(Exception):
    """
    Exception for failures while writing the rendered site.

    Raised when creating output directories, rendering templates or
    copying static files fails.

    Examples:
        >>> raise SiteBuildError("Cannot render template 'post.html.jinja2'")
        >>> raise SiteBuildError("Cannot copy static/fonts: permission denied")
    """

    pass


class ValidationError(Exception):
    """
    Exception for decoded data that does not match its schema.

    Raised by DataValidator; parsers re-raise it as HeaderDecodeError or
    ManifestDecodeError together with the offending file path.

    Examples:
        >>> raise ValidationError("unknown field(s): draft")
        >>> raise ValidationError("field 'title' must be a string, got int")
    """

    pass
