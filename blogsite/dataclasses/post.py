#!/usr/bin/env python3
"""
post.py
-------------------
Dataclasses representing blog posts.

A post goes through two immutable stages:

- RawPost: the result of parsing one ``YYYY-MM-DD-<slug>.md`` file on its
  own. Its ``updated`` timestamp is still the default (midnight UTC of the
  post date) and it knows nothing about its neighbours.
- Post: produced by ``blogsite.dataclasses.blog.assemble`` once the whole
  collection is ordered. Adds ``show_year`` and carries the final, unique
  ``updated`` timestamp.

Parsing a post file:
    1. Date and slug come from the filename
    2. The fenced YAML header is split from the body and must decode to
       exactly ``{title, author}``
    3. The body is rendered from Markdown to HTML
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from pathlib import Path, PurePosixPath
from typing import Optional, Tuple

# --- Third-party imports ---
import yaml

# --- Local imports ---
from blogsite.core.exceptions import (
    HeaderDecodeError,
    HeaderNotTerminatedError,
    InvalidDateError,
    MalformedFilenameError,
    SourceReadError,
    ValidationError,
)
from blogsite.core.validators import DataValidator
from blogsite.utils import md
from blogsite.utils.yaml_loader import load_strict

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("title", "author")
DATE_SEGMENT = re.compile(r"^[0-9]+$")


# ----- Filename and timestamp helpers -----


def parse_filename(
    filename: str, path: Optional[Path] = None
) -> Tuple[int, int, int, str]:
    """
    Extract (year, month, day, slug) from a post filename.

    The filename is split on the first three hyphens; the remainder,
    including any further hyphens and the extension, is the slug.

    Args:
        filename: Bare filename, e.g. ``2024-01-15-my-first-post.md``
        path: Source path, used in error messages

    Returns:
        Tuple of (year, month, day, slug)

    Raises:
        MalformedFilenameError: Fewer than four segments, an empty slug,
            or a non-numeric year, month or day

    Examples:
        >>> parse_filename("2024-01-15-my-first-post.md")
        (2024, 1, 15, 'my-first-post.md')
    """
    segments = filename.split("-", 3)
    if len(segments) < 4:
        raise MalformedFilenameError(
            f"filename '{filename}' does not match YYYY-MM-DD-<slug>", path
        )

    numbers = []
    for name, segment in zip(("year", "month", "day"), segments[:3]):
        if not DATE_SEGMENT.match(segment):
            raise MalformedFilenameError(
                f"{name} '{segment}' in filename '{filename}' is not a number", path
            )
        numbers.append(int(segment))

    slug = segments[3]
    if not slug:
        raise MalformedFilenameError(f"filename '{filename}' has an empty slug", path)

    year, month, day = numbers
    return year, month, day, slug


def build_post_time(year: int, month: int, day: int, seconds: int = 0) -> datetime:
    """Midnight UTC of the given date, plus ``seconds``."""
    return datetime(year, month, day, tzinfo=timezone.utc) + timedelta(seconds=seconds)


def post_url(year: int, month: int, day: int, slug: str) -> str:
    """
    Relative URL of a post page.

    Examples:
        >>> post_url(2024, 1, 5, "hello-world.md")
        '2024/01/05/hello-world.html'
    """
    page = PurePosixPath(slug).with_suffix(".html")
    return f"{year:04}/{month:02}/{day:02}/{page}"


def _validate_date(year: int, month: int, day: int, path: Optional[Path]) -> None:
    try:
        date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(
            f"{year:04}-{month:02}-{day:02} is not a valid date ({e})", path
        ) from e


def _decode_header(header: str, path: Optional[Path]) -> Tuple[str, str]:
    try:
        data = load_strict(header)
    except yaml.YAMLError as e:
        raise HeaderDecodeError(f"invalid YAML header: {e}", path) from e

    try:
        fields = DataValidator.validate_exact_string_fields(data, HEADER_FIELDS)
    except ValidationError as e:
        raise HeaderDecodeError(f"invalid header: {e}", path) from e

    return fields["title"], fields["author"]


# ----- Records -----


@dataclass(frozen=True)
class RawPost:
    """
    A post parsed from a single file, before collection-wide ordering.

    Attributes:
        slug: Filename remainder after the date, extension included
        title: Title from the header
        author: Author from the header
        year: Year from the filename
        month: Month from the filename
        day: Day from the filename
        contents: Body rendered to HTML
        url: ``YYYY/MM/DD/<slug>.html``
        published: Midnight UTC of the post date
        updated: Defaults to ``published``; made unique by the assembler

    Examples:
        >>> post = RawPost.from_file(Path("posts/2024-01-15-hello.md"))
        >>> post.url
        '2024/01/15/hello.html'
    """

    slug: str
    title: str
    author: str
    year: int
    month: int
    day: int
    contents: str
    url: str
    published: datetime
    updated: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if self.updated is None:
            object.__setattr__(self, "updated", self.published)

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def sort_key(self) -> str:
        """``{year}-{month:02}-{day:02}-{slug}``; string order equals date order."""
        return f"{self.year}-{self.month:02}-{self.day:02}-{self.slug}"

    # ---- Construction Methods ----
    @classmethod
    def from_file(cls, path: Path) -> RawPost:
        """
        Parse a post file.

        Args:
            path: Path to ``YYYY-MM-DD-<slug>.md``

        Returns:
            Parsed RawPost

        Raises:
            MalformedFilenameError: Filename does not encode a date and slug
            InvalidDateError: Filename date is not a calendar date
            SourceReadError: File cannot be read as UTF-8
            HeaderNotTerminatedError: Header fence is never closed
            HeaderDecodeError: Header is not exactly ``{title, author}``
        """
        # Filename first: a badly named file is reported even if unreadable
        parse_filename(path.name, path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e

        logger.debug(f"Read post {path} ({len(content)} chars)")
        return cls.from_text(path.name, content, path)

    @classmethod
    def from_text(
        cls, filename: str, content: str, path: Optional[Path] = None
    ) -> RawPost:
        """
        Parse post content given its filename.

        Args:
            filename: Bare filename carrying the date and slug
            content: Full file content (header and body)
            path: Optional source path for error messages

        Returns:
            Parsed RawPost

        Examples:
            >>> post = RawPost.from_text(
            ...     "2024-01-15-hello.md",
            ...     "---\\ntitle: Hello\\nauthor: Jane\\n---\\n\\nHi *there*",
            ... )
            >>> post.title, post.contents
            ('Hello', '<p>Hi <em>there</em></p>\\n')
        """
        year, month, day, slug = parse_filename(filename, path)
        _validate_date(year, month, day, path)

        parts = md.split_header(md.normalize_text(content))
        if parts is None:
            raise HeaderNotTerminatedError(
                "header must open with '---' and be closed by a second '---'", path
            )
        header, body = parts
        title, author = _decode_header(header, path)

        published = build_post_time(year, month, day)
        return cls(
            slug=slug,
            title=title,
            author=author,
            year=year,
            month=month,
            day=day,
            contents=md.render_markdown(body),
            url=post_url(year, month, day, slug),
            published=published,
            updated=published,
        )


@dataclass(frozen=True)
class Post:
    """
    A post in its final position within a blog.

    Same fields as RawPost plus ``show_year``. Built only by the assembler;
    presentation code reads these but never modifies them.

    Attributes:
        show_year: True when the index should print a year heading above
            this post (first post, or year differs from the previous post)
        updated: Unique across the blog
    """

    slug: str
    title: str
    author: str
    year: int
    month: int
    day: int
    show_year: bool
    contents: str
    url: str
    published: datetime
    updated: datetime

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @classmethod
    def finalize(cls, raw: RawPost, show_year: bool, updated: datetime) -> Post:
        """Build the final record for ``raw`` with its derived fields."""
        return cls(
            slug=raw.slug,
            title=raw.title,
            author=raw.author,
            year=raw.year,
            month=raw.month,
            day=raw.day,
            show_year=show_year,
            contents=raw.contents,
            url=raw.url,
            published=raw.published,
            updated=updated,
        )
