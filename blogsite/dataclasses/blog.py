#!/usr/bin/env python3
"""
blog.py
-------------------
The Blog aggregate and the collection assembler that builds it.

``assemble`` takes every RawPost of a blog at once and:

1. Orders them for display: newest date first, and for equal dates the
   higher slug first.
2. Marks where a year heading goes (``show_year``).
3. Makes ``updated`` unique, so feed readers can tell same-day posts apart.

Both passes depend on the final order, so they run sequentially after all
posts are parsed.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import PurePosixPath
from typing import Iterable, List, Tuple

# --- Local imports ---
from blogsite.dataclasses.manifest import Manifest
from blogsite.dataclasses.post import Post, RawPost


@dataclass(frozen=True)
class Blog:
    """
    Manifest metadata plus the finalized, ordered posts.

    Built once by ``assemble`` and read-only afterwards.

    Attributes:
        title: Title shown in the top row of every page
        index_title: Title for the index page header
        posts: Posts in display order
        prefix: Output subdirectory of this blog within the site (empty
            for a blog rendered at the site root)
    """

    title: str
    index_title: str
    posts: Tuple[Post, ...] = ()
    prefix: PurePosixPath = field(default_factory=PurePosixPath)

    @property
    def path_back_to_root(self) -> str:
        """
        Relative path from the blog's index back to the site root.

        Examples:
            >>> Blog("t", "i").path_back_to_root
            ''
            >>> Blog("t", "i", prefix=PurePosixPath("inside")).path_back_to_root
            '../'
        """
        return "".join("../" for _ in self.prefix.parts)


def display_order(posts: Iterable[RawPost]) -> List[RawPost]:
    """
    Sort posts for display.

    Sorts ascending by ``sort_key`` and then reverses the list, giving
    newest-first with same-date posts in descending slug order.
    """
    ordered = sorted(posts, key=lambda post: post.sort_key)
    ordered.reverse()
    return ordered


def compute_show_year(posts: List[RawPost]) -> List[bool]:
    """
    Year-heading flags for posts already in display order.

    The first post always gets a heading; every other post gets one when
    its year differs from the post right before it.

    Examples:
        >>> # years [2021, 2021, 2020]
        >>> compute_show_year(posts)
        [True, False, True]
    """
    flags: List[bool] = []
    for i, post in enumerate(posts):
        flags.append(i == 0 or posts[i - 1].year != post.year)
    return flags


def disambiguate_updated(timestamps: List[datetime]) -> List[datetime]:
    """
    Make a display-ordered run of ``updated`` timestamps unique.

    An anchor index starts at 0. Each later timestamp equal to the
    anchor's becomes ``anchor + (i - anchor)`` seconds; any other
    timestamp becomes the new anchor. The anchor value is never rewritten,
    so equality is always tested against an original timestamp.

    Args:
        timestamps: Original ``updated`` values in display order

    Returns:
        New list with duplicates offset by whole seconds

    Examples:
        >>> disambiguate_updated([t, t, t, t2, t2])
        [t, t+1s, t+2s, t2, t2+1s]
    """
    result = list(timestamps)
    anchor = 0
    for i in range(1, len(result)):
        if result[i] == result[anchor]:
            result[i] = result[anchor] + timedelta(seconds=i - anchor)
        else:
            anchor = i
    return result


def assemble(manifest: Manifest, posts: Iterable[RawPost]) -> Blog:
    """
    Build the Blog aggregate from a manifest and every parsed post.

    Args:
        manifest: Blog manifest
        posts: All RawPost records of the blog, in any order

    Returns:
        Blog with posts in display order, ``show_year`` set and unique
        ``updated`` timestamps. An empty input gives an empty blog.
    """
    ordered = display_order(posts)

    show_year = compute_show_year(ordered)
    updated = disambiguate_updated([post.updated for post in ordered])

    final = tuple(
        Post.finalize(raw, show_year=flag, updated=stamp)
        for raw, flag, stamp in zip(ordered, show_year, updated)
    )
    return Blog(title=manifest.title, index_title=manifest.index_title, posts=final)
