"""
blogsite
========

A static blog generator.

Reads a directory of dated Markdown posts (``YYYY-MM-DD-<slug>.md``) plus a
``blog.yml`` manifest, renders every post to HTML and assembles an index
page and an Atom feed listing all posts.

Main Components:
    - dataclasses: Post, Manifest and Blog records
    - utils: Markdown header splitting and HTML rendering
    - pipeline: Loading posts from disk and the command-line interface
    - builders: Writing the rendered site to the output directory
    - render: Jinja2 environment, filters and default templates
    - core: Logging, exceptions and paths

Example Usage:
    >>> from pathlib import Path
    >>> from blogsite.pipeline.loader import load_blog
    >>> blog = load_blog(Path("posts"))
    >>> [post.url for post in blog.posts]
"""

__version__ = "1.0.0"
