"""
Blog records: posts, the manifest and the assembled blog.

Usage:
    from blogsite.dataclasses import Blog, Manifest, Post, RawPost, assemble
"""
from blogsite.dataclasses.blog import Blog, assemble
from blogsite.dataclasses.manifest import Manifest
from blogsite.dataclasses.post import Post, RawPost

__all__ = ["Blog", "Manifest", "Post", "RawPost", "assemble"]
