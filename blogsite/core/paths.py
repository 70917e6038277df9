#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and file-layout configuration for blogsite.

A blog lives in its own working directory:

    <blog>/
    ├── posts/         # YYYY-MM-DD-<slug>.md files and blog.yml
    ├── static/        # fonts/, images/, styles/, scripts/ copied verbatim
    ├── site/          # Generated output
    └── logs/          # Build logs

These directories are relative paths and resolve against the current
working directory at the time they are used, so the CLI can be run from
any blog checkout. Templates ship inside the package.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# ----- Package directory -----
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "render" / "templates"

# ----- Blog directories -----
POSTS_DIR = Path("posts")
SITE_DIR = Path("site")
STATIC_DIR = Path("static")
LOG_DIR = Path("logs")

# ----- Post discovery -----
MANIFEST_FILE = "blog.yml"
POSTS_EXT = ".md"

# ----- Static assets copied into the output directory -----
STATIC_SUBDIRS = ("fonts", "images", "styles", "scripts")
