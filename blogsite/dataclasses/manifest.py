#!/usr/bin/env python3
"""
manifest.py
-------------------
The ``blog.yml`` manifest describing a blog's identity.

Expected format (kebab-case keys, nothing else allowed):

    title: Example Blog
    index-title: Example Blog | Home
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from blogsite.core.exceptions import ManifestDecodeError, SourceReadError, ValidationError
from blogsite.core.validators import DataValidator
from blogsite.utils.yaml_loader import load_strict

MANIFEST_FIELDS = ("title", "index-title")


@dataclass(frozen=True)
class Manifest:
    """
    Blog-level configuration.

    Attributes:
        title: Title displayed in the top row of every page
        index_title: Title used in the html header of the index page
    """

    title: str
    index_title: str

    @classmethod
    def from_file(cls, path: Path) -> Manifest:
        """
        Load and validate a manifest file.

        Raises:
            SourceReadError: File cannot be read as UTF-8
            ManifestDecodeError: YAML error or schema mismatch
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e
        return cls.from_yaml(text, path)

    @classmethod
    def from_yaml(cls, text: str, path: Optional[Path] = None) -> Manifest:
        """
        Decode manifest YAML.

        Examples:
            >>> Manifest.from_yaml("title: Blog\\nindex-title: Blog | Home\\n")
            Manifest(title='Blog', index_title='Blog | Home')
        """
        try:
            data = load_strict(text)
        except yaml.YAMLError as e:
            raise ManifestDecodeError(f"invalid YAML: {e}", path) from e

        try:
            fields = DataValidator.validate_exact_string_fields(data, MANIFEST_FIELDS)
        except ValidationError as e:
            raise ManifestDecodeError(f"invalid manifest: {e}", path) from e

        return cls(title=fields["title"], index_title=fields["index-title"])
