#!/usr/bin/env python3
"""
validators.py
--------------------
Schema validation for the YAML documents blogsite reads.

Post headers and the blog manifest are both flat mappings with a fixed
set of string fields and no extras allowed.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable

from .exceptions import ValidationError


class DataValidator:
    """Validation helpers for decoded YAML data."""

    @staticmethod
    def validate_exact_string_fields(
        data: Any, fields: Iterable[str]
    ) -> Dict[str, str]:
        """
        Check that ``data`` is a mapping holding exactly ``fields`` as strings.

        Args:
            data: Value returned by ``yaml.safe_load``
            fields: Names of the required fields

        Returns:
            Dictionary of field name to string value

        Raises:
            ValidationError: If data is not a mapping, a field is missing,
                an unknown field is present, or a value is not a string

        Examples:
            >>> DataValidator.validate_exact_string_fields(
            ...     {"title": "T", "author": "A"}, ("title", "author"))
            {'title': 'T', 'author': 'A'}
        """
        expected = list(fields)

        if not isinstance(data, dict):
            raise ValidationError(
                f"expected a mapping with fields {', '.join(expected)}, "
                f"got {type(data).__name__}"
            )

        unknown = sorted(str(key) for key in data if key not in expected)
        if unknown:
            raise ValidationError(f"unknown field(s): {', '.join(unknown)}")

        missing = [name for name in expected if name not in data]
        if missing:
            raise ValidationError(f"missing field(s): {', '.join(missing)}")

        for name in expected:
            if not isinstance(data[name], str):
                raise ValidationError(
                    f"field '{name}' must be a string, "
                    f"got {type(data[name]).__name__}"
                )

        return {name: data[name] for name in expected}
