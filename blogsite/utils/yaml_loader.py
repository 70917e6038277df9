#!/usr/bin/env python3
"""
yaml_loader.py
-------------------
PyYAML loader for post headers and the blog manifest.

Differs from ``yaml.SafeLoader`` in two ways:

- A key repeated within one mapping is an error instead of silently
  keeping the last value.
- Plain scalars follow YAML 1.2 core rules for booleans and timestamps:
  only ``true``/``false`` are booleans, and dates stay strings. Titles
  like ``Yes``, ``On`` or ``2024-01-01`` therefore load as text.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from collections.abc import Hashable
from typing import Any

# --- Third-party imports ---
import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode

BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


class StrictLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate keys and uses YAML 1.2 booleans."""

    def construct_mapping(self, node: MappingNode, deep: bool = False) -> dict:
        if isinstance(node, MappingNode):
            self.flatten_mapping(node)

        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)

        return super().construct_mapping(node, deep=deep)


# Class-level copy so yaml.SafeLoader itself is left untouched
StrictLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (BOOL_TAG, TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
StrictLoader.add_implicit_resolver(BOOL_TAG, CORE_BOOL, list("tTfF"))


def load_strict(text: str) -> Any:
    """
    Parse one YAML document with StrictLoader.

    Raises:
        yaml.YAMLError: Syntax error or duplicate key

    Examples:
        >>> load_strict("title: Yes\\nauthor: On\\n")
        {'title': 'Yes', 'author': 'On'}
    """
    return yaml.load(text, Loader=StrictLoader)
