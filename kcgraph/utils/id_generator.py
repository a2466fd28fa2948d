"""
ID generation utilities for kcgraph.

Node IDs are readable and deterministic, built from the artifact kind,
the codename and (for content items) the language:
- Content types: kentico-cloud-type-<codename>
- Content items: kentico-cloud-item-<codename>-<language>
"""

import re

DEFAULT_ID_PREFIX = "kentico-cloud"

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_WORD = re.compile(r"[A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """
    Split an identifier into words.

    Words are separated by any non-alphanumeric run, by lower-to-upper
    transitions ("blogPost") and by the end of an acronym ("XMLFeed").

    Args:
        value: Identifier such as a codename or language code

    Returns:
        List of words in their original casing
    """
    value = _LOWER_UPPER.sub(r"\1 \2", value)
    value = _ACRONYM_WORD.sub(r"\1 \2", value)
    return _WORD.findall(value)


def param_case(value: str) -> str:
    """Convert to lowercase hyphen-separated form ("about_us" -> "about-us")."""
    return "-".join(word.lower() for word in split_words(value))


def pascal_case(value: str) -> str:
    """Convert to PascalCase ("blog_post" -> "BlogPost")."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(value))


def make_node_id(
    kind: str,
    codename: str,
    language: str | None = None,
    prefix: str = DEFAULT_ID_PREFIX,
) -> str:
    """
    Generate a deterministic node ID.

    Args:
        kind: Artifact kind ("type" or "item")
        codename: Codename of the content type or item
        language: Optional language codename (content items only)
        prefix: Project prefix

    Returns:
        ID in format "<prefix>-<kind>-<codename>[-<language>]"
    """
    parts = [prefix, kind, param_case(codename)]
    if language:
        parts.append(param_case(language))
    return "-".join(parts)
