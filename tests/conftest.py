"""
Shared fixtures for kcgraph tests.

Records mimic the shape exported by the content API: element descriptors
under "elements" and element values mirrored as top-level fields.
"""

from typing import Any

import pytest
from loguru import logger

from kcgraph.utils.logger import setup_logging


def make_type(codename: str) -> dict[str, Any]:
    """Build a content type record."""
    return {
        "system": {"id": f"type-{codename}", "codename": codename, "name": codename.title()},
        "elements": {"title": {"type": "text", "name": "Title"}},
    }


def make_item(
    codename: str,
    type_codename: str = "article",
    language: str = "en",
    linked: dict[str, list[dict[str, Any]]] | None = None,
    rich_text: dict[str, list[str]] | None = None,
    **fields: Any,
) -> dict[str, Any]:
    """
    Build a content item record.

    Args:
        codename: Item codename
        type_codename: Content type codename
        language: Language codename
        linked: Modular content elements: name -> nested item records
        rich_text: Rich text elements: name -> linked item codenames
        **fields: Plain text elements: name -> value
    """
    item: dict[str, Any] = {
        "system": {
            "id": f"id-{codename}-{language}",
            "codename": codename,
            "type": type_codename,
            "language": language,
            "name": codename,
        },
        "elements": {},
    }
    for name, value in fields.items():
        item["elements"][name] = {"type": "text", "name": name, "value": value}
        item[name] = {"type": "text", "name": name, "value": value}
    for name, items in (linked or {}).items():
        item["elements"][name] = {"type": "modular_content", "name": name, "value": []}
        item[name] = items
    for name, codenames in (rich_text or {}).items():
        item["elements"][name] = {"type": "rich_text", "name": name, "value": "<p></p>"}
        item[name] = {
            "type": "rich_text",
            "name": name,
            "value": "<p></p>",
            "linkedItemCodenames": codenames,
        }
    return item


def make_chain(depth: int, type_codename: str = "page") -> dict[str, Any]:
    """
    Build a chain of items, each embedding the next through "children".

    Returns the head of the chain; the last item is level_<depth>.
    """
    head = make_item("level_0", type_codename)
    current = head
    for level in range(1, depth + 1):
        child = make_item(f"level_{level}", type_codename)
        current["elements"]["children"] = {
            "type": "modular_content",
            "name": "children",
            "value": [],
        }
        current["children"] = [child]
        current = child
    return head


@pytest.fixture
def article_type() -> dict[str, Any]:
    """Content type "article"."""
    return make_type("article")


@pytest.fixture
def author_type() -> dict[str, Any]:
    """Content type "author"."""
    return make_type("author")


@pytest.fixture
def snapshot() -> dict[str, list[dict[str, Any]]]:
    """
    Bilingual snapshot: two articles, one author, English and Czech.

    post_1 embeds the author and mentions post_2 in its body.
    """
    author_en = make_item("jane_doe", "author", "en", full_name="Jane Doe")
    author_cs = make_item("jane_doe", "author", "cs", full_name="Jana Doe")
    post_2_en = make_item("post_2", "article", "en", title="Second")
    post_1_en = make_item(
        "post_1",
        "article",
        "en",
        linked={"authors": [author_en]},
        rich_text={"body": ["post_2", "missing_item"]},
        title="First",
    )
    post_1_cs = make_item(
        "post_1",
        "article",
        "cs",
        linked={"authors": [author_cs]},
        rich_text={"body": []},
        title="První",
    )
    return {
        "types": [make_type("article"), make_type("author")],
        "items": [post_1_en, post_2_en, author_en, post_1_cs, author_cs],
    }


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def item_factory():
    """Builder for content item records (see make_item)."""
    return make_item


@pytest.fixture
def type_factory():
    """Builder for content type records (see make_type)."""
    return make_type


@pytest.fixture
def chain_factory():
    """Builder for deep chains of embedded items (see make_chain)."""
    return make_chain


@pytest.fixture
def reset_logging():
    """Drop any file sink a test installed by restoring the console-only setup."""
    yield
    setup_logging()
