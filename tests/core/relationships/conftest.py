"""Fixtures for relationship linker tests."""

import pytest

from kcgraph.core.node_factory import create_content_item_node, create_content_type_node


@pytest.fixture
def build_item_node(item_factory):
    """Build an item node from item_factory arguments."""

    def build(*args, **kwargs):
        return create_content_item_node(item_factory(*args, **kwargs), [])

    return build


@pytest.fixture
def build_type_node(type_factory):
    """Build a content type node by codename."""

    def build(codename):
        return create_content_type_node(type_factory(codename))

    return build
