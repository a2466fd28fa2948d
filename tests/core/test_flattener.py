"""
Tests for the content flattener.

Covers plain items, nested modular content, rich text pass-through and
cycle detection on self and mutual references.
"""

import copy

import pytest

from kcgraph.core.flattener import flatten_content_item
from kcgraph.utils.exceptions import InvalidArgumentError


class TestFlattenPlainItems:
    """Items without embedded references."""

    def test_fields_become_elements(self, item_factory):
        """Test top-level fields are collected under elements."""
        item = item_factory("post", title="Hello", summary="Short")

        flattened = flatten_content_item(item)

        assert flattened["system"] is item["system"]
        assert flattened["elements"] == {"title": item["title"], "summary": item["summary"]}
        assert "cycleDetected" not in flattened

    def test_element_descriptors_excluded(self, item_factory):
        """Test system and elements are not copied as elements."""
        flattened = flatten_content_item(item_factory("post", title="Hello"))

        assert set(flattened) == {"system", "elements"}
        assert set(flattened["elements"]) == {"title"}

    def test_input_not_mutated(self, item_factory):
        """Test the source record is unchanged."""
        author = item_factory("jane", "author", full_name="Jane")
        item = item_factory("post", linked={"authors": [author]}, title="Hello")
        before = copy.deepcopy(item)

        flatten_content_item(item)

        assert item == before

    def test_rich_text_copied_through(self, item_factory):
        """Test rich text objects are kept as-is for later linking."""
        item = item_factory("post", rich_text={"body": ["jane"]})

        flattened = flatten_content_item(item)

        assert flattened["elements"]["body"] is item["body"]

    def test_empty_modular_content_copied(self, item_factory):
        """Test an empty linked items list stays an empty list."""
        item = item_factory("post", linked={"authors": []})

        assert flatten_content_item(item)["elements"]["authors"] == []

    def test_missing_codename(self):
        """Test items without a codename are rejected."""
        with pytest.raises(InvalidArgumentError):
            flatten_content_item({"system": {"type": "article"}, "elements": {}})


class TestFlattenNested:
    """Items embedding other items."""

    def test_nested_items_flattened_in_order(self, item_factory):
        """Test linked items are flattened recursively and keep their order."""
        first = item_factory("b_item", "author", full_name="B")
        second = item_factory("a_item", "author", full_name="A")
        item = item_factory("post", linked={"authors": [first, second]})

        flattened = flatten_content_item(item)

        authors = flattened["elements"]["authors"]
        assert [author["system"]["codename"] for author in authors] == ["b_item", "a_item"]
        assert authors[0]["elements"] == {"full_name": first["full_name"]}

    def test_deep_nesting(self, chain_factory, log_messages):
        """Test long non-cyclic chains flatten completely."""
        item = chain_factory(2500)

        flattened = flatten_content_item(item)

        depth = 0
        node = flattened
        while node["elements"].get("children"):
            node = node["elements"]["children"][0]
            depth += 1
        assert depth == 2500
        assert node["system"]["codename"] == "level_2500"
        assert "cycleDetected" not in node
        assert not any("Cycle detected" in message for message in log_messages)

    def test_deep_cycle_cut_at_bottom(self, chain_factory, log_messages):
        """Test a cycle closing at the end of a long chain is still cut."""
        item = chain_factory(2500)
        last = item
        while last.get("children"):
            last = last["children"][0]
        last["elements"]["children"] = {"type": "modular_content", "value": []}
        last["children"] = [item]

        flattened = flatten_content_item(item)

        node = flattened
        while node.get("elements") and node["elements"].get("children"):
            node = node["elements"]["children"][0]
        assert node["cycleDetected"] is True
        assert node["system"] is item["system"]
        cycle_lines = [message for message in log_messages if "Cycle detected" in message]
        assert len(cycle_lines) == 1
        assert cycle_lines[0].endswith("level_2499 -> level_2500 -> level_0")

    def test_sibling_order_kept_under_nesting(self, item_factory):
        """Test nested lists keep document order at every level."""
        leaf_a = item_factory("leaf_a", "author")
        leaf_b = item_factory("leaf_b", "author")
        middle = item_factory("middle", "page", linked={"authors": [leaf_b, leaf_a]})
        item = item_factory("post", linked={"pages": [middle, leaf_a]})

        flattened = flatten_content_item(item)

        pages = flattened["elements"]["pages"]
        assert [page["system"]["codename"] for page in pages] == ["middle", "leaf_a"]
        nested = pages[0]["elements"]["authors"]
        assert [author["system"]["codename"] for author in nested] == ["leaf_b", "leaf_a"]

    def test_siblings_do_not_share_path(self, item_factory, log_messages):
        """Test the same item linked twice under one parent is not a cycle."""
        shared = item_factory("shared", "author")
        item = item_factory("post", linked={"first": [shared], "second": [shared]})

        flattened = flatten_content_item(item)

        assert "cycleDetected" not in flattened["elements"]["first"][0]
        assert "cycleDetected" not in flattened["elements"]["second"][0]
        assert not any("Cycle detected" in message for message in log_messages)

    def test_list_without_descriptor_copied(self, item_factory):
        """Test lists are only flattened for modular content elements."""
        item = item_factory("post")
        item["tags"] = [{"name": "News", "codename": "news"}]

        flattened = flatten_content_item(item)

        assert flattened["elements"]["tags"] is item["tags"]


class TestFlattenCycles:
    """Cycle detection."""

    def test_self_reference(self, item_factory, log_messages):
        """Test an item linking to itself stops at the repeated node."""
        item = item_factory("loop", linked={"related": []})
        item["related"] = [item]

        flattened = flatten_content_item(item)

        placeholder = flattened["elements"]["related"][0]
        assert placeholder == {"system": item["system"], "elements": None, "cycleDetected": True}
        assert "Cycle detected in linked items' path: loop -> loop" in log_messages

    def test_mutual_reference(self, item_factory, log_messages):
        """Test a two-item cycle is cut on the second visit."""
        first = item_factory("first", linked={"related": []})
        second = item_factory("second", linked={"related": [first]})
        first["related"] = [second]

        flattened = flatten_content_item(first)

        nested = flattened["elements"]["related"][0]
        assert nested["system"]["codename"] == "second"
        assert nested["elements"]["related"][0]["cycleDetected"] is True
        cycle_lines = [message for message in log_messages if "Cycle detected" in message]
        assert cycle_lines == ["Cycle detected in linked items' path: first -> second -> first"]

    def test_cycle_path_contains_codename_twice(self, item_factory, log_messages):
        """Test the logged path repeats the codename that closed the cycle."""
        item = item_factory("loop", linked={"related": []})
        item["related"] = [item]

        flatten_content_item(item)

        line = next(message for message in log_messages if "Cycle detected" in message)
        assert line.count("loop") == 2

    def test_custom_separator(self, item_factory, log_messages):
        """Test the separator used in the cycle diagnostic."""
        item = item_factory("loop", linked={"related": []})
        item["related"] = [item]

        flatten_content_item(item, separator=" > ")

        assert "Cycle detected in linked items' path: loop > loop" in log_messages

    def test_visited_path_argument(self, item_factory):
        """Test an item already on the given path becomes a placeholder."""
        item = item_factory("post", title="Hello")

        flattened = flatten_content_item(item, ["home", "post"])

        assert flattened["cycleDetected"] is True
        assert flattened["elements"] is None
