"""
Input record models for content exported from the content API.

Raw records are validated once at the boundary; everything downstream works
on plain dicts that are guaranteed to carry the minimal system shape.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from kcgraph.utils.exceptions import InvalidArgumentError


class ElementType(str, Enum):
    """Element types that drive flattening and linking."""

    RICH_TEXT = "rich_text"
    MODULAR_CONTENT = "modular_content"


class TypeSystemAttributes(BaseModel):
    """System attributes of a content type."""

    model_config = ConfigDict(extra="allow")

    codename: str = Field(..., min_length=1, description="Content type codename")
    id: str | None = Field(default=None, description="Content type ID")
    name: str | None = Field(default=None, description="Display name")


class ItemSystemAttributes(BaseModel):
    """System attributes of a content item."""

    model_config = ConfigDict(extra="allow")

    codename: str = Field(..., min_length=1, description="Content item codename")
    type: str = Field(..., min_length=1, description="Codename of the content type")
    language: str = Field(..., min_length=1, description="Language codename")
    id: str | None = Field(default=None, description="Content item ID")
    name: str | None = Field(default=None, description="Display name")


class ContentTypeRecord(BaseModel):
    """Content type: schema descriptor for one kind of content item."""

    model_config = ConfigDict(extra="allow")

    system: TypeSystemAttributes
    elements: dict[str, Any] = Field(default_factory=dict)


class ContentItemRecord(BaseModel):
    """
    Content item with its element descriptors.

    Element values are mirrored as top-level fields (kept as extras), so a
    record looks like {"system": ..., "elements": ..., "title": ..., ...}.
    """

    model_config = ConfigDict(extra="allow")

    system: ItemSystemAttributes
    elements: dict[str, Any] = Field(default_factory=dict)


def _validate(model: type[BaseModel], raw: Any, argument: str) -> dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise InvalidArgumentError(
            f"{argument} is not a valid {model.__name__} object.",
            context={"argument": argument, "received": type(raw).__name__},
        )

    try:
        model.model_validate(raw)
    except PydanticValidationError as e:
        raise InvalidArgumentError(
            f"{argument} is not a valid {model.__name__} object: {e.error_count()} error(s)",
            context={"argument": argument, "errors": e.errors(include_url=False)},
        ) from e

    # Raw mapping, not the model dump: nested items reach the digest as exported.
    return dict(raw)


def validate_content_type(raw: Any, argument: str = "content_type") -> dict[str, Any]:
    """
    Validate a raw content type record.

    Args:
        raw: Record as exported by the content API
        argument: Parameter name reported on failure

    Returns:
        Shallow copy of the record

    Raises:
        InvalidArgumentError: If system.codename is missing
    """
    return _validate(ContentTypeRecord, raw, argument)


def validate_content_item(raw: Any, argument: str = "content_item") -> dict[str, Any]:
    """
    Validate a raw content item record.

    Raises:
        InvalidArgumentError: If system.codename, system.type or system.language is missing
    """
    return _validate(ContentItemRecord, raw, argument)
