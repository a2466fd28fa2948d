"""Graph node models and relationship field names."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# Nodes are plain dicts: payload fields are spread into them and linkers add
# relationship fields whose names depend on the content model.
GraphNode = dict[str, Any]


class NodeKind(str, Enum):
    """Kinds of artifacts turned into nodes."""

    TYPE = "type"
    ITEM = "item"


# Relationship fields
CONTENT_ITEMS_FIELD = "contentItems"
CONTENT_TYPE_FIELD = "contentType"
OTHER_LANGUAGES_FIELD = "otherLanguages"
USED_BY_FIELD = "usedByContentItems"

# Cycle marker on flattened placeholders
CYCLE_DETECTED_FIELD = "cycleDetected"

# Names of the link fields the embedded reference linker wrote on a node
LINK_FIELDS_FIELD = "_embeddedLinkFields"

DEFAULT_LINKED_SUFFIX = "Linked"
DEFAULT_RICH_TEXT_LINKS_KEY = "linkedItems"
DEFAULT_TYPE_PREFIX = "KenticoCloud"


class NodeInternal(BaseModel):
    """Bookkeeping block consumed by the host runtime for dedup and schema grouping."""

    type: str = Field(..., description="Schema label: <prefix><Kind><Discriminant>")
    content: str = Field(..., description="Canonical serialization of the payload")
    contentDigest: str = Field(..., description="Hex digest of content")
