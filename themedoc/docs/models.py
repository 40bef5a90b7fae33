"""Document page and block models."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class BlockType(str, Enum):
    H1 = "h1"
    H2 = "h2"
    PARAGRAPH = "paragraph"
    DIVIDER = "divider"
    COLOR = "color"
    TYPOGRAPHY = "typography"
    BUTTON = "button"
    ICON = "icon"
    COMPONENT = "component"


class ComponentSubtype(str, Enum):
    BRAND_COLORS = "brand-colors"
    TYPOGRAPHY_SYSTEM = "typography-system"
    ICONS_LIBRARY = "icons-library"
    BUTTONS_SYSTEM = "buttons-system"
    BLOCK = "block"
    LIVE_OVERVIEW = "live-overview"
    FORM_ELEMENT = "form-element"
    ICON_GRID = "icon-grid"

    @classmethod
    def parse(cls, value: object) -> ComponentSubtype | None:
        if value == "button-showcase":
            return cls.BUTTONS_SYSTEM
        try:
            return cls(value)
        except ValueError:
            return None


class ShowcaseBlock(str, Enum):
    PRICING = "pricing"
    STATS = "stats"
    TESTIMONIAL = "testimonial"


@dataclass(frozen=True, slots=True)
class DocBlock:
    """One typed unit of page content.

    ``type`` is kept as a plain string so unknown tags from drops survive
    untouched; ``BlockType`` lists the tags the editor knows. ``metadata`` is
    stored as a read-only copy, so pages never share mutable block state.
    """

    id: str
    type: str
    content: str = ""
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.metadata is not None:
            frozen = MappingProxyType(copy.deepcopy(dict(self.metadata)))
            object.__setattr__(self, "metadata", frozen)

    @property
    def block_type(self) -> BlockType | None:
        try:
            return BlockType(self.type)
        except ValueError:
            return None

    @property
    def subtype(self) -> str | None:
        if self.metadata is None:
            return None
        value = self.metadata.get("subtype")
        return value if isinstance(value, str) else None

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type, "content": self.content}
        if self.metadata is not None:
            data["metadata"] = copy.deepcopy(dict(self.metadata))
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DocBlock:
        metadata = data.get("metadata")
        return cls(
            id=str(data["id"]),
            type=str(data["type"]),
            content=str(data.get("content") or ""),
            metadata=dict(metadata) if isinstance(metadata, Mapping) else None,
        )


@dataclass(frozen=True, slots=True)
class DocPage:
    """A titled, ordered sequence of blocks. Tuple order is document order."""

    id: str
    title: str
    last_modified: int = 0
    blocks: tuple[DocBlock, ...] = field(default_factory=tuple)

    @property
    def block_ids(self) -> list[str]:
        return [block.id for block in self.blocks]

    def to_mapping(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "lastModified": self.last_modified,
            "blocks": [block.to_mapping() for block in self.blocks],
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DocPage:
        return cls(
            id=str(data["id"]),
            title=str(data.get("title") or ""),
            last_modified=int(data.get("lastModified") or 0),
            blocks=tuple(DocBlock.from_mapping(row) for row in data.get("blocks") or ()),
        )
