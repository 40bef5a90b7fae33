"""Hover/lock inspection state for the component identity overlay."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_COMPONENT_TYPE = "Atom/Component"


@dataclass(frozen=True, slots=True)
class ComponentIdentity:
    display_name: str
    file_path: str
    parent_component: str | None = None
    type: str | None = None
    value: str | None = None


@dataclass(frozen=True, slots=True)
class InspectionState:
    """Which element is hovered and which is pinned; a pinned id wins."""

    hovered_id: str | None = None
    locked_id: str | None = None

    @property
    def active_id(self) -> str | None:
        return self.locked_id or self.hovered_id

    def hover(self, element_id: str) -> InspectionState:
        return replace(self, hovered_id=element_id)

    def leave(self, element_id: str | None = None) -> InspectionState:
        if element_id is not None and element_id != self.hovered_id:
            return self
        return replace(self, hovered_id=None)

    def toggle_lock(self, element_id: str) -> InspectionState:
        if self.locked_id == element_id:
            return replace(self, locked_id=None)
        return replace(self, locked_id=element_id)


def format_identity_snippet(identity: ComponentIdentity) -> str:
    """Render the clipboard form used by the inspector's copy action."""
    fields = (
        ("displayName", identity.display_name),
        ("filePath", identity.file_path),
        ("parentComponent", identity.parent_component or ""),
        ("type", identity.type or DEFAULT_COMPONENT_TYPE),
        ("value", identity.value or ""),
    )
    return ", ".join(f'"{key}": "{value}"' for key, value in fields)
