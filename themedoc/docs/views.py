"""Resolve blocks into typed, theme-aware view values.

``resolve_block_view`` is the single dispatch point from a block's tag to
the values a renderer needs. Each case is its own dataclass so a renderer
can match on type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union

from themedoc.docs.models import BlockType, ComponentSubtype, DocBlock, ShowcaseBlock
from themedoc.style.buttons import ButtonStyle, ButtonVariant, resolve_button_style
from themedoc.style.colors import ColorRole, ContrastText, color_for_role, format_rgb, resolve_contrast_text
from themedoc.themes.models import ThemeState

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE = "The quick brown fox jumps over the lazy dog."
DEFAULT_BUTTON_LABEL = "Button Label"
DEFAULT_ICON = "Star"


@dataclass(frozen=True, slots=True)
class HeadingView:
    block_id: str
    level: int
    text: str
    color: str
    font_family: str


@dataclass(frozen=True, slots=True)
class ParagraphView:
    block_id: str
    text: str
    color: str
    font_family: str


@dataclass(frozen=True, slots=True)
class DividerView:
    block_id: str


@dataclass(frozen=True, slots=True)
class ColorSwatchView:
    block_id: str
    role: ColorRole
    label: str
    hex: str
    rgb: str
    text: ContrastText


@dataclass(frozen=True, slots=True)
class TypographySampleView:
    block_id: str
    name: str
    sample: str
    size: str | None
    weight: str | None
    token: str | None
    font_family: str
    color: str


@dataclass(frozen=True, slots=True)
class ButtonView:
    block_id: str
    label: str
    variant: ButtonVariant
    style: ButtonStyle


@dataclass(frozen=True, slots=True)
class IconView:
    block_id: str
    name: str
    icon_name: str
    svg_content: str | None
    color: str


@dataclass(frozen=True, slots=True)
class ComponentView:
    block_id: str
    subtype: ComponentSubtype
    showcase: ShowcaseBlock | None = None
    element_type: str | None = None
    icons: tuple[dict[str, Any], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class UnknownBlockView:
    block_id: str
    type: str
    subtype: str | None = None


BlockView = Union[
    HeadingView,
    ParagraphView,
    DividerView,
    ColorSwatchView,
    TypographySampleView,
    ButtonView,
    IconView,
    ComponentView,
    UnknownBlockView,
]


def resolve_block_view(
    block: DocBlock,
    theme: ThemeState,
    *,
    generated_icons: Sequence[dict[str, Any]] = (),
) -> BlockView:
    """Resolve ``block`` against ``theme``; unknown tags yield ``UnknownBlockView``."""
    block_type = block.block_type
    metadata = block.metadata or {}
    text_color = color_for_role(theme, ColorRole.DARK_TEXT)

    if block_type is BlockType.H1 or block_type is BlockType.H2:
        return HeadingView(
            block_id=block.id,
            level=1 if block_type is BlockType.H1 else 2,
            text=block.content,
            color=text_color,
            font_family=theme.heading_font,
        )
    if block_type is BlockType.PARAGRAPH:
        return ParagraphView(block.id, block.content, text_color, theme.body_font)
    if block_type is BlockType.DIVIDER:
        return DividerView(block.id)
    if block_type is BlockType.COLOR:
        return _color_view(block, theme, metadata)
    if block_type is BlockType.TYPOGRAPHY:
        return TypographySampleView(
            block_id=block.id,
            name=str(metadata.get("name") or ""),
            sample=str(metadata.get("sample") or DEFAULT_SAMPLE),
            size=metadata.get("size"),
            weight=metadata.get("weight"),
            token=metadata.get("token"),
            font_family=theme.heading_font,
            color=text_color,
        )
    if block_type is BlockType.BUTTON:
        try:
            variant = ButtonVariant(metadata.get("type") or ButtonVariant.PRIMARY.value)
        except ValueError:
            variant = ButtonVariant.TERTIARY
        return ButtonView(
            block_id=block.id,
            label=str(metadata.get("label") or DEFAULT_BUTTON_LABEL),
            variant=variant,
            style=resolve_button_style(theme, variant),
        )
    if block_type is BlockType.ICON:
        svg = metadata.get("svgContent") if metadata.get("type") == "custom" else None
        return IconView(
            block_id=block.id,
            name=str(metadata.get("name") or ""),
            icon_name=str(metadata.get("iconName") or DEFAULT_ICON),
            svg_content=svg or None,
            color=text_color,
        )
    if block_type is BlockType.COMPONENT:
        return _component_view(block, metadata, generated_icons)
    return UnknownBlockView(block.id, block.type, block.subtype)


def _color_view(block: DocBlock, theme: ThemeState, metadata: Mapping[str, Any]) -> ColorSwatchView:
    raw_role = metadata.get("role") or ColorRole.PRIMARY.value
    try:
        role = ColorRole.parse(raw_role)
    except ValueError:
        logger.warning("block %s references unknown color role %r", block.id, raw_role)
        role = ColorRole.PRIMARY
    hex_color = color_for_role(theme, role)
    return ColorSwatchView(
        block_id=block.id,
        role=role,
        label=role.label,
        hex=hex_color,
        rgb=format_rgb(hex_color),
        text=resolve_contrast_text(hex_color),
    )


def _component_view(
    block: DocBlock,
    metadata: Mapping[str, Any],
    generated_icons: Sequence[dict[str, Any]],
) -> ComponentView | UnknownBlockView:
    subtype = ComponentSubtype.parse(metadata.get("subtype"))
    if subtype is None:
        return UnknownBlockView(block.id, block.type, block.subtype)

    if subtype is ComponentSubtype.ICONS_LIBRARY:
        # Supplied icons win outright; generated content is only a fallback.
        icons = metadata.get("icons")
        if icons is None:
            icons = generated_icons
        elif not isinstance(icons, (list, tuple)):
            icons = ()
        return ComponentView(block.id, subtype, icons=tuple(icons))
    if subtype is ComponentSubtype.ICON_GRID:
        return ComponentView(block.id, subtype, icons=tuple(metadata.get("icons") or ()))
    if subtype is ComponentSubtype.BLOCK:
        try:
            showcase = ShowcaseBlock(metadata.get("blockType"))
        except ValueError:
            return UnknownBlockView(block.id, block.type, block.subtype)
        return ComponentView(block.id, subtype, showcase=showcase)
    if subtype is ComponentSubtype.FORM_ELEMENT:
        return ComponentView(
            block.id,
            subtype,
            element_type=str(metadata.get("elementType") or "text-input"),
        )
    return ComponentView(block.id, subtype)
