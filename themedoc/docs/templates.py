"""Generators for the standard documentation pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from themedoc.docs.models import BlockType, ComponentSubtype, DocBlock, DocPage, ShowcaseBlock
from themedoc.docs.pages import now_ms, upsert_page
from themedoc.themes.models import DEFAULT_THEME, ThemeState


@dataclass(frozen=True, slots=True)
class IconEntry:
    id: str
    name: str
    icon_name: str
    category: str = "General"
    type: str = "lucide"
    svg_content: str | None = None

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "iconName": self.icon_name,
            "category": self.category,
            "type": self.type,
        }
        if self.svg_content is not None:
            data["svgContent"] = self.svg_content
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> IconEntry:
        return cls(
            id=str(data.get("id") or data.get("iconName") or ""),
            name=str(data.get("name") or data.get("iconName") or ""),
            icon_name=str(data.get("iconName") or ""),
            category=str(data.get("category") or "General"),
            type=str(data.get("type") or "lucide"),
            svg_content=data.get("svgContent"),
        )


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """The slice of project configuration the page templates read."""

    project_name: str = ""
    version: str = "1.0"
    icons: tuple[IconEntry, ...] = field(default_factory=tuple)
    typography_family: str | None = None


def _block(block_id: str, block_type: BlockType, content: str = "", **metadata: Any) -> DocBlock:
    return DocBlock(
        id=block_id,
        type=block_type.value,
        content=content,
        metadata=dict(metadata) if metadata else None,
    )


def _component(block_id: str, subtype: ComponentSubtype, **metadata: Any) -> DocBlock:
    return _block(block_id, BlockType.COMPONENT, subtype=subtype.value, **metadata)


def _px(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{int(value) if float(value).is_integer() else value}px"


def overview_blocks(config: ProjectConfig, theme: ThemeState) -> list[DocBlock]:
    name = config.project_name or "the merchant application"
    return [
        _block("d1", BlockType.H1, "Merchant Overview"),
        _block(
            "d2",
            BlockType.PARAGRAPH,
            f"Technical specification for {name}. "
            "Use the sidebar to navigate to specific asset registries.",
        ),
        _block("div1", BlockType.DIVIDER),
        _component("d_live_overview", ComponentSubtype.LIVE_OVERVIEW),
        _block("div_live", BlockType.DIVIDER),
        _block("d3", BlockType.H2, "Quick Stats"),
        _block(
            "p_stats",
            BlockType.PARAGRAPH,
            f"• Primary Color: {theme.primary}\n"
            f"• Font Family: {theme.font_family}\n"
            f"• Icon Count: {len(config.icons)}\n"
            f"• Border Radius: {_px(theme.border_radius)}",
        ),
        _block("div2", BlockType.DIVIDER),
        _block("d4", BlockType.H2, "Theme Physics"),
        _block("p_phys", BlockType.PARAGRAPH, "Global settings determining the shape and spacing of the UI."),
        _block("p_phys_r", BlockType.PARAGRAPH, f"• Border Radius: {_px(theme.border_radius)}"),
        _block("p_phys_px", BlockType.PARAGRAPH, f"• Button Padding X: {_px(theme.btn_padding_x)}"),
        _block("p_phys_py", BlockType.PARAGRAPH, f"• Button Padding Y: {_px(theme.btn_padding_y)}"),
    ]


def colors_blocks(theme: ThemeState) -> list[DocBlock]:
    return [
        _block("c_h1", BlockType.H1, "Color Palette"),
        _block(
            "c_p1",
            BlockType.PARAGRAPH,
            "The semantic color system defines the brand identity and UI state communication.",
        ),
        _block("c_div1", BlockType.DIVIDER),
        _component("c_brand_view", ComponentSubtype.BRAND_COLORS),
    ]


def typography_blocks(config: ProjectConfig, theme: ThemeState) -> list[DocBlock]:
    family = config.typography_family or theme.heading_font
    return [
        _block("t_h1", BlockType.H1, "Typography"),
        _block("t_p1", BlockType.PARAGRAPH, f"Primary Typeface: {family}"),
        _block("t_div1", BlockType.DIVIDER),
        _component("t_system_view", ComponentSubtype.TYPOGRAPHY_SYSTEM),
    ]


def buttons_blocks(theme: ThemeState) -> list[DocBlock]:
    style = theme.button_style or DEFAULT_THEME.button_style
    fill = theme.fill_mode or DEFAULT_THEME.fill_mode
    return [
        _block("b_h1", BlockType.H1, "Buttons & Actions"),
        _block(
            "b_p1",
            BlockType.PARAGRAPH,
            f'Standard button styles using the "{style}" variant with {fill} fill.',
        ),
        _block("b_div1", BlockType.DIVIDER),
        _component("b_system_view", ComponentSubtype.BUTTONS_SYSTEM),
    ]


def icons_blocks(icons: Sequence[IconEntry]) -> list[DocBlock]:
    return [
        _block("i_h1", BlockType.H1, "Iconography"),
        _block(
            "i_p1",
            BlockType.PARAGRAPH,
            f"System icons used for navigation and actions. Total count: {len(icons)}",
        ),
        _block("i_div1", BlockType.DIVIDER),
        _component(
            "i_library_view",
            ComponentSubtype.ICONS_LIBRARY,
            icons=[icon.to_mapping() for icon in icons],
        ),
    ]


_FORM_SECTIONS: tuple[tuple[str, str, tuple[tuple[str, str], ...]], ...] = (
    ("f_h2_text", "Text Inputs", (
        ("f_std", "text-input"),
        ("f_email", "email-input"),
        ("f_pass", "password-input"),
    )),
    ("f_h2_spec", "Specialized Inputs", (
        ("f_phone", "phone-input"),
        ("f_curr", "currency-input"),
        ("f_step", "stepper"),
    )),
    ("f_h2_sel", "Selection Controls", (
        ("f_check", "checkbox"),
        ("f_radio", "radio"),
        ("f_toggle", "toggle"),
        ("f_seg", "segment"),
    )),
    ("f_h2_range", "Range", (
        ("f_slider", "slider"),
    )),
)


def forms_blocks(theme: ThemeState) -> list[DocBlock]:
    variant = theme.form_variant or DEFAULT_THEME.form_variant
    label = theme.form_label_style or DEFAULT_THEME.form_label_style
    blocks = [
        _block("f_h1", BlockType.H1, "Form Elements"),
        _block(
            "f_p1",
            BlockType.PARAGRAPH,
            "Standardized input components reflecting the current design tokens. "
            f"Style: {variant}, Label: {label}",
        ),
        _block("f_div1", BlockType.DIVIDER),
    ]
    for heading_id, heading, elements in _FORM_SECTIONS:
        blocks.append(_block(heading_id, BlockType.H2, heading))
        blocks.extend(
            _component(block_id, ComponentSubtype.FORM_ELEMENT, elementType=element)
            for block_id, element in elements
        )
    return blocks


def showcase_blocks() -> list[DocBlock]:
    return [
        _block("bl_h1", BlockType.H1, "Component Blocks"),
        _block("bl_p1", BlockType.PARAGRAPH, "Pre-designed high-level blocks for rapid page building."),
        _block("bl_div1", BlockType.DIVIDER),
        _block("bl_h2_pricing", BlockType.H2, "Pricing Tables"),
        _component("bl_pricing", ComponentSubtype.BLOCK, blockType=ShowcaseBlock.PRICING.value),
        _block("bl_div2", BlockType.DIVIDER),
        _block("bl_h2_stats", BlockType.H2, "Statistics & Metrics"),
        _component("bl_stats", ComponentSubtype.BLOCK, blockType=ShowcaseBlock.STATS.value),
        _block("bl_div3", BlockType.DIVIDER),
        _block("bl_h2_test", BlockType.H2, "Testimonials"),
        _component("bl_testimonials", ComponentSubtype.BLOCK, blockType=ShowcaseBlock.TESTIMONIAL.value),
    ]


def _standard_contents(config: ProjectConfig, theme: ThemeState) -> list[tuple[str, str, list[DocBlock]]]:
    return [
        ("overview", "Overview", overview_blocks(config, theme)),
        ("colors", "Colors", colors_blocks(theme)),
        ("typography", "Typography", typography_blocks(config, theme)),
        ("buttons", "Buttons", buttons_blocks(theme)),
        ("icons", "Icons", icons_blocks(config.icons)),
        ("forms", "Forms", forms_blocks(theme)),
        ("blocks", "Blocks", showcase_blocks()),
    ]


STANDARD_PAGE_IDS: tuple[str, ...] = (
    "overview", "colors", "typography", "buttons", "icons", "forms", "blocks",
)


def standard_pages(config: ProjectConfig, theme: ThemeState, *, now: int | None = None) -> list[DocPage]:
    stamp = now if now is not None else now_ms()
    return [
        DocPage(id=page_id, title=title, last_modified=stamp, blocks=tuple(blocks))
        for page_id, title, blocks in _standard_contents(config, theme)
    ]


def regenerate_standard_pages(
    pages: list[DocPage],
    config: ProjectConfig,
    theme: ThemeState,
    *,
    now: int | None = None,
) -> list[DocPage]:
    """Refresh standard pages with the current theme; custom pages are kept."""
    stamp = now if now is not None else now_ms()
    for page_id, title, blocks in _standard_contents(config, theme):
        pages = upsert_page(pages, page_id, title, blocks, now=stamp)
    return pages
