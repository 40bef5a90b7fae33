"""Tests for block view resolution."""

from themedoc.docs.models import ComponentSubtype, DocBlock, ShowcaseBlock
from themedoc.docs.views import (
    ButtonView,
    ColorSwatchView,
    ComponentView,
    DividerView,
    HeadingView,
    IconView,
    ParagraphView,
    TypographySampleView,
    UnknownBlockView,
    resolve_block_view,
)
from themedoc.style.buttons import ButtonVariant
from themedoc.style.colors import ColorRole, ContrastText
from themedoc.themes.models import DEFAULT_THEME


def _view(block_type, content="", **metadata):
    block = DocBlock("b1", block_type, content, metadata or None)
    return resolve_block_view(block, DEFAULT_THEME)


def test_heading_levels():
    h1 = _view("h1", "Title")
    h2 = _view("h2", "Sub")
    assert isinstance(h1, HeadingView) and h1.level == 1
    assert h2.level == 2
    assert h1.color == "#1C1C1E"


def test_paragraph_and_divider():
    assert isinstance(_view("paragraph", "Body"), ParagraphView)
    assert isinstance(_view("divider"), DividerView)


def test_color_swatch():
    view = _view("color", role="primaryBtnText")
    assert isinstance(view, ColorSwatchView)
    assert view.role is ColorRole.PRIMARY_BTN_TEXT
    assert view.label == "Primary Button Text"
    assert view.hex == "#FFFFFF"
    assert view.rgb == "255, 255, 255"
    assert view.text is ContrastText.DARK


def test_unknown_color_role_falls_back_to_primary():
    view = _view("color", role="chartreuse")
    assert view.role is ColorRole.PRIMARY
    assert view.hex == "#7E22CE"


def test_typography_defaults():
    view = _view("typography", name="Display")
    assert isinstance(view, TypographySampleView)
    assert view.sample.startswith("The quick brown fox")
    assert view.font_family == "Inter"


def test_button_variants():
    assert _view("button").variant is ButtonVariant.PRIMARY
    secondary = _view("button", type="secondary", label="Go")
    assert isinstance(secondary, ButtonView)
    assert secondary.label == "Go"
    assert secondary.style.background == "#F3E8FF"
    assert _view("button", type="ghost").variant is ButtonVariant.TERTIARY


def test_icon_defaults_and_custom_svg():
    icon = _view("icon")
    assert isinstance(icon, IconView)
    assert icon.icon_name == "Star"
    assert icon.svg_content is None
    custom = _view("icon", type="custom", svgContent="<svg/>", iconName="Logo")
    assert custom.svg_content == "<svg/>"
    ignored = _view("icon", type="lucide", svgContent="<svg/>")
    assert ignored.svg_content is None


def test_component_subtypes():
    view = _view("component", subtype="brand-colors")
    assert isinstance(view, ComponentView)
    assert view.subtype is ComponentSubtype.BRAND_COLORS
    assert _view("component", subtype="button-showcase").subtype is ComponentSubtype.BUTTONS_SYSTEM


def test_showcase_block():
    view = _view("component", subtype="block", blockType="stats")
    assert view.showcase is ShowcaseBlock.STATS
    assert isinstance(_view("component", subtype="block", blockType="hero"), UnknownBlockView)


def test_form_element_default():
    assert _view("component", subtype="form-element").element_type == "text-input"


def test_icons_library_prefers_supplied_icons():
    supplied = [{"iconName": "Home"}]
    generated = [{"iconName": "Bell"}]
    block = DocBlock("b1", "component", "", {"subtype": "icons-library", "icons": supplied})
    view = resolve_block_view(block, DEFAULT_THEME, generated_icons=generated)
    assert view.icons == ({"iconName": "Home"},)

    bare = DocBlock("b2", "component", "", {"subtype": "icons-library"})
    view = resolve_block_view(bare, DEFAULT_THEME, generated_icons=generated)
    assert view.icons == ({"iconName": "Bell"},)

    emptied = DocBlock("b3", "component", "", {"subtype": "icons-library", "icons": []})
    view = resolve_block_view(emptied, DEFAULT_THEME, generated_icons=generated)
    assert view.icons == ()


def test_unknown_types_render_placeholder():
    view = _view("carousel", slides=3)
    assert isinstance(view, UnknownBlockView)
    assert view.type == "carousel"
    unknown_subtype = _view("component", subtype="hologram")
    assert isinstance(unknown_subtype, UnknownBlockView)
    assert unknown_subtype.subtype == "hologram"
