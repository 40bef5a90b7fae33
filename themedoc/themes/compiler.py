"""Theme compilation helpers."""

from __future__ import annotations

import re

from themedoc.themes.models import ThemeState


def css_variable_name(key: str) -> str:
    """``primaryBtnText`` -> ``--primary-btn-text``."""
    return "--" + re.sub(r"([A-Z])", r"-\1", key).lower()


def compile_css_variables(theme: ThemeState) -> dict[str, str]:
    """Compile a theme into custom-property values.

    Numeric fields also get a ``-px`` twin unless they are opacities.
    """
    variables: dict[str, str] = {}
    for key, value in theme.to_mapping().items():
        name = css_variable_name(key)
        if isinstance(value, (int, float)):
            text = str(int(value)) if float(value).is_integer() else str(value)
            variables[name] = text
            if "opacity" not in key.lower():
                variables[f"{name}-px"] = f"{text}px"
        else:
            variables[name] = value
    return variables


def compile_stylesheet(theme: ThemeState) -> str:
    """Render the variables as a ``:root`` block."""
    lines = [f"    {name}: {value};" for name, value in compile_css_variables(theme).items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"
