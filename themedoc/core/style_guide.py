"""Write the resolved style guide as a YAML document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

import yaml

from themedoc.docs.models import DocPage
from themedoc.docs.templates import ProjectConfig, standard_pages
from themedoc.errors import ErrorCode, ThemeDocError
from themedoc.style.buttons import resolve_button_matrix
from themedoc.style.catalog import build_color_catalog, group_by_category
from themedoc.themes.compiler import compile_css_variables
from themedoc.themes.models import ThemeState

if TYPE_CHECKING:
    from themedoc.config.settings import AppSettings


class StyleGuideExporter:
    """Builds a style guide document from a theme and writes it to disk."""

    def __init__(self, settings: AppSettings, output_path: Path | None = None) -> None:
        self._settings = settings
        self._output_path = output_path or settings.app_data_dir / "style-guide.yaml"

    @property
    def output_path(self) -> Path:
        return self._output_path

    def build(
        self,
        theme: ThemeState,
        *,
        preset_id: str = "",
        config: ProjectConfig | None = None,
        pages: Sequence[DocPage] | None = None,
    ) -> dict[str, Any]:
        config = config or ProjectConfig()
        if pages is None:
            pages = standard_pages(config, theme)
        catalog = group_by_category(build_color_catalog(theme))
        return {
            "project": {
                "name": config.project_name,
                "version": config.version,
                "preset": preset_id,
            },
            "theme": theme.to_mapping(),
            "cssVariables": compile_css_variables(theme),
            "colors": {
                category: [entry.to_mapping() for entry in entries]
                for category, entries in catalog.items()
            },
            "buttons": {
                variant: {state: style.to_mapping() for state, style in states.items()}
                for variant, states in resolve_button_matrix(theme).items()
            },
            "pages": [page.to_mapping() for page in pages],
        }

    def write(self, theme: ThemeState, **kwargs: Any) -> Path:
        """Write the style guide and return its path."""
        document = self.build(theme, **kwargs)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(
                yaml.safe_dump(document, default_flow_style=False, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ThemeDocError(
                ErrorCode.EXPORT_FAILED,
                path=self._output_path,
                details={"original": str(exc)},
            ) from exc
        return self._output_path
