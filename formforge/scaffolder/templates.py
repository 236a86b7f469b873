"""Jinja2 template rendering for the generated form sources.

Provides the TemplateRenderer class which loads the ``.j2`` templates from
``formforge/scaffolder/templates/`` and serialises fragment trees and plans
into TypeScript / TSX source text.  The custom filters take care of quoting
user-supplied text for the three places it lands: JS string literals, JSX
text children and JSX attribute values.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for one scaffolding run.

    A fresh renderer is created per generator; nothing rendered is cached
    between runs.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["js_string"] = js_string
        self.env.filters["jsx_text"] = _jsx_text_filter
        self.env.filters["jsx_attr"] = _jsx_attr_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"component.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

_JSX_SPECIAL = re.compile(r"[{}<>&]")


def js_string(value: Any) -> str:
    """Quote *value* as a double-quoted JavaScript string literal."""
    return json.dumps(str(value), ensure_ascii=False)


def _jsx_text_filter(value: Any) -> str:
    """Emit *value* as a JSX child, wrapping it in an expression if needed."""
    text = str(value)
    if _JSX_SPECIAL.search(text):
        return "{" + js_string(text) + "}"
    return text


def _jsx_attr_filter(value: Any) -> str:
    """Emit *value* as a JSX attribute value (``"..."`` or ``{"..."}``)."""
    text = str(value)
    if '"' in text or "\\" in text:
        return "{" + js_string(text) + "}"
    return f'"{text}"'
