from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type

from jinja2 import Environment, TemplateError, Undefined

from .exceptions import CodePromptError

GENERIC_PLACEHOLDER = "component"


class FallbackUndefined(Undefined):
    """Undefined that renders a generic literal instead of an empty string."""

    def __str__(self) -> str:
        return GENERIC_PLACEHOLDER


def _json_dump(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False)


def make_env(
    undefined: Type[Undefined] = FallbackUndefined,
    trim_blocks: bool = False,
) -> Environment:
    """Create the Jinja2 environment used for prompts and exported documents.

    Args:
        undefined: Undefined class for placeholders with no value
        trim_blocks: Drop the first newline after a block tag
    """
    env = Environment(
        autoescape=False,
        undefined=undefined,
        trim_blocks=trim_blocks,
        lstrip_blocks=False,
        keep_trailing_newline=True,
    )
    env.filters["json"] = _json_dump
    return env


class Renderer:
    def __init__(self, env: Optional[Environment] = None) -> None:
        self.env = env or make_env()

    def render(self, template_text: str, variables: Dict[str, Any]) -> str:
        try:
            tmpl = self.env.from_string(template_text)
            return tmpl.render(variables)
        except TemplateError as e:
            raise CodePromptError(f"render error: {e}") from e
