"""Plain-text and Markdown documents for saved prompts"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import StrictUndefined

from .core.model import EfficiencyAnalysis, ProjectContext
from .core.renderer import Renderer, make_env

FORMATS = ("txt", "md")
RULE = "=" * 50

MARKDOWN_TEMPLATE = """# AI Prompt: {{ task_type }}

> Generated on {{ generated_at }}

## Prompt

```
{{ prompt }}
```

## Analysis

- **Token Count:** {{ analysis.estimated_tokens }}
- **Efficiency:** {{ analysis.efficiency }}
- **Character Length:** {{ prompt|length }}

## Options

```json
{{ options|json }}
```
{% if analysis.recommendations %}

## Optimization Tips

{% for tip in analysis.recommendations %}
- {{ tip }}
{% endfor %}
{% endif %}
{% if context %}

## Project Context

```json
{{ context|json }}
```
{% endif %}
"""

TEXT_TEMPLATE = """CodePrompt AI Prompt: {{ task_type|upper }}
Generated: {{ generated_at }}

{{ rule }}
OPTIMIZED PROMPT
{{ rule }}

{{ prompt }}

{{ rule }}
ANALYSIS & METRICS
{{ rule }}

Token Count: {{ analysis.estimated_tokens }}
Efficiency Rating: {{ analysis.efficiency }}
Character Length: {{ prompt|length }}

{{ rule }}
CONFIGURATION OPTIONS
{{ rule }}

{{ options|json }}
{% if analysis.recommendations %}

{{ rule }}
OPTIMIZATION TIPS
{{ rule }}

{% for tip in analysis.recommendations %}
- {{ tip }}
{% endfor %}
{% endif %}
"""


def normalize_format(fmt: Optional[str]) -> str:
    return fmt if fmt in FORMATS else "txt"


def render_document(
    fmt: str,
    task_type: str,
    prompt: str,
    analysis: EfficiencyAnalysis,
    options: Mapping[str, Any],
    context: Optional[ProjectContext] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render a prompt with its analysis and options as ``txt`` or ``md``.

    Unknown formats render as ``txt``. The project context section is only
    included in Markdown and only when something was detected.
    """
    generated_at = generated_at or datetime.now()
    template = MARKDOWN_TEMPLATE if normalize_format(fmt) == "md" else TEXT_TEMPLATE
    renderer = Renderer(make_env(undefined=StrictUndefined, trim_blocks=True))
    return renderer.render(
        template,
        {
            "task_type": task_type,
            "prompt": prompt,
            "analysis": analysis,
            "options": dict(options),
            "context": context.model_dump(by_alias=True) if context and not context.is_empty() else None,
            "generated_at": generated_at.isoformat(timespec="seconds"),
            "rule": RULE,
        },
    )


def document_filename(task_type: str, fmt: str, generated_at: datetime) -> str:
    timestamp = generated_at.isoformat(timespec="milliseconds").replace(":", "-").replace(".", "-")
    return f"prompt-{task_type}-{timestamp}.{normalize_format(fmt)}"


def save_document(
    directory: Union[str, Path],
    fmt: str,
    task_type: str,
    prompt: str,
    analysis: EfficiencyAnalysis,
    options: Mapping[str, Any],
    context: Optional[ProjectContext] = None,
    generated_at: Optional[datetime] = None,
) -> Path:
    """Write the rendered document into ``directory`` and return its path."""
    generated_at = generated_at or datetime.now()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / document_filename(task_type, fmt, generated_at)
    path.write_text(
        render_document(fmt, task_type, prompt, analysis, options, context, generated_at),
        encoding="utf-8",
    )
    return path
