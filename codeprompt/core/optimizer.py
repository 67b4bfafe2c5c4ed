"""Context and output-format directives appended to a built prompt."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from .model import ProjectContext

logger = logging.getLogger(__name__)

OUTPUT_DIRECTIVES = {
    "code": "Code only, no explanations, no markdown",
    "commented": "Minimal inline comments only",
    "guided": "Brief setup steps, no verbose explanations",
}

# "complex" is already covered by the builder's complexity clause
COMPLEXITY_DIRECTIVES = {
    "simple": "Essential features only",
    "medium": "Standard implementation, no edge case handling",
}

ContextLike = Union[ProjectContext, Mapping[str, Any], None]


def coerce_context(context: ContextLike) -> ProjectContext:
    """Turn whatever the caller passed into a ProjectContext.

    Missing or malformed context is treated as no context at all.
    """
    if isinstance(context, ProjectContext):
        return context
    if isinstance(context, Mapping):
        try:
            return ProjectContext.model_validate(dict(context))
        except ValidationError as e:
            logger.debug("Ignoring malformed project context: %s", e)
    return ProjectContext()


def context_hints(base_prompt: str, context: ProjectContext) -> List[str]:
    hints = []
    if context.has_type_script and "TypeScript" not in base_prompt:
        hints.append("Use TypeScript")
    if context.has_react and "React" not in base_prompt:
        hints.append("Follow React patterns")
    manager = context.package_manager
    if manager and manager != "npm" and manager not in base_prompt:
        hints.append(f"Use {manager}")
    return hints


def output_directives(options: Mapping[str, Any]) -> List[str]:
    directives = []
    output_format = OUTPUT_DIRECTIVES.get(str(options.get("outputFormat")))
    if output_format:
        directives.append(output_format)
    complexity = COMPLEXITY_DIRECTIVES.get(str(options.get("complexity")))
    if complexity:
        directives.append(complexity)
    return directives


def optimize_prompt(
    base_prompt: str,
    options: Optional[Mapping[str, Any]] = None,
    context: ContextLike = None,
) -> str:
    """Append ``Context`` and ``Output`` segments to ``base_prompt``.

    Each segment is added only when it has at least one clause. The trailing
    period of the base prompt is folded into the first appended segment.
    """
    options = options if isinstance(options, Mapping) else {}
    hints = context_hints(base_prompt, coerce_context(context))
    directives = output_directives(options)

    if not hints and not directives:
        return base_prompt

    optimized = base_prompt.rstrip(".")
    if hints:
        optimized += f". Context: {', '.join(hints)}"
    if directives:
        optimized += f". Output: {', '.join(directives)}"
    return optimized
