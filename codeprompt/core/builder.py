"""Prompt construction from a task type and option set.

Building never raises for bad input: unknown task types produce a sentinel
string, missing values fall back to fixed literals and unknown option values
are left out of the constraint list.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .model import SharedPhrases, TemplateSpec
from .registry import TemplateRegistry, get_registry
from .renderer import Renderer

logger = logging.getLogger(__name__)

UNKNOWN_TYPE_PROMPT = "Unknown prompt type."
CLARIFICATION = " Ask user to clarify if necessary."

# Every placeholder used by a template resolves to one of these when absent
FALLBACK_VALUES: Dict[str, str] = {
    "projectType": "node",
    "framework": "vanilla",
    "feature": "component",
    "pattern": "function",
    "module": "service",
    "testType": "unit",
    "library": "Jest",
    "docType": "api",
    "projectName": "project",
    "issue": "bug",
    "component": "component",
    "approach": "debug",
}

OTHER = "other"
# option -> option holding the free-text value used when the first is "other"
CUSTOM_VALUE_FIELDS: Dict[str, str] = {
    "framework": "customFramework",
    "library": "customLibrary",
    "diagramTool": "customDiagramTool",
}

NO_PACKAGE_MANAGER = "No package manager needed - pure static files"
DEFAULT_DIAGRAM_TYPES = ("flowchart", "architecture")
DEFAULT_DIAGRAM_TOOL = "mermaid"


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def is_enabled(value: Any) -> bool:
    """True for ``True`` and for the string ``"true"`` in any case."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() == "true"


def is_supplied(value: Any) -> bool:
    """A value that overrides a fallback; ``False`` counts as absent."""
    return value is not False and not is_blank(value)


def _as_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def _lookup(table: Mapping[str, str], key: Any) -> Optional[str]:
    if is_blank(key):
        return None
    return table.get(_as_text(key))


def resolve_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge caller options over the fallback table and apply custom values.

    Blank or ``False`` caller values do not hide a fallback. A field set to
    "other" takes its paired custom value when that one is present.
    """
    merged: Dict[str, Any] = dict(FALLBACK_VALUES)
    merged.update({key: value for key, value in options.items() if is_supplied(value)})

    for field, custom_field in CUSTOM_VALUE_FIELDS.items():
        value = merged.get(field)
        custom = merged.get(custom_field)
        if isinstance(value, str) and value.strip().lower() == OTHER and not is_blank(custom):
            merged[field] = _as_text(custom)
    return merged


def _template_variables(spec: TemplateSpec, merged: Mapping[str, Any]) -> Dict[str, str]:
    variables = {key: _as_text(value) for key, value in merged.items()}
    # Known values get their prose phrase instead of the raw tag
    for placeholder, table in spec.placeholders.items():
        phrase = _lookup(table, merged.get(placeholder))
        if phrase:
            variables[placeholder] = phrase
    return variables


def _select_template(spec: TemplateSpec, options: Mapping[str, Any]) -> str:
    # Only a caller-supplied value switches templates, never a fallback
    if spec.alternate and is_supplied(options.get(spec.alternate.field)):
        return spec.alternate.template
    return spec.template


# --- Task-specific constraint clauses ---------------------------------


def _init_clauses(spec: TemplateSpec, opts: Mapping[str, Any]) -> List[str]:
    clauses = []
    manager = opts.get("packageManager")
    if not is_blank(manager):
        if _as_text(manager) == "none":
            clauses.append(NO_PACKAGE_MANAGER)
        else:
            clauses.append(f"Use {_as_text(manager)} with latest best practices")
    structure = _lookup(spec.phrases.get("structure", {}), opts.get("structure"))
    if structure:
        clauses.append(structure)
    return clauses


def _scope_clauses(spec: TemplateSpec, opts: Mapping[str, Any]) -> List[str]:
    scope = _lookup(spec.phrases.get("scope", {}), opts.get("scope"))
    return [f"Scope: {scope}"] if scope else []


def _testing_clauses(spec: TemplateSpec, opts: Mapping[str, Any]) -> List[str]:
    clauses = []
    library = opts.get("library")
    if not is_blank(library):
        name = _as_text(library)
        clauses.append(spec.phrases.get("libraries", {}).get(name.lower()) or f"Using {name}")
    coverage = opts.get("coverage")
    if not is_blank(coverage):
        target = _as_text(coverage).rstrip("%")
        clauses.append(f"Target {target}% coverage with meaningful tests")
    return clauses


def _diagram_types(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [_as_text(item) for item in value if not is_blank(item)]
    if is_blank(value):
        return list(DEFAULT_DIAGRAM_TYPES)
    return [part.strip() for part in _as_text(value).split(",") if part.strip()]


def _docs_clauses(spec: TemplateSpec, opts: Mapping[str, Any]) -> List[str]:
    clauses = []
    for table, field in (("formats", "format"), ("detail_levels", "detailLevel")):
        phrase = _lookup(spec.phrases.get(table, {}), opts.get(field))
        if phrase:
            clauses.append(phrase)

    if is_enabled(opts.get("includeDiagrams")):
        names = spec.phrases.get("diagram_types", {})
        kinds = _diagram_types(opts.get("diagramTypes")) or list(DEFAULT_DIAGRAM_TYPES)
        selected = ", ".join(names.get(kind, kind) for kind in kinds)
        tool = opts.get("diagramTool")
        tool = DEFAULT_DIAGRAM_TOOL if is_blank(tool) else _as_text(tool)
        clauses.append(f"Include {selected} using {tool} syntax")

    if is_enabled(opts.get("includeExamples")):
        clauses.append("Include practical code examples and snippets")
    if is_enabled(opts.get("includeToc")):
        clauses.append("Generate table of contents with proper navigation")
    return clauses


def _fix_clauses(spec: TemplateSpec, opts: Mapping[str, Any]) -> List[str]:
    clauses = []
    priority = _lookup(spec.phrases.get("priorities", {}), opts.get("priority"))
    if priority:
        clauses.append(f"Priority: {priority}")
    error_message = opts.get("errorMessage")
    if not is_blank(error_message):
        clauses.append(f'Error context: "{_as_text(error_message)}"')
    category = _lookup(spec.phrases.get("categories", {}), opts.get("category"))
    if category:
        clauses.append(f"Issue type: {category}")
    return clauses


TASK_CLAUSES: Dict[str, Callable[[TemplateSpec, Mapping[str, Any]], List[str]]] = {
    "init": _init_clauses,
    "feature": _scope_clauses,
    "architecture": _scope_clauses,
    "testing": _testing_clauses,
    "docs": _docs_clauses,
    "fix": _fix_clauses,
}


def collect_constraints(
    task_type: str,
    spec: TemplateSpec,
    shared: SharedPhrases,
    merged: Mapping[str, Any],
) -> List[str]:
    """Collect constraint clauses in their fixed order."""
    constraints: List[str] = []

    if task_type == "init":
        framework = _lookup(spec.phrases.get("frameworks", {}), merged.get("framework"))
        if framework:
            constraints.append(framework)

    for field, table in (
        ("outputFormat", shared.output_formats),
        ("complexity", shared.complexity_levels),
        ("codeStyle", shared.code_styles),
        ("fileStructure", shared.file_structures),
        ("dependencies", shared.dependencies),
    ):
        phrase = _lookup(table, merged.get(field))
        if phrase:
            constraints.append(phrase)

    constraints.extend(TASK_CLAUSES[task_type](spec, merged))
    return constraints


def build_prompt(
    task_type: str,
    options: Optional[Mapping[str, Any]] = None,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """Build the prompt for ``task_type`` from the caller's ``options``.

    Args:
        task_type: One of init, feature, architecture, testing, docs, fix
        options: Option values keyed by option name
        registry: Template registry (defaults to the bundled templates)

    Returns:
        The prompt, ending with the clarification sentence, or
        ``UNKNOWN_TYPE_PROMPT`` when the task type is not recognised.
    """
    registry = registry or get_registry()
    spec = registry.get(task_type)
    if spec is None:
        logger.debug("Unknown task type %r", task_type)
        return UNKNOWN_TYPE_PROMPT

    options = options if isinstance(options, Mapping) else {}
    merged = resolve_options(options)

    prompt = Renderer().render(_select_template(spec, options), _template_variables(spec, merged))

    constraints = collect_constraints(spec.id, spec, registry.shared, merged)
    if constraints:
        prompt += f". Constraints: {', '.join(constraints)}."

    return prompt + CLARIFICATION
