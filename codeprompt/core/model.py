"""Data models for prompt construction and analysis."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TaskType = Literal["init", "feature", "architecture", "testing", "docs", "fix"]
TASK_TYPES: tuple[str, ...] = ("init", "feature", "architecture", "testing", "docs", "fix")

Efficiency = Literal["excellent", "good", "fair", "verbose"]
VariationCategory = Literal["speed", "quality", "educational", "constrained"]


class AlternateTemplate(BaseModel):
    """Second phrasing used when ``field`` carries a caller-supplied value."""

    field: str
    template: str


class TemplateSpec(BaseModel):
    """Phrasing template for a single task type."""

    id: TaskType
    description: str | None = None
    template: str
    alternate: AlternateTemplate | None = None
    placeholders: dict[str, dict[str, str]] = Field(default_factory=dict)
    """Phrase dictionaries keyed by the placeholder they enrich."""
    phrases: dict[str, dict[str, str]] = Field(default_factory=dict)
    """Phrase dictionaries consulted for constraint clauses."""


class SharedPhrases(BaseModel):
    """Constraint phrases that apply to every task type."""

    output_formats: dict[str, str]
    complexity_levels: dict[str, str]
    code_styles: dict[str, str]
    file_structures: dict[str, str]
    dependencies: dict[str, str]


class ProjectContext(BaseModel):
    """Facts detected from a project manifest.

    Field names accept both snake_case and the camelCase spelling used by
    ``package.json`` oriented tooling (``hasTypeScript``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    has_type_script: bool = False
    has_react: bool = False
    package_manager: str | None = None
    has_linting: bool = False
    has_formatting: bool = False
    has_testing: bool = False
    has_gitignore: bool = False
    has_readme: bool = False

    def is_empty(self) -> bool:
        return self == ProjectContext()

    def detected(self) -> list[str]:
        """Human-readable list of the facts worth reporting."""
        facts = []
        if self.has_type_script:
            facts.append("TypeScript project")
        if self.has_react:
            facts.append("React framework")
        if self.package_manager and self.package_manager != "npm":
            facts.append(f"{self.package_manager} package manager")
        if self.has_linting:
            facts.append("ESLint configured")
        if self.has_formatting:
            facts.append("Prettier configured")
        if self.has_testing:
            facts.append("Test runner configured")
        return facts


class EfficiencyAnalysis(BaseModel):
    """Heuristic token analysis of a prompt."""

    estimated_tokens: int
    """Approximate token count (~4 characters per token)."""

    efficiency: Efficiency
    """Bucket derived from ``estimated_tokens``."""

    recommendations: list[str] = Field(default_factory=list)
    """Advisory strings, in check order."""


class Variation(BaseModel):
    """An alternative phrasing of the same request."""

    name: str
    prompt: str
    description: str
    category: VariationCategory
    estimated_tokens: int
    """Quick estimate from the composing fragments, used for display ordering."""


class SharedConfig(BaseModel):
    """A task type together with its option set, as shared or stored."""

    type: str
    options: dict[str, Any] = Field(default_factory=dict)


class VariationReport(BaseModel):
    """A variation together with the analyzer's view of its final prompt."""

    variation: Variation
    analysis: EfficiencyAnalysis


class PromptResult(BaseModel):
    """Everything produced by one run of the prompt pipeline."""

    task_type: str
    options: dict[str, Any]
    base_prompt: str
    prompt: str
    analysis: EfficiencyAnalysis
    context: ProjectContext = Field(default_factory=ProjectContext)
    variations: list[VariationReport] = Field(default_factory=list)
