"""Option schema per task type and the interactive question flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Protocol, Sequence, Tuple

from .core.builder import is_blank, is_enabled
from .core.exceptions import ValidationError
from .core.model import TASK_TYPES

QuestionKind = Literal["text", "choice", "confirm", "multi"]


@dataclass(frozen=True)
class Question:
    """
    A single option a user can be asked for.

    Attributes:
        name: Option key in the resulting OptionSet
        message: Text shown to the user
        kind: text, choice (one of ``choices``), confirm (yes/no) or multi
            (several of ``choices``)
        choices: Allowed values for choice and multi questions
        default: Value used when the user gives none
        required: Blank answers are rejected
        when: ``(sibling, value)``; the question only applies when the
            sibling option has that value
    """

    name: str
    message: str
    kind: QuestionKind = "text"
    choices: Tuple[str, ...] = ()
    default: Any = None
    required: bool = False
    when: Optional[Tuple[str, Any]] = None

    def is_visible(self, answers: Mapping[str, Any]) -> bool:
        if self.when is None:
            return True
        sibling, expected = self.when
        value = answers.get(sibling)
        if expected is True:
            return is_enabled(value)
        if isinstance(value, str) and isinstance(expected, str):
            return value.strip().lower() == expected.lower()
        return value == expected


UNIVERSAL_QUESTIONS: Tuple[Question, ...] = (
    Question("outputFormat", "Preferred output format", "choice",
             ("code", "commented", "guided", "detailed"), default="code"),
    Question("complexity", "Implementation complexity", "choice",
             ("simple", "medium", "complex"), default="simple"),
)

FRAMEWORKS = (
    "vanilla", "react", "vue", "angular", "svelte", "express", "fastify", "nest", "next",
    "nuxt", "gatsby", "astro", "vite", "webpack", "rollup", "esbuild", "electron", "tauri",
    "other",
)

TESTING_LIBRARIES = (
    "Jest", "Vitest", "Mocha", "Cypress", "Playwright", "Testing Library", "WebdriverIO",
    "Puppeteer", "Jasmine", "AVA", "Storybook", "Karma", "Other",
)

DIAGRAM_TYPES = (
    "flowchart", "architecture", "database", "sequence", "class", "network", "gantt", "mindmap",
)

QUESTIONS: Dict[str, Tuple[Question, ...]] = {
    "init": (
        Question("projectName", "Project name (optional)"),
        Question("projectType", "Project type", "choice",
                 ("node", "browser", "full-stack", "cli", "library"), default="node"),
        Question("framework", "Framework/library", "choice", FRAMEWORKS, default="vanilla"),
        Question("customFramework", "Custom framework name", required=True,
                 when=("framework", "other")),
        Question("packageManager", "Package manager", "choice",
                 ("pnpm", "npm", "yarn", "none"), default="pnpm"),
        Question("structure", "Project structure", "choice",
                 ("flat", "layered", "modular", "monorepo")),
        Question("dependencies", "Dependencies preference", "choice",
                 ("none", "minimal", "standard")),
    ),
    "feature": (
        Question("feature", "Feature name", required=True),
        Question("pattern", "Implementation pattern", "choice",
                 ("function", "class", "hook", "service", "component", "utility",
                  "middleware", "api")),
        Question("scope", "Feature scope", "choice", ("component", "module", "feature", "system")),
        Question("codeStyle", "Code style preference", "choice", ("functional", "oop", "minimal")),
        Question("fileStructure", "File organization", "choice", ("single", "split", "modular")),
    ),
    "architecture": (
        Question("feature", "Component/system to architect", required=True),
        Question("pattern", "Architecture pattern", "choice",
                 ("mvc", "layered", "hexagonal", "microservice", "eventdriven", "cqrs", "ddd")),
        Question("scope", "Design scope", "choice", ("component", "module", "feature", "system")),
    ),
    "testing": (
        Question("module", "Module/component to test", required=True),
        Question("testType", "Test type", "choice",
                 ("unit", "integration", "e2e", "performance", "security")),
        Question("library", "Testing library", "choice", TESTING_LIBRARIES, default="Jest"),
        Question("customLibrary", "Custom testing library name", required=True,
                 when=("library", "other")),
        Question("coverage", "Target coverage", "choice", ("80", "90", "95", "100"), default="80"),
    ),
    "docs": (
        Question("projectName", "Project/Component/Feature to document", required=True),
        Question("docType", "Documentation type", "choice",
                 ("api", "user", "dev", "arch", "changelog", "contributing", "security",
                  "performance")),
        Question("format", "Documentation format", "choice",
                 ("markdown", "text", "html", "json", "yaml", "rst"), default="markdown"),
        Question("includeDiagrams", "Include diagrams and visual elements?", "confirm",
                 default=True),
        Question("diagramTypes", "Diagram types to include", "multi", DIAGRAM_TYPES,
                 default=("flowchart", "architecture"), when=("includeDiagrams", True)),
        Question("diagramTool", "Preferred diagramming tool/syntax", "choice",
                 ("mermaid", "plantuml", "ascii", "drawio", "graphviz", "other"),
                 default="mermaid", when=("includeDiagrams", True)),
        Question("customDiagramTool", "Custom diagramming tool/syntax", required=True,
                 when=("diagramTool", "other")),
        Question("detailLevel", "Documentation detail level", "choice",
                 ("minimal", "standard", "detailed", "tutorial"), default="standard"),
        Question("includeExamples", "Include code examples and snippets?", "confirm",
                 default=True),
        Question("includeToc", "Generate table of contents?", "confirm", default=True),
    ),
    "fix": (
        Question("issue", "Issue/Bug description", required=True),
        Question("component", "Component/Module affected", required=True),
        Question("approach", "Fix approach", "choice",
                 ("debug", "refactor", "optimize", "patch", "rewrite", "security")),
        Question("priority", "Priority level", "choice",
                 ("critical", "high", "medium", "low"), default="medium"),
        Question("category", "Issue category", "choice",
                 ("performance", "security", "functionality", "ui", "integration",
                  "compatibility")),
        Question("errorMessage", "Error message (optional)"),
    ),
}


def questions_for(task_type: str) -> Tuple[Question, ...]:
    if task_type not in QUESTIONS:
        return ()
    return QUESTIONS[task_type] + UNIVERSAL_QUESTIONS


class Prompter(Protocol):
    """Asks a single question; implemented by the CLI and by test doubles."""

    def text(self, message: str, default: Optional[str] = None) -> str: ...

    def choice(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def multi(self, message: str, choices: Sequence[str], default: Sequence[str] = ()) -> List[str]: ...


def _ask(question: Question, prompter: Prompter) -> Any:
    if question.kind == "choice":
        return prompter.choice(question.message, question.choices, question.default)
    if question.kind == "confirm":
        return prompter.confirm(question.message, bool(question.default))
    if question.kind == "multi":
        return prompter.multi(question.message, question.choices, question.default or ())

    answer = prompter.text(question.message, question.default)
    while question.required and is_blank(answer):
        answer = prompter.text(f"{question.message} (required)", question.default)
    return answer.strip() if isinstance(answer, str) else answer


def ask_options(task_type: str, prompter: Prompter) -> Dict[str, Any]:
    """Walk the questions for ``task_type``, skipping ones that do not apply.

    Blank optional answers are left out of the result.
    """
    answers: Dict[str, Any] = {}
    for question in questions_for(task_type):
        if not question.is_visible(answers):
            continue
        answer = _ask(question, prompter)
        if not is_blank(answer):
            answers[question.name] = answer
    return answers


def apply_defaults(task_type: str, options: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill declared defaults for applicable questions the caller left blank."""
    completed = dict(options)
    for question in questions_for(task_type):
        if question.default is None or not question.is_visible(completed):
            continue
        if is_blank(completed.get(question.name)):
            default = question.default
            completed[question.name] = list(default) if isinstance(default, tuple) else default
    return completed


def validate_options(task_type: str, options: Mapping[str, Any]) -> None:
    """Reject an option set with missing required fields or unknown choices.

    Raises:
        ValidationError: Listing every problem found
    """
    if task_type not in TASK_TYPES:
        raise ValidationError([f"Unknown task type '{task_type}'"])

    problems = []
    for question in questions_for(task_type):
        if not question.is_visible(options):
            continue
        value = options.get(question.name)
        if is_blank(value):
            if question.required:
                problems.append(f"{question.name} is required")
            continue

        if question.kind == "choice" and str(value) not in question.choices:
            problems.append(f"{question.name} must be one of: {', '.join(question.choices)}")
        elif question.kind == "multi":
            values = value if isinstance(value, (list, tuple)) else str(value).split(",")
            unknown = [str(v).strip() for v in values if str(v).strip() not in question.choices]
            if unknown:
                problems.append(f"{question.name} has unknown values: {', '.join(unknown)}")
        elif question.kind == "confirm" and not isinstance(value, bool):
            if str(value).strip().lower() not in ("true", "false"):
                problems.append(f"{question.name} must be true or false")

    if problems:
        raise ValidationError(problems)
