"""Tests for prompt construction."""

import pytest

from codeprompt.core.builder import (
    CLARIFICATION,
    UNKNOWN_TYPE_PROMPT,
    build_prompt,
    resolve_options,
)
from codeprompt.core.model import TASK_TYPES, TemplateSpec
from codeprompt.core.registry import TemplateRegistry


def test_init_example(express_options):
    prompt = build_prompt("init", express_options)

    assert prompt == (
        "Create node project with express. Constraints: Modern Express.js with middleware patterns, "
        "Code only, no explanations, Basic implementation, <50 lines, "
        "Use pnpm with latest best practices, Organized folders. Ask user to clarify if necessary."
    )


@pytest.mark.parametrize("task_type", TASK_TYPES)
def test_minimal_options_leave_no_placeholders(task_type):
    prompt = build_prompt(task_type, {})

    assert "{{" not in prompt
    assert "None" not in prompt
    assert prompt.endswith(CLARIFICATION)
    assert prompt.count(CLARIFICATION.strip()) == 1


def test_unknown_task_type_returns_sentinel():
    assert build_prompt("deploy", {"framework": "react"}) == UNKNOWN_TYPE_PROMPT
    assert build_prompt(None, None) == UNKNOWN_TYPE_PROMPT


def test_custom_framework_replaces_other():
    prompt = build_prompt("init", {"framework": "other", "customFramework": "Deno"})

    assert prompt == "Create node project with Deno Ask user to clarify if necessary."
    assert "other" not in prompt


def test_other_without_custom_value_is_kept():
    assert build_prompt("init", {"framework": "other", "customFramework": "  "}).startswith(
        "Create node project with other"
    )


def test_caller_options_are_not_mutated():
    options = {"framework": "other", "customFramework": "Deno"}
    build_prompt("init", options)
    assert options == {"framework": "other", "customFramework": "Deno"}


def test_project_name_selects_alternate_template():
    prompt = build_prompt("init", {"projectName": "shop", "framework": "react"})
    assert prompt.startswith("Create node project called 'shop' with react.")


def test_blank_project_name_keeps_base_template():
    prompt = build_prompt("init", {"projectName": "   "})
    assert prompt == "Create node project with vanilla Ask user to clarify if necessary."


def test_false_values_fall_back():
    prompt = build_prompt("init", {"framework": False, "projectName": False})
    assert prompt == "Create node project with vanilla Ask user to clarify if necessary."


def test_constraints_only_when_collected():
    assert "Constraints:" not in build_prompt("init", {})
    assert "Constraints: Code only, no explanations." in build_prompt("init", {"outputFormat": "code"})
    # testing always has a library, either supplied or the Jest fallback
    assert "Constraints: Jest with TypeScript support." in build_prompt("testing", {})


def test_unknown_option_values_are_omitted():
    prompt = build_prompt("feature", {"feature": "login", "scope": "galaxy", "outputFormat": "poem"})
    assert "Constraints" not in prompt


def test_placeholder_phrase_replaces_raw_value():
    prompt = build_prompt("feature", {"feature": "login", "pattern": "service"})
    assert prompt.startswith("Implement login as service layer with dependency injection")


def test_unknown_placeholder_value_stays_raw():
    prompt = build_prompt("architecture", {"feature": "billing", "pattern": "blackboard"})
    assert prompt.startswith("Design billing using blackboard pattern")


def test_blank_values_fall_back():
    prompt = build_prompt("fix", {"issue": "", "component": None})
    assert prompt.startswith("Fix bug in component using systematic debugging with logging")


def test_leftover_placeholder_becomes_generic_literal():
    class StubRegistry(TemplateRegistry):
        def get(self, task_type):
            return TemplateSpec(id="feature", template="Build {{feature}} with {{mystery}}")

    prompt = build_prompt("feature", {"feature": "cart"}, registry=StubRegistry())
    assert prompt == "Build cart with component Ask user to clarify if necessary."


def test_constraint_order():
    prompt = build_prompt(
        "feature",
        {
            "feature": "search",
            "scope": "module",
            "dependencies": "none",
            "fileStructure": "single",
            "codeStyle": "oop",
            "complexity": "medium",
            "outputFormat": "commented",
        },
    )
    expected = [
        "Code with inline comments",
        "Standard features, <200 lines",
        "Object-oriented with SOLID principles",
        "Single file solution with clear sections",
        "No external dependencies - pure implementation",
        "Scope: complete module with documentation",
    ]
    positions = [prompt.index(clause) for clause in expected]
    assert positions == sorted(positions)


def test_package_manager_none():
    prompt = build_prompt("init", {"packageManager": "none"})
    assert "No package manager needed - pure static files" in prompt


def test_architecture_scope():
    prompt = build_prompt("architecture", {"feature": "orders", "pattern": "cqrs", "scope": "system"})
    assert prompt == (
        "Design orders using CQRS with command and query separation pattern. "
        "Constraints: Scope: system-wide implementation with monitoring. Ask user to clarify if necessary."
    )


def test_testing_custom_library_and_coverage():
    prompt = build_prompt(
        "testing",
        {"module": "parser", "testType": "unit", "library": "Other", "customLibrary": "uvu", "coverage": "90"},
    )
    assert prompt == (
        "Write unit tests with mocking tests for parser using uvu. "
        "Constraints: Using uvu, Target 90% coverage with meaningful tests. Ask user to clarify if necessary."
    )


def test_testing_known_library_phrase():
    prompt = build_prompt("testing", {"library": "Vitest", "coverage": 80})
    assert "Vitest with fast execution" in prompt
    assert "Target 80% coverage with meaningful tests" in prompt


def test_docs_clauses():
    prompt = build_prompt(
        "docs",
        {
            "projectName": "payments",
            "docType": "api",
            "format": "markdown",
            "includeDiagrams": True,
            "diagramTypes": ["sequence", "database"],
            "diagramTool": "other",
            "customDiagramTool": "D2",
            "includeExamples": "true",
            "includeToc": False,
        },
    )
    assert prompt == (
        "Generate OpenAPI/Swagger API documentation documentation for payments. Constraints: "
        "Markdown format with proper headers and syntax, "
        "Include sequence diagrams, database schemas using D2 syntax, "
        "Include practical code examples and snippets. Ask user to clarify if necessary."
    )


def test_docs_diagram_defaults():
    prompt = build_prompt("docs", {"includeDiagrams": "TRUE", "detailLevel": "tutorial", "includeToc": "true"})
    assert "Include flow charts, architecture diagrams using mermaid syntax" in prompt
    assert "Tutorial-style documentation with step-by-step guidance" in prompt
    assert prompt.index("Tutorial-style") < prompt.index("Include flow charts")
    assert "Generate table of contents with proper navigation" in prompt


def test_docs_single_diagram_type_string():
    prompt = build_prompt("docs", {"includeDiagrams": True, "diagramTypes": "gantt,custom"})
    assert "Include gantt charts, custom using mermaid syntax" in prompt


def test_fix_clauses():
    prompt = build_prompt(
        "fix",
        {
            "issue": "memory leak",
            "component": "cache",
            "approach": "optimize",
            "priority": "high",
            "errorMessage": "heap out of memory",
            "category": "performance",
        },
    )
    assert prompt == (
        "Fix memory leak in cache using performance optimization with benchmarks. Constraints: "
        "Priority: high priority - fix within 24 hours, "
        'Error context: "heap out of memory", '
        "Issue type: performance issue affecting user experience. Ask user to clarify if necessary."
    )


def test_resolve_options_merges_fallbacks():
    merged = resolve_options({"library": "other", "customLibrary": "Tap", "module": ""})
    assert merged["library"] == "Tap"
    assert merged["module"] == "service"
    assert merged["projectType"] == "node"
