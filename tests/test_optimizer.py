from codeprompt.core.model import ProjectContext
from codeprompt.core.optimizer import coerce_context, optimize_prompt

BASE = "Implement login as service layer with dependency injection. Ask user to clarify if necessary."


def test_nothing_to_add_returns_base():
    assert optimize_prompt(BASE) == BASE
    assert optimize_prompt(BASE, {"outputFormat": "detailed", "complexity": "complex"}) == BASE
    assert optimize_prompt(BASE, {}, ProjectContext(package_manager="npm")) == BASE


def test_full_optimization():
    context = ProjectContext(has_type_script=True, has_react=True, package_manager="yarn")
    prompt = optimize_prompt(BASE, {"outputFormat": "guided", "complexity": "medium"}, context)

    assert prompt == (
        "Implement login as service layer with dependency injection. Ask user to clarify if necessary. "
        "Context: Use TypeScript, Follow React patterns, Use yarn. "
        "Output: Brief setup steps, no verbose explanations, Standard implementation, no edge case handling"
    )


def test_output_only():
    prompt = optimize_prompt(BASE, {"outputFormat": "code", "complexity": "simple"})
    assert prompt == BASE.rstrip(".") + ". Output: Code only, no explanations, no markdown, Essential features only"
    assert ".." not in prompt


def test_context_hint_skipped_when_already_mentioned():
    base = "Implement pure functions with TypeScript for React. Ask user to clarify if necessary."
    context = ProjectContext(has_type_script=True, has_react=True)
    assert optimize_prompt(base, {}, context) == base


def test_package_manager_hint_skipped_when_present():
    base = "Create node project with vanilla. Constraints: Use pnpm with latest best practices. Ask user to clarify if necessary."
    assert optimize_prompt(base, {}, ProjectContext(package_manager="pnpm")) == base


def test_context_accepts_camel_case_mapping():
    prompt = optimize_prompt(BASE, {}, {"hasTypeScript": True, "packageManager": "pnpm"})
    assert prompt.endswith("Context: Use TypeScript, Use pnpm")


def test_malformed_context_is_ignored():
    assert optimize_prompt(BASE, {}, {"hasTypeScript": "maybe"}) == BASE
    assert optimize_prompt(BASE, {}, "TypeScript") == BASE
    assert coerce_context(None) == ProjectContext()
