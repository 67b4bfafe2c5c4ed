from codeprompt.core.builder import build_prompt
from codeprompt.core.variations import (
    DEFAULT_TYPE_HINT,
    FRAMEWORK_HINTS,
    TYPE_HINTS,
    generate_prompt_variations,
)


def test_four_variations_in_fixed_order(express_options):
    base = build_prompt("init", express_options)
    variations = generate_prompt_variations(base, express_options, task_type="init")

    assert [v.name for v in variations] == [
        "Ultra Minimal",
        "Production Ready",
        "Learning Focused",
        "Constraint Heavy",
    ]
    assert [v.category for v in variations] == ["speed", "quality", "educational", "constrained"]


def test_variations_are_deterministic(express_options):
    base = build_prompt("init", express_options)
    first = generate_prompt_variations(base, express_options, task_type="init")
    second = generate_prompt_variations(base, express_options, task_type="init")
    assert first == second


def test_ultra_minimal_uses_core_action(express_options):
    base = build_prompt("init", express_options)
    minimal = generate_prompt_variations(base, express_options)[0]

    assert minimal.prompt == "Create node project with express. Code only, no explanations, no markdown formatting."
    assert minimal.estimated_tokens == 17


def test_quick_estimates(express_options):
    base = build_prompt("init", express_options)
    variations = generate_prompt_variations(base, express_options, task_type="init")

    # core action 32 chars, express hint 54, init hint 70, clean prompt 206
    assert [v.estimated_tokens for v in variations] == [17, 67, 81, 122]


def test_hints(express_options):
    base = build_prompt("init", express_options)
    _, production, learning, _ = generate_prompt_variations(base, express_options, task_type="init")

    assert FRAMEWORK_HINTS["express"] in production.prompt
    assert TYPE_HINTS["init"] in learning.prompt


def test_type_hint_from_options_and_default():
    base = build_prompt("fix", {"issue": "crash"})
    learning = generate_prompt_variations(base, {"type": "fix"})[2]
    assert TYPE_HINTS["fix"] in learning.prompt

    learning = generate_prompt_variations(base, {})[2]
    assert DEFAULT_TYPE_HINT in learning.prompt


def test_constraint_heavy_keeps_full_prompt(express_options):
    base = build_prompt("init", express_options)
    heavy = generate_prompt_variations(base, express_options)[3]

    assert heavy.prompt.startswith(
        "Create node project with express. Constraints: Modern Express.js with middleware patterns"
    )
    assert "Organized folders. Strict requirements:" in heavy.prompt
    assert ".." not in heavy.prompt


def test_clarification_appears_once(express_options):
    base = build_prompt("init", express_options)
    for variation in generate_prompt_variations(base, express_options)[1:]:
        assert variation.prompt.endswith("Ask user to clarify if necessary.")
        assert variation.prompt.count("Ask user to clarify") == 1
