"""Alternative phrasings of a built prompt for side-by-side comparison."""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

from .analyzer import CHARS_PER_TOKEN
from .builder import CLARIFICATION
from .model import Variation

FRAMEWORK_HINTS = {
    "react": "Use React 18+ hooks, proper dependency arrays, and modern patterns",
    "vue": "Use Vue 3 Composition API, reactive refs, and TypeScript",
    "angular": "Use Angular 15+ standalone components and signals",
    "svelte": "Use SvelteKit patterns and stores",
    "next": "Use Next.js 14+ App Router and Server Components",
    "express": "Use async/await, proper middleware, and error handling",
    "fastify": "Use Fastify plugins and schemas for validation",
    "nest": "Use NestJS decorators, guards, and dependency injection",
}
DEFAULT_FRAMEWORK_HINT = "Use modern JavaScript/TypeScript patterns"

TYPE_HINTS = {
    "init": "Include project structure, configuration files, and setup instructions",
    "feature": "Focus on modularity, testability, and integration with existing code",
    "architecture": "Emphasize scalability, maintainability, and design patterns",
    "testing": "Include test data setup, mocking strategies, and coverage reports",
    "docs": "Use clear examples, API references, and troubleshooting guides",
    "fix": "Include root cause analysis, prevention strategies, and monitoring",
}
DEFAULT_TYPE_HINT = "Focus on code quality and maintainability"

MINIMAL_SUFFIX = "Code only, no explanations, no markdown formatting."
PRODUCTION_CLAUSES = (
    "Include: error handling, TypeScript types, comprehensive tests, clear documentation, "
    "and industry best practices."
)
PRODUCTION_CLOSING = "Follow SOLID principles and add security considerations."
LEARNING_CLAUSES = (
    "Provide: step-by-step explanation, inline comments explaining each concept, "
    "multiple implementation approaches, common pitfalls to avoid, and links to relevant documentation."
)
LEARNING_CLOSING = "Make it educational and beginner-friendly."
STRICT_REQUIREMENTS = (
    "Strict requirements: zero external dependencies, maximum 50 lines total, pure functions only, "
    "comprehensive error handling with custom error classes, extensive inline documentation, "
    "cross-platform compatibility, memory optimization, and performance benchmarks included. "
    "Follow functional programming paradigms exclusively."
)
CLARIFY = CLARIFICATION.strip()

# Fixed character allowances for the text wrapped around each fragment
MINIMAL_OVERHEAD = 35
PRODUCTION_OVERHEAD = 180
LEARNING_OVERHEAD = 220
STRICT_OVERHEAD = 280


def framework_hint(framework: Any) -> str:
    return FRAMEWORK_HINTS.get(str(framework), DEFAULT_FRAMEWORK_HINT)


def type_hint(task_type: Any) -> str:
    return TYPE_HINTS.get(str(task_type), DEFAULT_TYPE_HINT)


def _quick_estimate(chars: int) -> int:
    return math.ceil(chars / CHARS_PER_TOKEN)


def generate_prompt_variations(
    base_prompt: str,
    options: Optional[Mapping[str, Any]] = None,
    task_type: Optional[str] = None,
) -> List[Variation]:
    """
    Produce the four comparison variants of a built prompt.

    The clarification sentence and the trailing period are removed to get the
    clean prompt; the text before its first period is the core action that
    most variants wrap.

    Each variant carries a quick token estimate: the length of the fragment it
    wraps plus a fixed overhead (core action + 35, core action + framework hint
    + 180, core action + task hint + 220, clean prompt + 280), divided by four
    and rounded up. The clean prompt drops the period that closes a
    constraint list, so the Constraint Heavy estimate counts one character
    fewer than the prompt with that period kept.

    Args:
        base_prompt: Prompt returned by the builder
        options: Option set the prompt was built from
        task_type: Task type for the learning hint (defaults to options["type"])

    Returns:
        Ultra Minimal, Production Ready, Learning Focused and Constraint Heavy,
        in that order
    """
    options = options if isinstance(options, Mapping) else {}
    clean = base_prompt.replace(CLARIFICATION, "", 1).rstrip(".")
    core_action = clean.split(".")[0]

    fw_hint = framework_hint(options.get("framework"))
    task_hint = type_hint(task_type or options.get("type"))

    return [
        Variation(
            name="Ultra Minimal",
            prompt=f"{core_action}. {MINIMAL_SUFFIX}",
            description="Absolute minimum tokens for quick prototyping (~8-12 tokens)",
            category="speed",
            estimated_tokens=_quick_estimate(len(core_action) + MINIMAL_OVERHEAD),
        ),
        Variation(
            name="Production Ready",
            prompt=f"{core_action}. {PRODUCTION_CLAUSES} {fw_hint}. {PRODUCTION_CLOSING} {CLARIFY}",
            description="Enterprise-grade implementation with full coverage (~45-60 tokens)",
            category="quality",
            estimated_tokens=_quick_estimate(len(core_action) + len(fw_hint) + PRODUCTION_OVERHEAD),
        ),
        Variation(
            name="Learning Focused",
            prompt=f"{core_action}. {LEARNING_CLAUSES} {task_hint}. {LEARNING_CLOSING} {CLARIFY}",
            description="Educational with explanations and alternatives (~55-70 tokens)",
            category="educational",
            estimated_tokens=_quick_estimate(len(core_action) + len(task_hint) + LEARNING_OVERHEAD),
        ),
        Variation(
            name="Constraint Heavy",
            prompt=f"{clean}. {STRICT_REQUIREMENTS} {CLARIFY}",
            description="Maximum constraints and technical requirements (~75-95 tokens)",
            category="constrained",
            estimated_tokens=_quick_estimate(len(clean) + STRICT_OVERHEAD),
        ),
    ]
