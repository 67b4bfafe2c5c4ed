"""Orchestrates building, optimizing and analyzing a prompt."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from .analyzer import analyze_token_efficiency
from .builder import build_prompt
from .model import ProjectContext, PromptResult, VariationReport
from .optimizer import optimize_prompt
from .registry import TemplateRegistry
from .variations import generate_prompt_variations

ContextProvider = Callable[[], ProjectContext]


class PromptEngine:
    """Runs the prompt pipeline with an injected project context source."""

    def __init__(
        self,
        context_provider: Optional[ContextProvider] = None,
        registry: Optional[TemplateRegistry] = None,
    ):
        """
        Initialize prompt engine.

        Args:
            context_provider: Callable returning the project context to optimize
                against. Without one the prompt is optimized with no context,
                as in a sandbox with no file access.
            registry: Template registry (defaults to the bundled templates)
        """
        self.context_provider = context_provider
        self.registry = registry

    def run(
        self,
        task_type: str,
        options: Mapping[str, Any],
        include_variations: bool = False,
    ) -> PromptResult:
        """
        Build a prompt and everything reported alongside it.

        Process:
        1. Gather project context from the provider
        2. Build the base prompt
        3. Optimize it with context and output directives
        4. Analyze the optimized prompt
        5. Optionally generate variations of the base prompt and analyze each

        Args:
            task_type: Task type tag
            options: Option set for the task type
            include_variations: Also produce the four comparison variants

        Returns:
            Prompt result with analysis and optional variations
        """
        options = dict(options)
        context = self.context_provider() if self.context_provider else ProjectContext()

        base_prompt = build_prompt(task_type, options, registry=self.registry)
        prompt = optimize_prompt(base_prompt, options, context)
        analysis = analyze_token_efficiency(prompt)

        reports = []
        if include_variations:
            for variation in generate_prompt_variations(base_prompt, options, task_type=task_type):
                reports.append(
                    VariationReport(
                        variation=variation,
                        analysis=analyze_token_efficiency(variation.prompt),
                    )
                )

        return PromptResult(
            task_type=task_type,
            options=options,
            base_prompt=base_prompt,
            prompt=prompt,
            analysis=analysis,
            context=context,
            variations=reports,
        )
