"""CodePrompt - token-efficient prompt generator for AI coding assistants"""

__version__ = "0.1.0"

from .core import (
    PromptEngine,
    analyze_token_efficiency,
    build_prompt,
    generate_prompt_variations,
    optimize_prompt,
)

__all__ = [
    "__version__",
    "PromptEngine",
    "analyze_token_efficiency",
    "build_prompt",
    "generate_prompt_variations",
    "optimize_prompt",
]
