"""Prompt construction and analysis pipeline"""

from .analyzer import analyze_token_efficiency
from .builder import build_prompt
from .engine import PromptEngine
from .exceptions import (
    CodePromptError,
    PresetError,
    ShareDecodeError,
    ShareError,
    ValidationError,
)
from .model import (
    TASK_TYPES,
    EfficiencyAnalysis,
    ProjectContext,
    PromptResult,
    SharedConfig,
    TemplateSpec,
    Variation,
    VariationReport,
)
from .optimizer import optimize_prompt
from .registry import TemplateRegistry, get_registry
from .variations import generate_prompt_variations

__all__ = [
    # Pipeline
    "build_prompt",
    "optimize_prompt",
    "analyze_token_efficiency",
    "generate_prompt_variations",
    "PromptEngine",
    # Registry
    "TemplateRegistry",
    "get_registry",
    # Types
    "TASK_TYPES",
    "EfficiencyAnalysis",
    "ProjectContext",
    "PromptResult",
    "SharedConfig",
    "TemplateSpec",
    "Variation",
    "VariationReport",
    # Errors
    "CodePromptError",
    "PresetError",
    "ShareDecodeError",
    "ShareError",
    "ValidationError",
]
