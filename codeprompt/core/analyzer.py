"""Heuristic token estimation and efficiency rating."""

from __future__ import annotations

import math

from .model import EfficiencyAnalysis

CHARS_PER_TOKEN = 4

# (exclusive upper bound, label), checked in increasing order
EFFICIENCY_BUCKETS = (
    (120, "excellent"),
    (220, "good"),
    (320, "fair"),
)
VERBOSE = "verbose"

LONG_PROMPT_TOKENS = 200
VERBOSE_QUALIFIERS = ("comprehensive", "detailed")
MAX_COMMA_PIECES = 5


def estimate_tokens(text: str) -> int:
    """Rough token count estimation (~4 chars per token, rounded up)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def classify_efficiency(tokens: int) -> str:
    for limit, label in EFFICIENCY_BUCKETS:
        if tokens < limit:
            return label
    return VERBOSE


def analyze_token_efficiency(prompt: str) -> EfficiencyAnalysis:
    """Estimate the token cost of ``prompt`` and suggest improvements.

    Args:
        prompt: Prompt text to analyze

    Returns:
        Token estimate, efficiency bucket and recommendations
    """
    prompt = prompt or ""
    tokens = estimate_tokens(prompt)

    recommendations = []
    if tokens > LONG_PROMPT_TOKENS:
        recommendations.append("Consider more specific constraints")
    if any(qualifier in prompt for qualifier in VERBOSE_QUALIFIERS):
        recommendations.append("Remove verbose qualifiers")
    if len(prompt.split(",")) > MAX_COMMA_PIECES:
        recommendations.append("Simplify constraint list")

    return EfficiencyAnalysis(
        estimated_tokens=tokens,
        efficiency=classify_efficiency(tokens),
        recommendations=recommendations,
    )
