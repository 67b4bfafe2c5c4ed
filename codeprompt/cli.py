"""CodePrompt CLI"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional, Sequence

import click
import typer

from .config import get_settings
from .context import analyze_project_context
from .core import PromptEngine, PromptResult, TASK_TYPES
from .core.exceptions import CodePromptError
from .export import normalize_format, save_document
from .presets import load_preset
from .questions import apply_defaults, ask_options, validate_options
from .sharing import build_share_url, config_from_url, decode_config, is_share_url

app = typer.Typer(
    name="codeprompt",
    help="CodePrompt - token-efficient AI prompt generator for developers",
    no_args_is_help=True,
)

TASK_LABELS = {
    "init": "Initialize Project",
    "feature": "Build Feature",
    "architecture": "Design Architecture",
    "testing": "Create Tests",
    "docs": "Generate Docs",
    "fix": "Fix Issues",
}


class TyperPrompter:
    """Asks option questions on the terminal."""

    def text(self, message: str, default: Optional[str] = None) -> str:
        return typer.prompt(message, default=default or "", show_default=bool(default))

    def choice(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        return typer.prompt(
            message,
            default=default or choices[0],
            type=click.Choice(list(choices)),
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return typer.confirm(message, default=default)

    def multi(self, message: str, choices: Sequence[str], default: Sequence[str] = ()) -> List[str]:
        while True:
            answer = typer.prompt(
                f"{message} (comma-separated: {', '.join(choices)})",
                default=",".join(default),
            )
            selected = [item.strip() for item in answer.split(",") if item.strip()]
            unknown = [item for item in selected if item not in choices]
            if not unknown:
                return selected
            typer.secho(f"Unknown choice(s): {', '.join(unknown)}", fg=typer.colors.YELLOW)


def parse_assignments(assignments: Optional[List[str]]) -> Dict[str, Any]:
    """Parse repeated ``--set key=value`` flags."""
    options: Dict[str, Any] = {}
    for assignment in assignments or []:
        key, sep, value = assignment.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got '{assignment}'", param_hint="--set")
        options[key.strip()] = value.strip()
    return options


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, bold=True)
    raise typer.Exit(1)


def collect_options(
    task_type: Optional[str],
    assignments: Optional[List[str]],
    preset: Optional[Path],
    interactive: bool,
) -> tuple:
    """Resolve the task type and option set from a preset, flags or questions."""
    options: Dict[str, Any] = {}
    if preset:
        shared = load_preset(preset)
        task_type = task_type or shared.type
        options.update(shared.options)
    options.update(parse_assignments(assignments))

    if not task_type:
        if not interactive:
            fail("--type is required")
        task_type = typer.prompt(
            "What type of code prompt do you need?",
            type=click.Choice(list(TASK_TYPES)),
            default="init",
        )
    if task_type not in TASK_TYPES:
        fail(f"Unknown task type '{task_type}'. Choose from: {', '.join(TASK_TYPES)}")

    if interactive and not options:
        typer.secho(f"{TASK_LABELS[task_type]}", bold=True)
        options = ask_options(task_type, TyperPrompter())

    return task_type, apply_defaults(task_type, options)


def print_result(result: PromptResult, show_variations: bool) -> None:
    typer.echo("")
    typer.secho("Optimized AI Prompt:", bold=True)
    typer.echo("")
    typer.secho(result.prompt, fg=typer.colors.CYAN)

    analysis = result.analysis
    typer.echo("")
    typer.echo(
        f"Token Efficiency: {typer.style(analysis.efficiency, fg=typer.colors.GREEN)} "
        f"({analysis.estimated_tokens} tokens)"
    )

    if analysis.recommendations:
        typer.echo("")
        typer.secho("Optimization Tips:", bold=True)
        for tip in analysis.recommendations:
            typer.echo(f"  • {tip}")

    detected = result.context.detected()
    if detected:
        typer.echo("")
        typer.secho("Detected Context:", bold=True)
        for fact in detected:
            typer.echo(f"  • {fact}")

    if show_variations and result.variations:
        typer.echo("")
        typer.secho("Prompt Variations for A/B Testing:", bold=True)
        typer.echo("")
        for index, report in enumerate(result.variations, start=1):
            variation = report.variation
            typer.secho(f"{index}. {variation.name}", fg=typer.colors.YELLOW)
            typer.echo(f"   {variation.description} • {report.analysis.estimated_tokens} tokens")
            typer.secho(f"   {variation.prompt}", fg=typer.colors.CYAN)
            typer.echo("")


@app.command()
def generate(
    task_type: Optional[str] = typer.Option(None, "--type", "-t", help="Task type: " + ", ".join(TASK_TYPES)),
    assignments: Optional[List[str]] = typer.Option(None, "--set", "-s", help="Option as key=value (repeatable)"),
    preset: Optional[Path] = typer.Option(None, "--preset", "-p", help="YAML preset with type and options"),
    variations: bool = typer.Option(False, "--variations", help="Show prompt variations for A/B testing"),
    save: bool = typer.Option(False, "--save", help="Save prompt to file"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Saved file format (txt|md)"),
    strict: bool = typer.Option(False, "--strict", help="Reject missing required options and unknown choices"),
    context: bool = typer.Option(True, "--context/--no-context", help="Optimize using the detected project context"),
    project_dir: Optional[Path] = typer.Option(None, "--project-dir", help="Project to inspect (default: cwd)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for saved prompts"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Generate an optimized prompt (asks questions unless --set or --preset is given)"""
    configure_logging(verbose)
    settings = get_settings()

    try:
        interactive = not assignments and not preset
        task_type, options = collect_options(task_type, assignments, preset, interactive)
        if strict:
            validate_options(task_type, options)
    except CodePromptError as e:
        fail(str(e))

    provider = None
    if context and settings.detect_context:
        provider = lambda: analyze_project_context(project_dir)  # noqa: E731

    result = PromptEngine(context_provider=provider).run(task_type, options, include_variations=variations)
    print_result(result, variations)

    if save:
        path = save_document(
            output_dir or Path(settings.output_dir),
            normalize_format(fmt or settings.default_format),
            result.task_type,
            result.prompt,
            result.analysis,
            result.options,
            result.context,
        )
        typer.echo("")
        typer.secho(f"✓ Prompt saved to {path.name}", fg=typer.colors.GREEN, bold=True)
        typer.echo("  Includes analysis and metadata for optimization tracking")


@app.command()
def analyze(
    project_dir: Optional[Path] = typer.Option(None, "--project-dir", help="Project to inspect (default: cwd)"),
):
    """Analyze project context only"""
    context = analyze_project_context(project_dir)
    typer.secho("Project Analysis:", bold=True)
    typer.echo(json.dumps(context.model_dump(by_alias=True), indent=2))


@app.command()
def share(
    task_type: Optional[str] = typer.Option(None, "--type", "-t", help="Task type"),
    assignments: Optional[List[str]] = typer.Option(None, "--set", "-s", help="Option as key=value (repeatable)"),
    preset: Optional[Path] = typer.Option(None, "--preset", "-p", help="YAML preset with type and options"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Page the shared link points at"),
):
    """Print a URL that reproduces this configuration"""
    try:
        task_type, options = collect_options(task_type, assignments, preset, interactive=False)
        url = build_share_url(base_url or get_settings().share_base_url, task_type, options)
    except CodePromptError as e:
        fail(str(e))
    typer.echo(url)


@app.command()
def load(
    token: str = typer.Argument(..., help="Share URL or encoded configuration"),
    variations: bool = typer.Option(False, "--variations", help="Show prompt variations for A/B testing"),
):
    """Build the prompt from a shared configuration"""
    try:
        shared = config_from_url(token) if is_share_url(token) else decode_config(token)
    except CodePromptError as e:
        fail(str(e))

    if shared.type not in TASK_TYPES:
        fail(f"Unknown task type '{shared.type}'")

    typer.secho(f"✓ Configuration loaded: {shared.type}", fg=typer.colors.GREEN, bold=True)
    result = PromptEngine().run(shared.type, shared.options, include_variations=variations)
    print_result(result, variations)


@app.command()
def version():
    """Show CodePrompt version"""
    from . import __version__
    typer.echo(f"CodePrompt v{__version__}")


if __name__ == "__main__":
    app()
