"""Etymon CLI — run an analysis against a provider without the HTTP server.

Usage::

    # Analyze a sentence with Gemini
    python -m etymon.cli analyze --provider gemini --model gemini-2.0-flash \\
        --api-key $KEY "Translate and explain: The benevolent benefactor"

    # Key from the environment
    ETYMON_API_KEY=... python -m etymon.cli analyze --provider deepseek \\
        --model deepseek-chat "..."

    # List registered providers
    python -m etymon.cli providers
"""

from __future__ import annotations

import asyncio
import sys

import click

from etymon.llm import AnalysisError, get_dispatcher
from etymon.models.schemas import AnalysisRequest


@click.group()
def cli():
    """Etymon — etymology analysis through interchangeable LLM providers."""
    pass


# ── analyze ───────────────────────────────────────────────────────────


@cli.command()
@click.argument("prompt")
@click.option("--provider", required=True, help="Provider id (see `providers`).")
@click.option("--model", required=True, help="Provider-specific model id, passed through as-is.")
@click.option(
    "--api-key",
    envvar="ETYMON_API_KEY",
    default="",
    help="Provider credential (default: $ETYMON_API_KEY).",
)
def analyze(prompt: str, provider: str, model: str, api_key: str):
    """Send PROMPT to a provider and print the normalized result as JSON."""
    request = AnalysisRequest(
        provider_id=provider,
        model_id=model,
        credential=api_key,
        prompt=prompt,
    )
    try:
        result = asyncio.run(get_dispatcher().dispatch(request))
    except AnalysisError as exc:
        click.secho(f"Error: {exc.message}", fg="red", err=True)
        sys.exit(1)

    click.echo(result.model_dump_json(indent=2))


# ── providers ─────────────────────────────────────────────────────────


@cli.command()
def providers():
    """List registered provider ids."""
    for info in get_dispatcher().providers():
        click.echo(f"{info.id:<12} {info.name}")


# ── Entry point ───────────────────────────────────────────────────────


def main():
    cli()


if __name__ == "__main__":
    main()
