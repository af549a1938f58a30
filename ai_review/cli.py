"""Typer CLI for the batch AI code review."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from ai_review.config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_ROOT_DIR,
    DEFAULT_TIMEOUT_SECONDS,
    EXCLUDED_DIR_NAMES,
    SOURCE_FILE_EXTENSION,
    GeminiAuthError,
    build_review_config,
)
from ai_review.discovery import discover_review_targets
from ai_review.gemini_client import build_gemini_client, generate_text
from ai_review.observability import configure_logging
from ai_review.pipeline import run_review

app = typer.Typer(help="Review every source file with Gemini and write one markdown report.")


def _fail(message: str, error: BaseException) -> NoReturn:
    typer.echo(f"AI review failed: {message}", err=True)
    raise typer.Exit(code=1) from error


@app.command("review")
def review_command(
    root: Annotated[Path, typer.Option(help="Directory scanned for source files.")] = (
        DEFAULT_ROOT_DIR
    ),
    output: Annotated[Path, typer.Option(help="Markdown report path (overwritten).")] = (
        DEFAULT_OUTPUT_PATH
    ),
    timeout_seconds: Annotated[
        int, typer.Option(help="Gemini API timeout in seconds for each review call.")
    ] = DEFAULT_TIMEOUT_SECONDS,
    trust_env: Annotated[
        bool,
        typer.Option(
            "--trust-env/--no-trust-env",
            help="Use proxy/SSL environment variables from the current shell.",
        ),
    ] = True,
    verbose: Annotated[bool, typer.Option(help="Print progress for each file.")] = False,
) -> None:
    """Review all source files under --root and write the aggregated report."""
    configure_logging(verbose=verbose)

    try:
        config = build_review_config(
            root_dir=root,
            output_path=output,
            timeout_seconds=timeout_seconds,
            trust_env=trust_env,
        )
    except GeminiAuthError as error:
        _fail(str(error), error)

    try:
        with build_gemini_client(
            api_key=config.api_key,
            timeout_seconds=config.timeout_seconds,
            trust_env=config.trust_env,
        ) as client:
            run = run_review(config, generate=partial(generate_text, client=client))
    except OSError as error:
        _fail(str(error), error)
    except ImportError as error:
        _fail(
            "proxy transport dependency is missing. "
            "Try `ai-code-review review --no-trust-env`, or install `httpx[socks]`.",
            error,
        )

    typer.echo(run.telemetry.describe())


@app.command("discover")
def discover_command(
    root: Annotated[Path, typer.Option(help="Directory scanned for source files.")] = (
        DEFAULT_ROOT_DIR
    ),
) -> None:
    """List the files a review run would cover, without calling Gemini."""
    try:
        targets = discover_review_targets(
            root,
            excluded_dir_names=EXCLUDED_DIR_NAMES,
            file_extension=SOURCE_FILE_EXTENSION,
        )
    except OSError as error:
        _fail(str(error), error)

    for target in targets:
        typer.echo(target.label)
    typer.echo(f"{len(targets)} file(s) would be reviewed.")
