# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the driver and multi-runner commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import sys

import typer

from ..config import ConfigError, OptlintError, RunConfig
from ..constants import EXIT_LINT_FAILURE
from ..discovery.sources import GitFileSource
from ..drivers.registry import default_registry
from ..execution.runner import SelectiveLintRunner
from ..orchestration.multi_runner import MultiRunner
from ..runtime.console.manager import detect_tty
from .shared import CLIError, CLILogger, build_cli_logger, resolve_root, select_file_source

app = typer.Typer(
    help="Opt-in lint harness: runs pylint, shellcheck, and yamllint on files that ask for it.",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    add_completion=False,
)

RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Repository root; defaults to the current directory."),
]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji prefixes.")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Print internal debug records to stderr.")]
PathsArgument = Annotated[
    list[Path] | None,
    typer.Argument(help="Files to consider; read from stdin or git when omitted.", show_default=False),
]


def _build_config(
    root: Path | None,
    *,
    no_color: bool,
    no_emoji: bool,
    force_all: bool = False,
) -> RunConfig:
    resolved = resolve_root(root)
    return RunConfig.from_env(
        root=resolved,
        color=detect_tty() and not no_color,
        emoji=not no_emoji,
        force_all=force_all,
    )


def _run_driver(
    name: str,
    paths: list[Path] | None,
    *,
    config: RunConfig,
    logger: CLILogger,
) -> None:
    """Run the driver called ``name`` and exit with its status.

    Raises:
        typer.Exit: Always raised carrying the driver's exit status.
    """

    try:
        try:
            spec = default_registry().require(name)
        except ConfigError as exc:
            raise CLIError(str(exc), exit_code=2) from exc
        source = select_file_source(paths or [], root=config.root, stdin=sys.stdin)
        outcome = SelectiveLintRunner(spec, config, on_warning=logger.warn).run(source.paths())
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except (OptlintError, OSError) as exc:
        logger.fail(f"{name}: {exc}")
        raise typer.Exit(code=EXIT_LINT_FAILURE) from exc
    raise typer.Exit(code=outcome.exit_code)


@app.command("run")
def run_all(
    root: RootOption = None,
    staged: Annotated[
        bool,
        typer.Option("--staged", help="Only consider files staged in the git index."),
    ] = False,
    skip: Annotated[
        list[str] | None,
        typer.Option("--skip", help="Driver to leave out; repeatable.", show_default=False),
    ] = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Run every driver over the files git lists and exit with the highest status."""

    config = _build_config(root, no_color=no_color, no_emoji=no_emoji)
    logger = build_cli_logger(emoji=config.emoji, color=config.color, debug=debug)
    registry = default_registry()
    unknown = sorted(set(skip or ()) - set(registry))
    if unknown:
        raise typer.BadParameter(f"unknown driver(s): {', '.join(unknown)}", param_hint="--skip")
    files = list(GitFileSource(config.root, staged=staged).paths())
    runner = MultiRunner(registry, config, exclude=skip or (), on_warning=logger.warn)
    result = runner.run(lambda: files)
    raise typer.Exit(code=result.exit_code)


@app.command("python")
def python_driver(
    paths: PathsArgument = None,
    root: RootOption = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Run pylint on Python files whose header carries a ``# pylint:`` directive."""

    config = _build_config(root, no_color=no_color, no_emoji=no_emoji)
    logger = build_cli_logger(emoji=config.emoji, color=config.color, debug=debug)
    _run_driver("python", paths, config=config, logger=logger)


@app.command("shell")
def shell_driver(
    paths: PathsArgument = None,
    root: RootOption = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Run shellcheck on shell scripts whose header carries a ``# shellcheck`` directive."""

    config = _build_config(root, no_color=no_color, no_emoji=no_emoji)
    logger = build_cli_logger(emoji=config.emoji, color=config.color, debug=debug)
    _run_driver("shell", paths, config=config, logger=logger)


@app.command("yaml")
def yaml_driver(
    paths: PathsArgument = None,
    lint_all: Annotated[
        bool,
        typer.Option("-a", "--all", help="Lint every YAML file regardless of directive."),
    ] = False,
    root: RootOption = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    debug: DebugOption = False,
) -> None:
    """Run yamllint on YAML files whose header carries a ``# yamllint`` directive."""

    config = _build_config(root, no_color=no_color, no_emoji=no_emoji, force_all=lint_all)
    logger = build_cli_logger(emoji=config.emoji, color=config.color, debug=debug)
    _run_driver("yaml", paths, config=config, logger=logger)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
