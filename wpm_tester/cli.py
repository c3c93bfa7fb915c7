# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: cli.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Typer command line interface for the WPM tester.
# -----------------------------------------------------------------------------
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from wpm_tester.config import DEFAULT_DURATION_SECONDS, SessionConfig
from wpm_tester.dictionary import load_words
from wpm_tester.errors import DictionaryError
from wpm_tester.logging_config import setup_logging
from wpm_tester.manual import load_manual, usage_summary
from wpm_tester.runner import run_session
from wpm_tester.scorer import ScoreResult, score_session

# --help is a plain option: --manual overrides it and it exits with status 1.
app = typer.Typer(
    help="A typing test to find your words-per-minute on the command line.",
    add_completion=False,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def summary_table(result: ScoreResult) -> Table:
    """Build the optional end-of-test table."""
    table = Table(title="Session Summary", show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Duration", f"{result.duration}s")
    table.add_row("Words attempted", str(result.attempted))
    table.add_row("Words correct", str(result.correct))
    table.add_row(
        "Character accuracy",
        f"{result.accuracy:.1f}% ({result.correct_chars}/{result.total_chars})",
    )
    table.add_row("WPM", f"{result.wpm:.2f}")
    return table


@app.command(context_settings={"help_option_names": []})
def typing_test(
    duration: int = typer.Option(
        DEFAULT_DURATION_SECONDS,
        "--time",
        "-t",
        min=0,
        help="Length of the test in seconds.",
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Print diagnostics to standard error."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="End the test at the deadline, even mid-word."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the word draw for a repeatable test."
    ),
    words_file: Optional[Path] = typer.Option(
        None, "--words", help="Word list to use instead of the built-in one."
    ),
    summary: bool = typer.Option(
        False, "--summary", help="Show a table of session statistics."
    ),
    show_help: bool = typer.Option(
        False, "--help", help="Show the usage summary and exit."
    ),
    manual: bool = typer.Option(False, "--manual", help="Show the full manual and exit."),
):
    """
    Run a timed typing test and report the words-per-minute.
    """
    if manual:
        console.print(Markdown(load_manual()))
        raise typer.Exit()
    if show_help:
        console.print(Markdown(usage_summary(load_manual())))
        raise typer.Exit(code=1)

    config = SessionConfig(
        duration=duration,
        debug=debug,
        strict=strict,
        seed=seed,
        words_file=words_file,
    )
    setup_logging(config.debug)

    try:
        words = load_words(config.words_file)
    except DictionaryError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)

    try:
        session = run_session(words, config)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Test aborted.[/yellow]")
        raise typer.Exit(code=130)

    result = score_session(session, config.duration, debug=config.debug)
    typer.echo(result.report_line())

    if summary:
        console.print(summary_table(result))


def main():
    """
    Entry point for the program.
    """
    app()


if __name__ == "__main__":
    main()
