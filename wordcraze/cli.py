import logging
import random
import time
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from wordcraze.game.engine import GameEngine
from wordcraze.game.models import (
    GameConfig,
    GameSession,
    RoundOutcome,
    SubmissionKind,
    VocabularyReport
)
from wordcraze.game.rules import round_outcome
from wordcraze.words.bank import load_vocabulary, validate_vocabulary

app = typer.Typer(help="WordCraze: a timed anagram game over 3, 4 and 5 letter words.")
console = Console()

DictionaryOption = typer.Option(
    "data/words_en.json", envvar="WORDCRAZE_DICTIONARY", help="Path to word dictionary"
)

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )

def _read_vocabulary(dictionary_file: str):
    try:
        return load_vocabulary(dictionary_file)
    except FileNotFoundError:
        console.print(f"[red]Error: {dictionary_file} not found.[/red]")
    except ValueError as e:
        # Covers malformed JSON and entries pydantic cannot read
        console.print(f"[red]Error: could not read {dictionary_file}: {escape(str(e))}[/red]")
    raise typer.Exit(code=1)

def _load_engine(dictionary_file: str, config: GameConfig, seed: Optional[int] = None) -> GameEngine:
    vocabulary = _read_vocabulary(dictionary_file)
    engine = GameEngine(config, rng=random.Random(seed))
    report = engine.build_index(vocabulary)
    if not report.ok:
        console.print(
            f"[yellow]Warning: dictionary has {report.problem_count()} problem(s); "
            "run 'wordcraze validate' for details.[/yellow]"
        )
    return engine

@app.command()
def play(
    dictionary_file: str = DictionaryOption,
    round_seconds: int = typer.Option(90, envvar="WORDCRAZE_ROUND_SECONDS", help="Seconds per word"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible rounds")
):
    """
    Plays rounds in the console until the timer beats you.
    """
    engine = _load_engine(dictionary_file, GameConfig(round_seconds=round_seconds), seed)
    session = GameSession()
    console.print("Type words made from the letters. [bold]:skip[/bold] for a new word, [bold]:quit[/bold] to stop.")

    while True:
        round_data = engine.new_round(session)
        deadline = time.monotonic() + engine.config.round_seconds
        outcome = RoundOutcome.IN_PROGRESS

        while outcome == RoundOutcome.IN_PROGRESS:
            counts = engine.remaining_counts(round_data, session.recognition)
            left = max(0, int(deadline - time.monotonic()))
            console.print(
                f"\n[bold cyan]{' '.join(round_data.presented_word.upper())}[/bold cyan]  "
                f"3s: {counts.threes}  4s: {counts.fours}  5s: {counts.fives}  "
                f"Score: {session.score}  Time: {left // 60:02d}:{left % 60:02d}"
            )
            entry = Prompt.ask("Word", console=console, default="", show_default=False).strip().lower()

            if entry == ":quit":
                _print_summary(session)
                return
            if entry == ":skip":
                break

            timed_out = time.monotonic() >= deadline
            if timed_out:
                console.print("[yellow]Time's up! That entry did not count.[/yellow]")
            elif entry:
                _report_submission(engine.play_word(session, entry))

            counts = engine.remaining_counts(round_data, session.recognition)
            outcome = round_outcome(counts, timed_out)

        if outcome == RoundOutcome.GAME_OVER:
            console.print("[red]Game Over!! You did not finish at least one of the word categories.[/red]")
            _print_round(round_data)
            _print_summary(session)
            return
        if outcome == RoundOutcome.COMPLETE:
            console.print("[green]All words found![/green]")

def _report_submission(result):
    if result.kind == SubmissionKind.SCORED:
        console.print(f"[green]Sweet!! Last word: {escape(result.word)} (+{result.delta})[/green]")
    elif result.kind == SubmissionKind.DUPLICATE:
        console.print(f"[yellow]Word already entered: {escape(result.word)}[/yellow]")
    else:
        console.print(f"[red]Not a valid word: {escape(result.word)}[/red]")

def _print_summary(session: GameSession):
    console.print(f"Final score: [bold]{session.score}[/bold] over {len(session.played) + 1} word(s)")

def _print_round(round_data):
    table = Table(title=f"Answers for '{round_data.base_word}' ({round_data.total_words} words)")
    table.add_column("Length", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Words", style="cyan")
    for length in (3, 4, 5):
        words = sorted(round_data.answers_for(length))
        table.add_row(str(length), str(len(words)), ", ".join(words))
    console.print(table)

@app.command()
def solve(
    word: str = typer.Argument(..., help="A 5-letter base word"),
    dictionary_file: str = DictionaryOption
):
    """
    Lists every 3, 4 and 5 letter answer hidden in a word.
    """
    engine = _load_engine(dictionary_file, GameConfig())
    try:
        round_data = engine.build_round(word)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    _print_round(round_data)

@app.command()
def validate(dictionary_file: str = DictionaryOption):
    """
    Checks the dictionary for duplicate and wrong-length entries.
    """
    vocabulary = _read_vocabulary(dictionary_file)
    report = validate_vocabulary(vocabulary)
    _print_report(report)
    if not report.ok:
        raise typer.Exit(code=1)

def _print_report(report: VocabularyReport):
    if report.ok:
        console.print("[green]No errors found in the dictionary.[/green]")
        return

    table = Table(title="Dictionary Problems")
    table.add_column("Category", justify="right")
    table.add_column("Problem", style="yellow")
    table.add_column("Entries", style="cyan")
    for problem, group in (
        ("Duplicate", report.duplicates),
        ("Wrong length", report.wrong_length),
        ("Not a string", report.non_strings)
    ):
        for length, entries in sorted(group.items()):
            table.add_row(f"{length}s", problem, ", ".join(str(e) for e in entries))
    console.print(table)

if __name__ == "__main__":
    app()
