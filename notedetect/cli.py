"""Command-line interface for notedetect.

Provides commands for:
- detect: Detect the notes played in an audio clip
- frequency: Show the frequency of a note
- benchmark: Time the frequency transforms
- info: Show audio file information
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import DEFAULT_SR, DEFAULT_TOLERANCE, NoteDetectError, NoteTable
from .transforms import ALGORITHMS, DEFAULT_ALGORITHM

app = typer.Typer(
    name="notedetect",
    help="Estimate the notes played in a short monophonic audio clip",
    rich_markup_mode="markdown",
)
console = Console()


@dataclass
class StageTimings:
    """Wall-clock seconds spent in each named stage."""

    stages: Dict[str, float] = field(default_factory=dict)

    @contextmanager
    def measure(self, stage: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.stages[stage] = time.perf_counter() - start


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def detect(
    input_file: Path = typer.Argument(..., help="Input audio file"),
    algorithm: str = typer.Option(
        DEFAULT_ALGORITHM, "-a", "--algorithm",
        help=f"Frequency transform: {', '.join(ALGORITHMS)}",
    ),
    tolerance: float = typer.Option(
        DEFAULT_TOLERANCE, "-t", "--tolerance",
        help="Estimation tolerance, 1.0 = most strict, 0.0 = least",
    ),
    sr: int = typer.Option(
        DEFAULT_SR, "--sr", help="Sample rate to analyse at (Hz)"
    ),
    scores: bool = typer.Option(
        False, "--scores", help="Show the score of every pitch class"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Detect the most probable notes played in an audio clip.

    **Examples:**

        notedetect detect a4.wav

        notedetect detect guitar.flac -a recursive -t 0.8
    """
    from .input import AudioLoader
    from .detection import NoteDetector

    _setup_logging(verbose)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    timings = StageTimings()
    try:
        with timings.measure("load"):
            audio, rate = AudioLoader(target_sr=sr).load(str(input_file))

        with timings.measure("detect"):
            detector = NoteDetector(audio, sample_rate=rate, algorithm=algorithm)
            notes = detector.run(tolerance)
    except (NoteDetectError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    pitch_scores = None
    if scores and detector.spectrum is not None:
        pitch_scores = detector.estimator.scores(detector.spectrum)

    if json_output:
        result = {
            "file": str(input_file),
            "algorithm": detector.algorithm.name,
            "tolerance": tolerance,
            "notes": notes,
            "timing": timings.stages,
        }
        if pitch_scores is not None:
            result["scores"] = pitch_scores
        console.print_json(data=result)
        return

    if notes is None:
        console.print("[yellow]No detection[/yellow]")
    else:
        console.print(f"[green]Detected notes:[/green] {' '.join(notes)}")

    if pitch_scores is not None:
        _show_scores_table(pitch_scores, notes or [])

    if verbose:
        for stage, duration in timings.stages.items():
            console.print(f"  {stage}: {duration:.3f}s")


@app.command()
def frequency(
    note: str = typer.Argument(..., help="Note in letter notation, e.g. A4 or C#3"),
):
    """Show the equal-tempered frequency of a note."""
    notes = NoteTable()
    try:
        hz = notes.frequency_of(note)
    except NoteDetectError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"{note}: {hz:.2f} Hz (pitch {notes.pitch(note)})")


@app.command()
def benchmark(
    size: int = typer.Option(4096, "-n", "--size", help="Number of samples"),
    sr: int = typer.Option(DEFAULT_SR, "--sr", help="Sample rate of the test tone (Hz)"),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Time every frequency transform on a synthetic tone."""
    from .transforms import timed_transform

    _setup_logging(verbose)

    if size < 1:
        console.print("[red]Error: size must be positive[/red]")
        raise typer.Exit(1)

    t = np.arange(size) / sr
    samples = np.sin(2 * np.pi * 440.0 * t)

    timings = StageTimings()
    reference = None
    table = Table(title=f"Transforms on {size} samples")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Bins", style="green")
    table.add_column("Time (ms)", style="yellow")
    table.add_column("Max error", style="magenta")

    for name, algorithm_class in ALGORITHMS.items():
        with timings.measure(name):
            spectrum = timed_transform(algorithm_class(), samples)
        duration = timings.stages[name]

        if reference is None:
            reference = spectrum
        error = float(np.max(np.abs(spectrum - reference)))
        table.add_row(name, str(len(spectrum)), f"{duration * 1000:.1f}", f"{error:.2e}")

    console.print(table)


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input audio file"),
):
    """Show information about an audio file."""
    from .input import AudioLoader

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    loader = AudioLoader(target_sr=None)
    try:
        audio, sr = loader.load(str(input_file))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {loader.get_duration(audio, sr):.2f} seconds")
    console.print(f"  Sample rate: {sr} Hz")
    console.print(f"  Samples: {len(audio):,}")


def _show_scores_table(pitch_scores, detected):
    """Display pitch class scores in a table."""
    table = Table(title="Pitch Class Scores")
    table.add_column("Pitch class", style="cyan")
    table.add_column("Score", style="yellow")
    table.add_column("Detected", style="green")

    for letter, score in pitch_scores.items():
        table.add_row(letter, f"{score:.2f}", "*" if letter in detected else "")

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
