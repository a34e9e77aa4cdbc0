"""CLI entry point for repograde."""

import json
import logging
from datetime import datetime
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from repograde.analyzers.errors import ScoringError
from repograde.analyzers.scorer import Scorer
from repograde.config import ConfigError, ScoringConfig, resolve_config
from repograde.models.schemas import DurationThresholds, ProjectScores, ProjectStats

app = typer.Typer(help="Repository maturity and quality scoring tool.")

console = Console()

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config(config_path: Path | None) -> ScoringConfig:
    try:
        return resolve_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def load_stats(path: Path) -> ProjectStats:
    """Read and validate a stats JSON file."""
    return ProjectStats.model_validate_json(path.read_bytes())


def _render_stats(title: str, stats: ProjectStats) -> Table:
    table = Table(title=f"{escape(title)} stats", show_header=False, box=None)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    github = stats.github
    sonar = stats.sonar
    table.add_row("First Commit", github.first_commit_date.strftime("%Y-%m-%d %H:%M:%S %Z"))
    table.add_row("Last Commit", github.last_commit_date.strftime("%Y-%m-%d %H:%M:%S %Z"))
    table.add_row("Stars", f"{github.stars:,}")
    table.add_row("Active Contributors", str(github.active_contributors))
    table.add_row("Lines of Code", f"{sonar.lines_of_code:,}")
    table.add_row("Functions", f"{sonar.functions:,}")
    table.add_row("Code Smells", f"{sonar.code_smells:,}")
    table.add_row("Brain Overload", f"{sonar.brain_overload:,}")
    table.add_row("Cognitive Complexity", f"{sonar.cognitive_complexity:,}")
    table.add_row("Duplication", f"{sonar.duplication_density:.1f}%")
    table.add_row("Scorecard Checks", str(len(stats.scorecard.checks)))
    return table


def _score_color(score: int) -> str:
    return "green" if score >= 4 else "yellow" if score >= 3 else "red"


def _render_scores(title: str, scores: ProjectScores) -> Table:
    table = Table(title=escape(title), show_header=True)
    table.add_column("Group", style="dim")
    table.add_column("Metric", style="bold")
    table.add_column("Score", justify="right")

    rows = [
        ("Community", "Maturity", scores.community.maturity),
        ("", "Activity", scores.community.activity),
        ("", "Popularity", scores.community.popularity),
        ("", "Contributors", scores.community.contributors),
        ("Tech", "Size", scores.tech.size),
        ("", "Cyclomatic Complexity", scores.tech.cyclomatic_complexity),
        ("", "Cognitive Complexity", scores.tech.cognitive_complexity),
        ("", "Duplication", scores.tech.duplication),
        ("", "Code Smells", scores.tech.code_smells),
        ("Security", "Scorecard", scores.security.scorecard),
    ]
    for group, name, score in rows:
        color = _score_color(score)
        table.add_row(group, name, f"[{color}]{score}[/{color}] / 5")
    return table


@app.command()
def score(
    stats_files: list[Path] = typer.Argument(..., help="Stats JSON files, one per repository"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Scoring configuration JSON (default: $REPOGRADE_CONFIG)"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file"),
    now: datetime | None = typer.Option(
        None, "--now", help="Reference time for elapsed-time metrics (default: current time)"
    ),
    show_stats: bool = typer.Option(
        False, "--show-stats", help="Print the collected stats before the scores"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log derived metric values"),
) -> None:
    """Score one or more repositories from collected stats.

    A file that fails to load or score is reported and skipped; the
    remaining files are still scored.
    """
    _setup_logging(verbose)
    scorer = Scorer(_load_config(config_path))

    results = []
    errors: list[tuple[Path, str]] = []

    for path in stats_files:
        try:
            stats = load_stats(path)
        except (OSError, ValidationError) as e:
            errors.append((path, f"cannot load stats: {e}"))
            continue

        try:
            scores = scorer.calculate_scores(stats, now=now)
        except ScoringError as e:
            logger.debug(f"Scoring failed for {path}: {e!r}")
            errors.append((path, str(e)))
            continue

        label = stats.repository or path.stem
        console.print()
        if show_stats:
            console.print(_render_stats(label, stats))
            console.print()
        console.print(_render_scores(label, scores))
        results.append(
            {
                "file": str(path),
                "repository": stats.repository,
                "scores": scores.model_dump(mode="json"),
            }
        )

    console.print()
    console.print(f"[bold green]Completed:[/bold green] {len(results)} repositories scored")

    if errors:
        console.print(f"[bold red]Errors:[/bold red] {len(errors)} repositories failed")
        for path, error in errors:
            console.print(f"  [red]x[/red] {path}: {escape(error)}")

    # Save to file if requested
    if output:
        output.write_text(json.dumps(results, indent=2))
        console.print(f"\n[green]Saved to {output}[/green]")

    if errors:
        raise typer.Exit(1)


@app.command()
def thresholds(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Scoring configuration JSON (default: $REPOGRADE_CONFIG)"
    ),
) -> None:
    """Show the effective thresholds and scorecard weights."""
    config = _load_config(config_path)

    table = Table(title="Metric Thresholds", show_header=True)
    table.add_column("Metric", style="bold")
    table.add_column("Breakpoints", justify="right")
    table.add_column("Direction", style="dim")

    for name in ScoringConfig.model_fields:
        if name == "weights":
            continue
        metric = getattr(config, name)
        if isinstance(metric, DurationThresholds):
            points = ", ".join(f"{bp.days}d" for bp in metric.breakpoints)
        else:
            points = ", ".join(f"{bp:,}" for bp in metric.breakpoints)
        table.add_row(name, points, metric.direction.value)

    console.print(table)
    console.print()

    weights_table = Table(title="Scorecard Weights", show_header=True)
    weights_table.add_column("Check", style="bold")
    weights_table.add_column("Weight", justify="right")
    for check, weight in config.weights.items():
        weights_table.add_row(check, str(weight))

    console.print(weights_table)


@app.command()
def version() -> None:
    """Show version information."""
    from repograde import __version__

    console.print(f"repograde v{__version__}")


if __name__ == "__main__":
    app()
