"""JobHunter CLI - Match a resume against job postings."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jobhunter.config import DEFAULT_TOP_N, LOG_FORMAT, LOG_LEVEL, MIN_MATCH_SCORE
from jobhunter.cv.parser import parse_resume_file
from jobhunter.embeddings.vectorizer import cosine_similarity, generate_embedding
from jobhunter.jobs.source import JsonFileJobSource
from jobhunter.matching.experience import calculate_years_of_experience, estimate_seniority
from jobhunter.schemas.job import JobFilter, LocationType
from jobhunter.schemas.match import MatchResult
from jobhunter.schemas.resume import ParsingProgress, Resume
from jobhunter.services.match_service import match_resume

app = typer.Typer(help="JobHunter - Score job postings against your resume")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info logging"),
) -> None:
    """Configure logging for all commands."""
    level = logging.INFO if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _print_progress(progress: ParsingProgress) -> None:
    console.print(f"  [dim]{progress.message}[/dim]")


@app.command()
def match(
    resume: Path = typer.Option(..., "--resume", "-r", help="Path to resume (PDF, TXT or MD)"),
    jobs: Path = typer.Option(..., "--jobs", "-j", help="Path to jobs JSON file"),
    query: str = typer.Option("", "--query", "-q", help="Only consider jobs matching this text"),
    top_n: int = typer.Option(DEFAULT_TOP_N, "--top-n", "-n", help="Number of top matches to return"),
    min_score: int = typer.Option(
        MIN_MATCH_SCORE, "--min-score", "-m", min=0, max=100, help="Minimum overall score"
    ),
    remote_only: bool = typer.Option(False, "--remote-only", help="Only show remote jobs"),
    output_json: bool = typer.Option(
        False, "--json", help="Output results as JSON instead of pretty format"
    ),
) -> None:
    """Match a resume against jobs and display the top matches."""
    if not resume.exists():
        console.print(f"[red]Error: Resume file not found: {resume}[/red]")
        raise typer.Exit(1)

    if not jobs.exists():
        console.print(f"[red]Error: Jobs file not found: {jobs}[/red]")
        raise typer.Exit(1)

    try:
        if not output_json:
            console.print(f"[bold cyan]Processing resume: {resume}[/bold cyan]")
        parsed = parse_resume_file(resume, on_progress=None if output_json else _print_progress)

        filters = JobFilter(
            min_match_score=min_score or None,
            location_type=[LocationType.REMOTE] if remote_only else None,
        )
        postings = JsonFileJobSource(jobs).fetch_jobs(query=query)

        if not postings:
            console.print("[yellow]No jobs found matching your query.[/yellow]")
            raise typer.Exit(0)

        top_matches = match_resume(parsed, postings, filters=filters, top_n=top_n)

        if output_json:
            _output_json(matches=top_matches)
        else:
            _output_pretty(matches=top_matches)

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error during matching: {e}[/red]")
        raise typer.Exit(1)


@app.command(name="parse-resume")
def parse_resume_command(
    resume: Path = typer.Option(..., "--resume", "-r", help="Path to resume (PDF, TXT or MD)"),
    output_json: bool = typer.Option(False, "--json", help="Output parsed resume as JSON"),
) -> None:
    """Parse a resume and show what was extracted."""
    if not resume.exists():
        console.print(f"[red]Error: Resume file not found: {resume}[/red]")
        raise typer.Exit(1)

    try:
        parsed = parse_resume_file(resume)
    except Exception as e:
        console.print(f"[red]Error parsing resume: {e}[/red]")
        raise typer.Exit(1)

    if output_json:
        json.dump(obj=parsed.model_dump(mode="json", exclude={"raw_text"}), fp=sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    _output_resume(parsed)


@app.command()
def similarity(
    text_a: str = typer.Argument(..., help="First text"),
    text_b: str = typer.Argument(..., help="Second text"),
) -> None:
    """Show the embedding cosine similarity between two texts."""
    score = cosine_similarity(generate_embedding(text_a), generate_embedding(text_b))
    console.print(f"Similarity: [bold]{score:.3f}[/bold]")


def _output_resume(resume: Resume) -> None:
    """Output a parsed resume as a summary table."""
    years = calculate_years_of_experience(resume.experience)

    table = Table(title="Parsed Resume")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Name", resume.name)
    table.add_row("Email", resume.email or "Not detected")
    table.add_row("Phone", resume.phone or "Not detected")
    table.add_row("Location", resume.location or "Not detected")
    table.add_row("Skills", ", ".join(resume.skills) or "None detected")
    table.add_row("Experience Entries", str(len(resume.experience)))
    table.add_row("Years of Experience", f"{years:.1f}")
    table.add_row("Estimated Seniority", estimate_seniority(years).value)
    table.add_row("Education Entries", str(len(resume.education)))
    table.add_row("Certifications", ", ".join(resume.certifications or []) or "None detected")

    console.print(table)


def _output_json(matches: list[MatchResult]) -> None:
    """Output matches as JSON to stdout."""
    output = [match.model_dump(mode="json", exclude={"job": {"embedding"}}) for match in matches]
    json.dump(obj=output, fp=sys.stdout, indent=2)
    sys.stdout.write("\n")


def _output_pretty(matches: list[MatchResult]) -> None:
    """Output matches in pretty console format."""
    if not matches:
        console.print("[yellow]No jobs passed your filters.[/yellow]")
        return

    console.print(f"\n[bold green]Found {len(matches)} top matches![/bold green]\n")

    for i, match in enumerate(iterable=matches, start=1):
        job = match.job
        breakdown = match.breakdown

        header = f"[bold]#{i} {job.title}[/bold] at {job.company}"

        content = [
            f"[cyan]Location:[/cyan] {job.location} ({job.location_type.value})",
            f"[cyan]Seniority:[/cyan] {job.seniority.value} · {job.job_type.value}",
            f"[cyan]Match Score:[/cyan] {match.score}% "
            f"(Skills: {breakdown.skills_match}, Experience: {breakdown.experience_match}, "
            f"Keywords: {breakdown.keyword_match}, Location: {breakdown.location_match}, "
            f"Seniority: {breakdown.seniority_match})",
            f"\n[cyan]Experience:[/cyan] {match.experience_relevance}",
        ]

        if match.matched_skills:
            content.append(f"\n[cyan]Matched skills:[/cyan] {', '.join(match.matched_skills)}")

        if match.missing_skills:
            content.append(f"[cyan]Skills to develop:[/cyan] {', '.join(match.missing_skills)}")

        content.append("\n[yellow]Recommendations:[/yellow]")
        for tip in match.recommendations:
            content.append(f"  • {tip}")

        if job.application_url:
            content.append(f"\n[cyan]Apply:[/cyan] {job.application_url}")

        panel = Panel(
            renderable="\n".join(content),
            title=header,
            border_style="green" if i == 1 else "blue",
        )
        console.print(panel)
        console.print()


if __name__ == "__main__":
    app()
