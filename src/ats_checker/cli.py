"""CLI interface using typer + rich."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ats_checker.config import AppConfig, load_config
from ats_checker.export.html_report import render_html_report, save_html
from ats_checker.export.pdf_report import render_pdf_report, save_pdf
from ats_checker.export.summary import build_summary, display_score, save_json_report
from ats_checker.logging_config import configure_logging
from ats_checker.models.result import AnalysisResult
from ats_checker.parsers.jd_parser import SAMPLE_JD, load_jd_file
from ats_checker.parsers.resume_parser import (
    DEFAULT_EXTRACTED_NAME,
    parse_resume,
    save_extracted_text,
)
from ats_checker.pipeline.analyzer import analyze, validate_inputs

app = typer.Typer(
    name="ats-checker",
    help="Score a resume against a job description using lexical ATS heuristics.",
    no_args_is_help=True,
)
console = Console()

STATUS_STYLES = {"ok": "green", "warn": "yellow", "danger": "red"}


def _score_color(score: int) -> str:
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _print_result(result: AnalysisResult) -> None:
    score = display_score(result)
    color = _score_color(score)
    console.print(Panel(f"[bold {color}]{score}[/bold {color}] / 100", title="ATS Score"))

    keywords = Table(title="Keywords", show_header=True)
    keywords.add_column(f"Matched ({len(result.keywords_hit)})", style="green")
    keywords.add_column(f"Missing ({len(result.keywords_miss)})", style="red")
    keywords.add_row(escape(", ".join(result.keywords_hit)), escape(", ".join(result.keywords_miss)))
    console.print(keywords)

    console.print("\n[bold]Checks[/bold]")
    for check in result.checks:
        style = STATUS_STYLES[check.status]
        console.print(f"  [{style}]{check.status.upper():<6}[/{style}] {escape(check.message)}")

    if result.suggestions:
        console.print("\n[bold]Suggestions[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  - {escape(suggestion)}")


def _load_config_or_exit(config_path: Path | None) -> AppConfig:
    try:
        return load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Invalid config: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command("analyze")
def analyze_command(
    resume: Path = typer.Option(None, "--resume", "-r", help="Resume file (PDF/DOCX/TXT/MD)"),
    jd: Path = typer.Option(None, "--jd", help="Job description text file"),
    sample_jd: bool = typer.Option(False, "--sample-jd", help="Use the bundled sample job description"),
    file_name: str = typer.Option(None, "--file-name", help="File name to check (defaults to the resume's name)"),
    json_out: Path = typer.Option(None, "--json", help="Write the JSON report to this path"),
    html_out: Path = typer.Option(None, "--html", help="Write the HTML report to this path"),
    pdf_out: Path = typer.Option(None, "--pdf", help="Write the PDF report to this path"),
    summary: bool = typer.Option(False, "--summary", help="Print a plain-text summary only"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Score a resume against a job description."""
    config = _load_config_or_exit(config_path)
    configure_logging("DEBUG" if verbose else config.logging.level)

    if resume is None:
        console.print("[red]Please provide a resume file with --resume.[/red]")
        raise typer.Exit(1)
    if jd is None and not sample_jd:
        console.print("[red]Please provide a job description with --jd or use --sample-jd.[/red]")
        raise typer.Exit(1)

    try:
        resume_text = parse_resume(resume)
        jd_text = SAMPLE_JD if sample_jd else load_jd_file(jd)
        validate_inputs(resume_text, jd_text)
    except FileNotFoundError as e:
        console.print(f"[red]File not found: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if resume.suffix.lower() in (".pdf", ".docx") and file_name is None:
        file_name = resume.name

    if verbose:
        console.print(f"[dim]Resume: {len(resume_text)} chars[/dim]")
        console.print(f"[dim]Job description: {len(jd_text)} chars[/dim]")

    result = analyze(resume_text, jd_text, file_name, config=config)

    if summary:
        console.print(build_summary(result), markup=False)
    else:
        _print_result(result)

    if json_out:
        save_json_report(result, json_out, indent=config.report.json_indent)
        console.print(f"[green]JSON saved: {json_out}[/green]")
    if html_out:
        save_html(render_html_report(result), html_out)
        console.print(f"[green]HTML saved: {html_out}[/green]")
    if pdf_out:
        save_pdf(render_pdf_report(result), pdf_out)
        console.print(f"[green]PDF saved: {pdf_out}[/green]")


@app.command()
def extract(
    resume: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output text file"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Extract resume text and save it as plain text."""
    config = _load_config_or_exit(config_path)
    try:
        text = parse_resume(resume)
    except FileNotFoundError as e:
        console.print(f"[red]File not found: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not text:
        console.print(
            "[yellow]No text found. If it's a scanned PDF, paste the text into a .txt file instead.[/yellow]"
        )

    if output is None:
        output = config.report.resolved_output_dir / DEFAULT_EXTRACTED_NAME
    save_extracted_text(text, output)
    console.print(f"[green]Extracted text saved: {output}[/green]")


@app.command("sample-jd")
def sample_jd_command() -> None:
    """Print the bundled sample job description."""
    console.print(SAMPLE_JD, markup=False)


if __name__ == "__main__":
    app()
