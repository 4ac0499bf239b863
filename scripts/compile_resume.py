#!/usr/bin/env python3
"""
YAML Résumé Compilation CLI

Compiles YAML résumés into document definitions (JSON) for the PDF renderer.

Commands:
    compile  - Compile a YAML résumé to a JSON document definition
    template - Print or write the sample YAML résumé
    themes   - List available themes and their palettes

Examples:\n

    compile_resume.py compile resume.yaml                    # Write outs/documents/resume.json

    compile_resume.py compile resume.yaml -o doc.json -a     # All sections, custom output

    compile_resume.py template -o resume.yaml                # Start from the sample résumé
"""

import os
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from yamlresume.contexts.compiling import compile_resume_file
from yamlresume.contexts.compiling.defaults import SAMPLE_RESUME_YAML
from yamlresume.contexts.compiling.themes import DEFAULT_THEME, THEMES

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Compile YAML résumés into PDF document definitions",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("compile")
def compile_command(
    yaml_path: Annotated[
        Path,
        typer.Argument(help="Path to the YAML résumé"),
    ],
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output JSON path (default: OUTPUT_PATH/<name>.json)",
        ),
    ] = None,
    all_sections: Annotated[
        bool,
        typer.Option(
            "--all-sections",
            "-a",
            help="Also render skills, languages, awards, certifications, publications and references",
        ),
    ] = False,
):
    """
    Compile a YAML résumé to a JSON document definition.

    Examples:\n

        $ compile_resume.py compile resume.yaml                 # Default output location

        $ compile_resume.py compile resume.yaml -o out.json     # Custom output
    """
    typer.secho(f"\nCompiling: {yaml_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        result = compile_resume_file(
            yaml_path,
            output_path=output_path,
            include_extended_sections=all_sections,
        )
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Compilation succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Theme: {result.theme}")
        typer.echo(f"  Sections: {result.num_sections}")
        typer.echo(f"  Document: {display_path(result.output_path)}")
    else:
        typer.secho("✗ Compilation failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'compile.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("template")
def template_command(
    output_path: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the template here instead of stdout"),
    ] = None,
):
    """
    Print the sample YAML résumé, or write it to a file.

    Example:\n

        $ compile_resume.py template -o resume.yaml
    """
    if output_path is None:
        typer.echo(SAMPLE_RESUME_YAML, nl=False)
        return

    if output_path.exists():
        typer.secho(f"Error: {output_path} already exists\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output_path.write_text(SAMPLE_RESUME_YAML, encoding="utf-8")
    typer.secho(f"✓ Template written to {display_path(output_path)}", fg=typer.colors.GREEN)


@app.command("themes")
def themes_command():
    """List available themes and their colors."""
    for name, palette in THEMES.items():
        label = f"{name} (default)" if name == DEFAULT_THEME else name
        typer.secho(label, bold=True)
        for role, color in asdict(palette).items():
            typer.echo(f"  {role: <8} {color}")


if __name__ == "__main__":
    app()
