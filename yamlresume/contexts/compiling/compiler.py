"""
YAML Résumé Compiler

Parses YAML résumé text and assembles the document definition consumed by the
PDF renderer.

compile_resume() is the pure core: no I/O, no logging, a fresh tree per call,
and either a complete DocumentModel or an exception. compile_resume_file()
wraps it with file I/O, logging, and a CompilationResult for scripts.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from yamlresume.contexts.compiling import builders
from yamlresume.contexts.compiling.defaults import (
    CORE_SECTION_TITLES,
    EXTENDED_SECTION_TITLES,
    PAGE_MARGINS,
    PAGE_SIZE,
)
from yamlresume.contexts.compiling.document_nodes import ContentNode, DocumentModel
from yamlresume.contexts.compiling.exceptions import (
    ParseError,
    ResumeCompilationError,
    StructuralError,
)
from yamlresume.contexts.compiling.highlighter import highlight
from yamlresume.contexts.compiling.logger import (
    _log_debug,
    _log_warning,
    log_compilation_result,
    log_compilation_start,
    setup_compiling_logger,
)
from yamlresume.contexts.compiling.resume_data_structure import ResumeData
from yamlresume.contexts.compiling.themes import THEMES, create_styles, resolve_theme_name
from yamlresume.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/documents"))


def parse_resume_yaml(yaml_text: str) -> ResumeData:
    """
    Parse YAML text into the résumé domain model.

    Args:
        yaml_text: Raw YAML whose root holds a `resume` mapping

    Returns:
        ResumeData

    Raises:
        ParseError: If the text is not valid YAML
        StructuralError: If `resume`, `resume.info`, `resume.sections` or a
            required entry field is missing
    """
    try:
        document = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        message = getattr(e, "problem", None) or str(e)
        if mark is not None:
            raise ParseError(message, line=mark.line + 1, column=mark.column + 1) from e
        raise ParseError(message) from e

    if not isinstance(document, dict):
        raise StructuralError("resume", "is required but the document has no top-level mapping")

    return ResumeData.from_dict(document.get("resume"), "resume")


def build_document(resume: ResumeData, include_extended_sections: bool = False) -> DocumentModel:
    """
    Assemble the document definition for an already parsed résumé.

    Content order: header, personal statement (if any), then Experience,
    Education and Projects. With include_extended_sections, Skills, Languages,
    Awards, Certifications, Publications and References follow. Sections
    without entries are omitted.
    """
    theme_name = resolve_theme_name(resume.theme)
    keywords = resume.ats_keywords
    divider_color = THEMES[theme_name].divider
    sections = resume.sections

    content: List[ContentNode] = [builders.header(resume.info)]

    if resume.personal_statement:
        content.append(highlight(resume.personal_statement, keywords, style="body"))

    # Item lists in the same order as CORE_SECTION_TITLES / EXTENDED_SECTION_TITLES
    core_items = (
        [builders.experience_item(entry, keywords) for entry in sections.experiences],
        [builders.education_item(entry, keywords) for entry in sections.education],
        [builders.project_item(entry, keywords) for entry in sections.projects],
    )
    for title, items in zip(CORE_SECTION_TITLES, core_items):
        content += builders.section(title, items, divider_color)

    if include_extended_sections:
        extended_items = (
            [builders.skill_item(entry, keywords) for entry in sections.skills],
            [builders.language_item(entry) for entry in sections.languages],
            [builders.award_item(entry, keywords) for entry in sections.awards],
            [builders.certification_item(entry, keywords) for entry in sections.certifications],
            [builders.publication_item(entry, keywords) for entry in sections.publications],
            [builders.reference_item(entry) for entry in sections.references],
        )
        for title, items in zip(EXTENDED_SECTION_TITLES, extended_items):
            content += builders.section(title, items, divider_color)

    return DocumentModel(
        styles=create_styles(theme_name),
        content=tuple(content),
        page_size=PAGE_SIZE,
        page_margins=PAGE_MARGINS,
    )


def compile_resume(yaml_text: str, include_extended_sections: bool = False) -> DocumentModel:
    """
    Compile YAML résumé text into a document definition.

    Args:
        yaml_text: Raw YAML text
        include_extended_sections: Also render skills, languages, awards,
            certifications, publications and references

    Returns:
        DocumentModel ready for the renderer

    Raises:
        ParseError: If the YAML syntax is invalid
        StructuralError: If required résumé structure is missing

    Example:
        >>> from yamlresume.contexts.compiling.defaults import SAMPLE_RESUME_YAML
        >>> compile_resume(SAMPLE_RESUME_YAML).page_size
        'A4'
    """
    resume = parse_resume_yaml(yaml_text)
    return build_document(resume, include_extended_sections=include_extended_sections)


@dataclass
class CompilationResult:
    """Result from compile_resume_file() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None
    theme: Optional[str] = None
    num_sections: Optional[int] = None


def compile_resume_file(
    yaml_path: Path,
    output_path: Optional[Path] = None,
    include_extended_sections: bool = False,
    log_dir: Optional[Path] = None,
) -> CompilationResult:
    """
    Compile a YAML résumé file and write the document definition as JSON.

    Invalid résumé input is reported through the returned result instead of
    raised, so scripts can print one error message and exit.

    Args:
        yaml_path: Path to the YAML résumé
        output_path: JSON output path (defaults to OUTPUT_PATH/{stem}.json)
        include_extended_sections: Passed through to compile_resume()
        log_dir: Logging session directory (defaults to LOGS_PATH/compile_{timestamp})

    Returns:
        CompilationResult with success status, paths, and timing

    Raises:
        FileNotFoundError: If yaml_path does not exist
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML file not found: {yaml_path}")

    start_time = time.time()
    resume_name = yaml_path.stem

    if log_dir is None:
        log_dir = LOGS_PATH / f"compile_{now()}"
    log_file = setup_compiling_logger(log_dir)
    log_compilation_start(resume_name, yaml_path, log_file)

    if output_path is None:
        output_path = OUTPUT_PATH / f"{resume_name}.json"
    output_path = Path(output_path)

    try:
        try:
            yaml_text = yaml_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"not valid UTF-8: {e.reason} at byte {e.start}") from e
        resume = parse_resume_yaml(yaml_text)
        document = build_document(resume, include_extended_sections=include_extended_sections)
    except ResumeCompilationError as e:
        result = CompilationResult(
            success=False,
            input_path=yaml_path,
            error=str(e),
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )
        log_compilation_result(resume_name, result, result.time_s)
        return result

    theme_name = resolve_theme_name(resume.theme)
    if resume.theme is not None and resume.theme != theme_name:
        _log_warning(f"Unknown theme '{resume.theme}', using '{theme_name}'")
    _log_debug(f"Resolved theme '{theme_name}' (requested: {resume.theme})")
    _log_debug(f"ATS keywords: {resume.ats_keywords}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document.to_json() + "\n", encoding="utf-8")

    result = CompilationResult(
        success=True,
        input_path=yaml_path,
        output_path=output_path,
        time_s=time.time() - start_time,
        log_dir=log_dir,
        theme=resolve_theme_name(resume.theme),
        num_sections=len(document.content) - 1 - (1 if resume.personal_statement else 0),
    )
    log_compilation_result(resume_name, result, result.time_s)
    return result
