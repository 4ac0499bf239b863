"""
Compiling Context

Responsibilities:
- Parses YAML résumé text into the typed résumé domain model
- Selects the theme and derives the style sheet
- Emphasizes ATS keywords in free text
- Assembles the document-content tree (header, statement, sections)

Owns: YAML -> document definition compilation
Never: Paginates, measures fonts, or renders PDF bytes
"""

from yamlresume.contexts.compiling.compiler import (
    CompilationResult,
    build_document,
    compile_resume,
    compile_resume_file,
    parse_resume_yaml,
)
from yamlresume.contexts.compiling.document_nodes import DocumentModel
from yamlresume.contexts.compiling.exceptions import (
    ParseError,
    ResumeCompilationError,
    StructuralError,
)
from yamlresume.contexts.compiling.resume_data_structure import ResumeData

__all__ = [
    # Pure compiler
    "compile_resume",
    "parse_resume_yaml",
    "build_document",
    # File orchestration
    "compile_resume_file",
    "CompilationResult",
    # Data structures
    "DocumentModel",
    "ResumeData",
    # Errors
    "ResumeCompilationError",
    "ParseError",
    "StructuralError",
]
