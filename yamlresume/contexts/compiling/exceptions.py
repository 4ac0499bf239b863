"""Exceptions raised while compiling a YAML résumé."""

from typing import Optional


class ResumeCompilationError(ValueError):
    """
    Base class for invalid résumé input.

    Callers that only need to show "invalid input" catch this single type and
    display str(error).
    """


class ParseError(ResumeCompilationError):
    """
    Exception raised when the YAML text itself cannot be parsed.

    Attributes:
        message: Description from the YAML parser
        line: 1-based line of the problem, if the parser reported one
        column: 1-based column of the problem, if the parser reported one
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column

        if line is not None and column is not None:
            super().__init__(f"Invalid YAML at line {line}, column {column}: {message}")
        else:
            super().__init__(f"Invalid YAML: {message}")


class StructuralError(ResumeCompilationError):
    """
    Exception raised when the YAML parses but required résumé structure is missing.

    Attributes:
        field_path: Dotted path of the missing or malformed field
            (e.g. "resume.sections.experiences[0].company")
        reason: What was wrong with it
    """

    def __init__(self, field_path: str, reason: str = "is required but missing"):
        self.field_path = field_path
        self.reason = reason
        super().__init__(f"Invalid résumé structure: '{field_path}' {reason}")
