"""
Compiling context logger.

Provides logging interface for the compiling context with automatic [compile] prefix.
All compiling modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from yamlresume.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compile]"


def setup_compiling_logger(log_dir: Path, console_level: str = "INFO") -> Path:
    """
    Setup logger for the compiling context.

    Args:
        log_dir: Directory for this compilation session
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compile",
        log_dir=log_dir,
        extra_provenance={"Phase": "compile"},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [compile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compile] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compile] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compile] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_compilation_start(resume_name: str, input_path: Path, log_file: Path) -> None:
    """Log start of compilation with context."""
    _log_info(f"Starting to compile {resume_name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_compilation_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log compilation result.

    Args:
        resume_name: Resume identifier (input file stem)
        result: CompilationResult from compile_resume_file()
        elapsed_time: Time taken in seconds
    """
    if result.success:
        _log_success(f"{resume_name}: compile succeeded ({elapsed_time:.2f}s)")
        _log_info(f"  Theme: {result.theme}, sections: {result.num_sections}")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to compile {resume_name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
