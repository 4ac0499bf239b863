"""
Shared utilities for yamlresume.

Common functionality used across contexts:
- Absent-safe formatting helpers
- Logger configuration
- Timestamps
"""

from yamlresume.utils.formatting import format_date_range, has_items, join_present, safe
from yamlresume.utils.timestamp import now

__all__ = ["format_date_range", "has_items", "join_present", "safe", "now"]
