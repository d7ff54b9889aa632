"""Input/output utilities."""

from .report import (
    CONFIG_SUMMARY_GROUPS,
    format_config_summary,
    format_state_line,
    print_config_summary,
    print_state_line,
)

__all__ = [
    "CONFIG_SUMMARY_GROUPS",
    "format_config_summary",
    "format_state_line",
    "print_config_summary",
    "print_state_line",
]
