"""
Utility helpers for SeedFuzz (report writing).
"""

from .report import (
    escape_input,
    write_accepted_inputs,
    write_campaign_summary,
    write_crash_report,
    write_json_report,
)

__all__ = [
    "escape_input",
    "write_accepted_inputs",
    "write_campaign_summary",
    "write_crash_report",
    "write_json_report",
]
