"""Text rendering of engine state and statistics."""

from .report_generator import monitor, report, generate_report

__all__ = ["monitor", "report", "generate_report"]
