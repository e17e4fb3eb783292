"""
SHARPIE Reporting

Plain-text design report.
"""

from .summary import DesignReport, render_report

__all__ = ["DesignReport", "render_report"]
