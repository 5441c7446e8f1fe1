"""Presentation layer: command-line entry points and reports."""

from .report import ReportWriter

__all__ = ["ReportWriter"]
