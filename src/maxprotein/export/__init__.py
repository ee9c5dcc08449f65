"""Export selection results in various formats."""

from maxprotein.export.formatters import format_benchmark, format_result

__all__ = ["format_result", "format_benchmark"]
