"""
sportfit.reporting — terminal formatting for CLI commands.

File output lives in ``sportfit.recommendations.reporter``; this package only
turns in-memory results into text.

Modules:
  formatters — ASCII formatters for the catalogue, metrics, recommendations
               and tracking metrics.
"""
