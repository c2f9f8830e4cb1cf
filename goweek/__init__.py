"""goweek: generate your weekly report with one click."""

__version__ = "0.1.0"
