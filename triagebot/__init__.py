"""Command parsing, mention detection and configuration for a triage bot."""

__version__ = "0.1.0"