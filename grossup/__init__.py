"""GrossUp — solve for the gross salary behind a take-home pay target."""

__version__ = "0.1.0"
