from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised when a scale, shape or surface is constructed with invalid settings."""


class PathBuildError(RuntimeError):
    """Raised when a path cannot be built from the recorded commands."""
