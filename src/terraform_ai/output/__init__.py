"""Artifact persistence."""

from .writer import write_artifact

__all__ = ["write_artifact"]
