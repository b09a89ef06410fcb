"""Command line interface for g13profile."""

from .main import cli

__all__ = ["cli"]
