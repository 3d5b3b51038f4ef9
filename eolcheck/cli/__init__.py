"""Command line interface for eol-check."""

from .main import Config, build_config, cli

__all__ = ["Config", "build_config", "cli"]
