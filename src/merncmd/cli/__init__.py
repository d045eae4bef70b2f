"""Command-line interface for mern-cmd."""

from merncmd.cli.app import app

__all__ = ["app"]
