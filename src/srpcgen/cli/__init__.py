"""Command line interface for srpcgen."""

from srpcgen.cli.app import app

__all__ = ["app"]
