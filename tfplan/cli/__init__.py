"""
CLI: compone configuración, core y renderers.
"""

from tfplan.cli.app import app, main

__all__ = ["app", "main"]
