"""
HTTP API
========

FastAPI boundary over the sizing core.
"""

from .app import create_app

__all__ = ["create_app"]
