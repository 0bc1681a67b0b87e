"""HTTP front end for the line finder (Flask)."""
from .web import app

__all__ = ["app"]
