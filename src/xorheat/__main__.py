"""Allow ``python -m xorheat``."""

from .cli import app

app()
