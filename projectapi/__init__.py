"""Project Records API — CRUD over a flat JSON document."""

__version__ = "0.1.0"
