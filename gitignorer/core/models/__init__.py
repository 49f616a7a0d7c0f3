"""
Domain models — Pydantic types shared by the core services.

    from gitignorer.core.models import GeneratedFile
"""

from gitignorer.core.models.template import GeneratedFile

__all__ = [
    "GeneratedFile",
]
