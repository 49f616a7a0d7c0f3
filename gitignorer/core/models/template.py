"""
Generated file model — produced by the generators, consumed by persistence.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether an existing file may be replaced (after backup).
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""
