"""
Generate use case — detect, render and publish a .gitignore.

Ties together the detection service, the .gitignore generator and the
ignore file persistence. Errors are captured on the result, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gitignorer.core.models.template import GeneratedFile
from gitignorer.core.persistence.ignore_file import PublishError, PublishResult, publish
from gitignorer.core.services.detection import DetectionResult, detect_project_types
from gitignorer.core.services.generators.gitignore import generate_gitignore, selected_blocks

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    project_root: Path | None = None
    detection: DetectionResult | None = None
    file: GeneratedFile | None = None
    publish: PublishResult | None = None
    dry_run: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
        result["project_root"] = str(self.project_root) if self.project_root else None
        result["dry_run"] = self.dry_run

        if self.detection:
            result["detection"] = self.detection.to_dict()
            result["blocks"] = selected_blocks(self.detection.tags)
        if self.file:
            result["file"] = self.file.model_dump()
        if self.publish:
            result["publish"] = self.publish.to_dict()

        return result


def scan_project(project_root: Path) -> tuple[DetectionResult | None, str | None]:
    """Run detection, returning ``(detection, error)``."""
    if not project_root.is_dir():
        return None, f"Not a directory: {project_root}"
    return detect_project_types(project_root), None


def run_generate(
    project_root: Path | None = None,
    output: Path | None = None,
    dry_run: bool = False,
) -> GenerateResult:
    """Detect ecosystems under ``project_root`` and write a .gitignore.

    Args:
        project_root: Directory to scan (default: cwd).
        output: Target file. Relative paths resolve against the root.
            Defaults to ``<root>/.gitignore``.
        dry_run: Generate but don't write anything.

    Returns:
        GenerateResult with the detection, the generated file and, unless
        dry-running, the publish outcome.
    """
    root = (project_root or Path.cwd()).resolve()
    result = GenerateResult(project_root=root, dry_run=dry_run)

    detection, error = scan_project(root)
    if error:
        result.error = error
        return result
    result.detection = detection
    assert detection is not None

    generated = generate_gitignore(detection.tags)
    result.file = generated
    logger.info(generated.reason)

    if dry_run:
        return result

    target = output if output is not None else Path(generated.path)
    if not target.is_absolute():
        target = root / target

    try:
        result.publish = publish(generated.content, target)
    except PublishError as e:
        logger.info("Publish failed: %s", e)
        result.error = str(e)

    return result
