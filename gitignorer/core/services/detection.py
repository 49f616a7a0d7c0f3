"""
Detection service — infer project ecosystems from marker files.

Walks a project tree and collects ecosystem tags based on file and
directory names alone. Contents are never read.

Pure logic — read-only filesystem access, no persistence.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


# ── Tag vocabulary ──────────────────────────────────────────────

TAG_GO = "go"
TAG_NODE = "node"
TAG_PYTHON = "python"
TAG_RUST = "rust"
TAG_PHP = "php"
TAG_FLUTTER = "flutter"
TAG_JAVA = "java"
TAG_SWIFT = "swift"
TAG_XCODE = "xcode"

# Lower-cased base name → tag
MARKER_FILES: dict[str, str] = {
    "go.mod": TAG_GO,
    "package.json": TAG_NODE,
    "requirements.txt": TAG_PYTHON,
    "pyproject.toml": TAG_PYTHON,
    "cargo.toml": TAG_RUST,
    "composer.json": TAG_PHP,
    "pubspec.yaml": TAG_FLUTTER,
    "build.gradle": TAG_JAVA,
    "pom.xml": TAG_JAVA,
    "project.swift": TAG_SWIFT,
    "package.swift": TAG_SWIFT,
}

# Lower-cased name suffix → tag (Xcode bundles are directories)
MARKER_SUFFIXES: dict[str, str] = {
    ".xcodeproj": TAG_XCODE,
    ".xcworkspace": TAG_XCODE,
}


@dataclass
class DetectionResult:
    """Result of scanning a project tree for marker files."""

    root: Path
    markers: dict[str, list[str]] = field(default_factory=dict)  # tag → relative paths
    skipped: list[str] = field(default_factory=list)  # unreadable paths

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self.markers)

    def add(self, tag: str, rel_path: str) -> None:
        self.markers.setdefault(tag, []).append(rel_path)

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "tags": sorted(self.tags),
            "markers": {tag: sorted(paths) for tag, paths in sorted(self.markers.items())},
            "skipped": self.skipped,
        }


def match_marker(name: str) -> list[str]:
    """Return the tags a single entry name provides (possibly none).

    The exact-name lookup and the suffix check are independent, so one
    name can in principle produce both.
    """
    lowered = name.lower()
    tags: list[str] = []

    tag = MARKER_FILES.get(lowered)
    if tag:
        tags.append(tag)

    for suffix, suffix_tag in MARKER_SUFFIXES.items():
        if lowered.endswith(suffix):
            tags.append(suffix_tag)
            break

    return tags


def detect_project_types(root: Path) -> DetectionResult:
    """Walk ``root`` recursively and collect ecosystem tags.

    Every entry below the root is inspected, directories included, and
    the walk never stops early. Entries that cannot be listed are
    recorded in ``skipped`` and the walk continues. Symlinks are matched
    by name but not followed.
    """
    result = DetectionResult(root=root)

    def _skip(err: OSError) -> None:
        path = err.filename or "?"
        logger.debug("Skipping unreadable path %s: %s", path, err)
        result.skipped.append(str(path))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_skip, followlinks=False):
        base = Path(dirpath)
        for name in (*dirnames, *filenames):
            for tag in match_marker(name):
                rel = (base / name).relative_to(root).as_posix()
                logger.debug("Marker %s → %s", rel, tag)
                result.add(tag, rel)

    logger.info(
        "Detected %d tag(s) under %s: %s",
        len(result.markers), root, ", ".join(sorted(result.tags)) or "none",
    )
    return result


def detect(root: Path) -> frozenset[str]:
    """Return the set of ecosystem tags found under ``root``."""
    return detect_project_types(root).tags
