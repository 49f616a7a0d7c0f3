"""
.gitignore generator — produce a .gitignore from detected ecosystem tags.

The output is a common block, one block per detected ecosystem in a
fixed canonical order, then editor and OS blocks that are always present.
Blocks are joined with one blank line and otherwise left untouched, so
the same tag set always yields the same bytes.
"""

from __future__ import annotations

from collections.abc import Iterable

from gitignorer.core.models.template import GeneratedFile
from gitignorer.core.services.detection import (
    TAG_FLUTTER,
    TAG_GO,
    TAG_JAVA,
    TAG_NODE,
    TAG_PHP,
    TAG_PYTHON,
    TAG_RUST,
    TAG_SWIFT,
    TAG_XCODE,
)

IGNORE_FILE_NAME = ".gitignore"

BLOCK_SEPARATOR = "\n\n"


_COMMON = """\
# =========================================
# COMMON
# =========================================
.DS_Store
Thumbs.db
*.log
*.tmp
*.swp
*.bak
*.temp

# ENV files
.env
.env.*
*.secret

# Git
.gitmodules
.svn/

# System
.idea/
.vscode/
*.iml
"""

_GO = """\
# =========================================
# GO
# =========================================
bin/
vendor/
*.exe
*.exe~
*.dll
*.so
*.dylib
*.test
go.sum
"""

_PYTHON = """\
# =========================================
# PYTHON
# =========================================
__pycache__/
*.py[cod]
*.pyo
*.pyd
*.pdb
*.egg
*.egg-info/
dist/
build/
pip-wheel-metadata/
*.sqlite3
*.db
.env/
.venv/
"""

_NODE = """\
# =========================================
# NODE / JAVASCRIPT / TYPESCRIPT
# =========================================
node_modules/
npm-debug.log*
yarn-debug.log*
yarn-error.log*
dist/
build/
.cache/
.next/
out/
*.tsbuildinfo
"""

_RUST = """\
# =========================================
# RUST
# =========================================
target/
Cargo.lock
*.rs.bk
"""

_JAVA = """\
# =========================================
# JAVA / KOTLIN / ANDROID
# =========================================
target/
bin/
build/
.gradle/
.gradle-cache/
*.class
*.jar
*.war
*.ear
*.iml
local.properties
"""

_PHP = """\
# =========================================
# PHP / LARAVEL
# =========================================
vendor/
storage/
bootstrap/cache/
*.cache
"""

_FLUTTER = """\
# =========================================
# FLUTTER / DART
# =========================================
.build/
.dart_tool/
.packages
.pub-cache/
pubspec.lock
ios/Pods/
android/.gradle/
android/app/build/
"""

_SWIFT_XCODE = """\
# =========================================
# SWIFT / XCODE / IOS
# =========================================
build/
DerivedData/
*.xcworkspace/xcuserdata/
*.xcodeproj/xcuserdata/
*.xcuserstate
*.swiftpm
.swiftpm/
Carthage/
Pods/
"""

_VSCODE = """\
# =========================================
# VS CODE
# =========================================
.vscode/*
!.vscode/settings.json
!.vscode/tasks.json
!.vscode/launch.json
!.vscode/extensions.json
"""

_JETBRAINS = """\
# =========================================
# JETBRAINS
# =========================================
.idea/
*.iml
out/
"""

_MACOS = """\
# =========================================
# macOS
# =========================================
.DS_Store
.AppleDouble
.LSOverride
"""


# Block key → text
BLOCKS: dict[str, str] = {
    "common": _COMMON,
    "go": _GO,
    "python": _PYTHON,
    "node": _NODE,
    "rust": _RUST,
    "java": _JAVA,
    "php": _PHP,
    "flutter": _FLUTTER,
    "swift-xcode": _SWIFT_XCODE,
    "vscode": _VSCODE,
    "jetbrains": _JETBRAINS,
    "macos": _MACOS,
}

# Conditional blocks in emission order: (block key, tags that trigger it)
_CONDITIONAL: tuple[tuple[str, frozenset[str]], ...] = (
    ("go", frozenset({TAG_GO})),
    ("python", frozenset({TAG_PYTHON})),
    ("node", frozenset({TAG_NODE})),
    ("rust", frozenset({TAG_RUST})),
    ("java", frozenset({TAG_JAVA})),
    ("php", frozenset({TAG_PHP})),
    ("flutter", frozenset({TAG_FLUTTER})),
    ("swift-xcode", frozenset({TAG_SWIFT, TAG_XCODE})),
)

LEADING_BLOCKS = ("common",)
TRAILING_BLOCKS = ("vscode", "jetbrains", "macos")


def selected_blocks(tags: Iterable[str]) -> list[str]:
    """Return the ordered block keys for a tag set.

    Unknown tags are ignored. Order follows the canonical sequence, never
    the order in which tags were detected.
    """
    present = frozenset(tags)
    keys = list(LEADING_BLOCKS)
    for key, triggers in _CONDITIONAL:
        if present & triggers:
            keys.append(key)
    keys.extend(TRAILING_BLOCKS)
    return keys


def render_gitignore(tags: Iterable[str]) -> str:
    """Concatenate the blocks for ``tags`` into the final .gitignore text."""
    return BLOCK_SEPARATOR.join(BLOCKS[key] for key in selected_blocks(tags))


def generate_gitignore(tags: Iterable[str]) -> GeneratedFile:
    """Generate a .gitignore for the detected tags.

    Args:
        tags: Detected ecosystem tags.

    Returns:
        GeneratedFile for .gitignore.
    """
    tag_list = sorted(frozenset(tags))
    return GeneratedFile(
        path=IGNORE_FILE_NAME,
        content=render_gitignore(tag_list),
        overwrite=True,
        reason=f"Generated .gitignore for: {', '.join(tag_list) or 'no detected ecosystems'}",
    )
