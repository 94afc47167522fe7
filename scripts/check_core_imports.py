#!/usr/bin/env python3
"""
Fail if core imports the facade layer.
Checks all Python files under src/easypanel_sdk/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE = "easypanel_sdk"
CORE_DIR = REPO_ROOT / "src" / PACKAGE / "core"

FORBIDDEN_PREFIXES = (
    "easypanel_sdk.resources",
    "easypanel_sdk.easypanel",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def resolve_relative(path: Path, node: ast.ImportFrom) -> str:
    """Turn `from ..resources import x` into an absolute module name."""
    rel = path.relative_to(REPO_ROOT / "src").with_suffix("")
    parts = list(rel.parts)[:-1]  # containing package, also for __init__
    base = parts[: len(parts) - (node.level - 1)] if node.level > 1 else parts
    if node.module:
        base = base + node.module.split(".")
    return ".".join(base)


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = resolve_relative(path, node) if node.level else node.module or ""
            # `from easypanel_sdk import resources` names the submodule in the alias
            candidates = [mod] + [f"{mod}.{alias.name}" for alias in node.names]
            if any(is_forbidden(c) for c in candidates):
                errors.append(f"{path}: forbidden import '{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
