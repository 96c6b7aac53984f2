"""Architecture enforcement tests for the adapter package layering.

This module provides lightweight, repository-local invariants to ensure that
the adapter core remains decoupled from outer layers (the CLI/service layer)
and from the concrete provider packages it dispatches to by name.

Rules validated here:
1) ``chatwire_providers.base`` and ``chatwire_providers.config`` must not
   import ``chatwire_providers.service`` or a concrete provider package.
   - The factory reaches provider modules through import paths held as data.
2) Only the keys repository may import ``subprocess``.
   - Adapters build transport arguments; they never launch the transport.

These tests are intentionally static-file scans to avoid import-time side
effects, and they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

PACKAGE = "chatwire_providers"
PROVIDER_PACKAGES = ("perplexity", "openai", "anthropic", "gemini", "groq", "mistral", "ollama")


def _package_root() -> Path:
    return Path(__file__).resolve().parent.parent / PACKAGE


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under ``root``, skipping caches and tests."""
    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.relative_to(root).parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _forbidden_inner_imports() -> List[str]:
    snippets = [f"from {PACKAGE}.service", f"import {PACKAGE}.service", "from ..service", "from ...service"]
    for name in PROVIDER_PACKAGES:
        snippets.extend(
            [
                f"from {PACKAGE}.{name} ",
                f"from {PACKAGE}.{name}.",
                f"import {PACKAGE}.{name}",
                f"from ..{name} ",
                f"from ..{name}.",
                f"from ...{name} ",
                f"from ...{name}.",
            ]
        )
    return snippets


def test_core_does_not_import_outer_layers() -> None:
    """Scan ``base`` and ``config`` for imports of service or provider packages."""
    root = _package_root()
    if not root.is_dir():
        pytest.skip(f"{PACKAGE} directory not found; skipping boundary check")

    forbidden = _forbidden_inner_imports()
    offenders: List[str] = []
    for inner in ("base", "config"):
        for py in _iter_python_files(root / inner):
            src = _read_text(py)
            offenders.extend(f"{py}: contains '{m}'" for m in forbidden if m in src)

    if offenders:
        pytest.fail("The adapter core must not import outer layers.\n" + "\n".join(offenders))


def test_only_keys_repository_spawns_processes() -> None:
    """Adapters never launch the transport; only credential commands run."""
    root = _package_root()
    if not root.is_dir():
        pytest.skip(f"{PACKAGE} directory not found; skipping process check")

    allowed = root / "base" / "repositories" / "keys.py"
    offenders = [
        str(py)
        for py in _iter_python_files(root)
        if py != allowed and ("import subprocess" in _read_text(py) or "from subprocess" in _read_text(py))
    ]
    if offenders:
        pytest.fail("Unexpected subprocess usage:\n" + "\n".join(offenders))
