"""Input discovery: expand files and directories into a list of SVG paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def has_extension(path: Path, extension: str) -> bool:
    """Case-insensitive suffix check; ``extension`` may have a leading dot."""
    return path.suffix.lower() == "." + extension.lstrip(".").lower()


def crawl(paths: Iterable[Path], extension: str = "svg") -> list[Path]:
    """Return the unique files under ``paths`` with the given extension.

    Directories are walked recursively in sorted order. Files are matched by
    suffix, case-insensitively, and de-duplicated by resolved location.
    Missing paths are skipped.
    """
    seen: set[Path] = set()
    out: list[Path] = []

    stack = [Path(p) for p in reversed(list(paths))]
    while stack:
        path = stack.pop()
        if path.is_dir():
            real = path.resolve()
            if real in seen:
                continue
            seen.add(real)
            try:
                entries = sorted(path.iterdir())
            except OSError as e:
                logger.warning("Unable to read directory %s: %s", path, e)
                continue
            stack.extend(reversed(entries))
        elif path.is_file() and has_extension(path, extension):
            resolved = path.resolve()
            if resolved not in seen:
                seen.add(resolved)
                out.append(resolved)
        elif not path.exists():
            logger.debug("Skipping missing path %s", path)

    return out
