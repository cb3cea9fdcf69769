"""Decompose strings file paths into (table root, language, filename).

A recognised path has the shape ``<table_root>/<lang>.lproj/<name>.strings``.
Matching is anchored on the final two segments, so a bundle nested inside
another language directory resolves to the innermost ``.lproj`` directory.
"""

from __future__ import annotations

from typing import Optional

from config import settings
from domain.models import StringsPath

__all__ = ["decompose_path", "table_identity"]


def _split_segments(path: str) -> list[str]:
    return path.replace("\\", "/").split("/")


def decompose_path(path: str) -> Optional[StringsPath]:
    """Return the decomposition of ``path`` or ``None`` if it is not a localized strings file."""
    segments = _split_segments(path)
    if len(segments) < 3:
        return None
    filename = segments[-1]
    lang_dir = segments[-2]
    root_segments = segments[:-2]

    if len(filename) <= len(settings.STRINGS_SUFFIX) or not filename.endswith(settings.STRINGS_SUFFIX):
        return None
    if not lang_dir.endswith(settings.LANG_DIR_SUFFIX):
        return None
    language = lang_dir[: -len(settings.LANG_DIR_SUFFIX)]
    if not language:
        return None
    table_root = "/".join(root_segments)
    if not table_root.strip("/"):
        return None
    return StringsPath(table_root=table_root, language=language, filename=filename)


def table_identity(path: str) -> Optional[str]:
    decomposed = decompose_path(path)
    return decomposed.table_identity if decomposed else None
