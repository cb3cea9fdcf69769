"""Filesystem utility helpers."""

from __future__ import annotations
import os
from typing import Iterable, Iterator

from config import settings


def _norm(path: str) -> str:
    return os.path.normpath(os.path.abspath(path))


def is_excluded(path: str, exclude_paths: Iterable[str]) -> bool:
    """True when ``path`` is one of ``exclude_paths`` or lies beneath one."""
    target = _norm(path)
    for ex in exclude_paths:
        if not ex:
            continue
        base = _norm(ex)
        if target == base or target.startswith(base.rstrip(os.sep) + os.sep):
            return True
    return False


def iter_files(root: str, suffix: str, exclude_paths: Iterable[str] = ()) -> Iterator[str]:
    excludes = [p for p in exclude_paths if p]
    for base, dirs, files in os.walk(root):
        # prune in place so excluded trees are never descended into
        dirs[:] = sorted(d for d in dirs if not is_excluded(os.path.join(base, d), excludes))
        for f in sorted(files):
            if not f.endswith(suffix):
                continue
            full = os.path.join(base, f)
            if is_excluded(full, excludes):
                continue
            yield full.replace(os.sep, "/")


def find_strings_files(root: str, exclude_paths: Iterable[str] = ()) -> list[str]:
    return list(iter_files(root, settings.STRINGS_SUFFIX, exclude_paths))


def file_exists(path: str) -> bool:
    return os.path.isfile(path)


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()


def path_components(path: str) -> list[str]:
    """Split a path into components, keeping a leading root marker."""
    norm = os.path.normpath(path)
    parts: list[str] = []
    head = norm
    while True:
        head, tail = os.path.split(head)
        if tail:
            parts.append(tail)
            continue
        if head:
            parts.append(head)
        break
    parts.reverse()
    return parts


def common_path_components(first: str, second: str) -> list[str]:
    common: list[str] = []
    for a, b in zip(path_components(first), path_components(second)):
        if a != b:
            break
        common.append(a)
    return common
