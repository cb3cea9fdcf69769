"""Reconcile every strings table language against the base language.

Each (table, language) pair yields one ``TableLanguageResult``; run totals are
folded into an immutable ``RunStatistics`` by the caller-facing ``reconcile``.
Existence and parsing are separate steps so that an absent file and an
unreadable file are told apart (both count as a missing file).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from core import filesystem
from domain.models import (
    DiffResult,
    FileState,
    ParsedStrings,
    RunStatistics,
    StringsPath,
    TableLanguageResult,
)
from parsing.errors import UnreadableStringsFileError
from parsing.strings_parser import load_strings_file
from services.table_registry import TableRegistry

__all__ = [
    "StringsLoader",
    "DiskStringsLoader",
    "diff_entries",
    "reconcile_table",
    "reconcile",
]

log = logging.getLogger(__name__)


class StringsLoader(Protocol):
    def exists(self, path: str) -> bool: ...

    def load(self, path: str) -> ParsedStrings: ...


class DiskStringsLoader:
    def exists(self, path: str) -> bool:
        return filesystem.file_exists(path)

    def load(self, path: str) -> ParsedStrings:
        return load_strings_file(path)


def diff_entries(base: Mapping[str, str], entries: Mapping[str, str]) -> DiffResult:
    missing = sorted(k for k in base if k not in entries)
    unused = sorted(k for k in entries if k not in base)
    return DiffResult(missing_keys=missing, unused_keys=unused)


def _read(loader: StringsLoader, path: str) -> Tuple[FileState, Optional[ParsedStrings]]:
    if not loader.exists(path):
        return FileState.ABSENT, None
    try:
        return FileState.PRESENT, loader.load(path)
    except UnreadableStringsFileError as e:
        log.warning("%s (%s)", e, e.context.get("reason", "unknown reason"))
        return FileState.UNREADABLE, None


def reconcile_table(
    template: StringsPath,
    languages: Iterable[str],
    base_language: str,
    loader: Optional[StringsLoader] = None,
) -> List[TableLanguageResult]:
    """Reconcile one table for all ``languages`` (base language first)."""
    loader = loader or DiskStringsLoader()
    ordered = [base_language] + [lang for lang in languages if lang != base_language]
    identity = template.table_identity
    base_entries: Dict[str, str] = {}
    results: List[TableLanguageResult] = []

    for lang in ordered:
        path = template.path_for(lang)
        state, parsed = _read(loader, path)
        entries: Dict[str, str] = dict(parsed.entries) if parsed else {}
        encoding = parsed.encoding_label if parsed else None

        if lang == base_language:
            # An absent base leaves an empty reference set: other languages
            # can then only have unused strings.
            base_entries = entries
            diff = DiffResult()
            base_values: Dict[str, str] = {}
        else:
            diff = diff_entries(base_entries, entries)
            base_values = {k: base_entries[k] for k in diff.missing_keys}

        results.append(
            TableLanguageResult(
                table_identity=identity,
                language=lang,
                path=path,
                state=state,
                encoding=encoding,
                diff=diff,
                is_base=lang == base_language,
                base_values=base_values,
            )
        )
    return results


def reconcile(
    registry: TableRegistry, loader: Optional[StringsLoader] = None
) -> Tuple[List[TableLanguageResult], RunStatistics]:
    """Reconcile every table of ``registry`` in sorted order.

    Raises ``BaseLanguageMissingError`` before touching any file when the base
    language was never discovered.
    """
    languages = registry.languages()
    loader = loader or DiskStringsLoader()
    results: List[TableLanguageResult] = []
    stats = RunStatistics()
    for identity in registry.tables():
        for result in reconcile_table(
            registry.template(identity), languages, registry.base_language, loader
        ):
            stats = stats.fold(result)
            results.append(result)
    return results, stats
