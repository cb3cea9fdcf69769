"""Registry grouping discovered strings files into logical strings tables."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from domain.models import StringsPath
from parsing.errors import BaseLanguageMissingError
from parsing.path_decomposer import decompose_path

__all__ = ["TableRegistry"]

log = logging.getLogger(__name__)


class TableRegistry:
    """Accumulates (table identity, language) pairs.

    The first decomposition seen for a table is kept as its template; every
    language file of the table is rebuilt from it. Reconciliation checks each
    table against the global language list, so the per-table language sets
    (``table_languages``) are informational only.
    """

    def __init__(self, base_language: str):
        self.base_language = base_language
        self._templates: Dict[str, StringsPath] = {}
        self._languages: Dict[str, Set[str]] = {}
        self._all_languages: Set[str] = set()
        self._seen_paths: Set[str] = set()
        self.file_count = 0

    def add(self, strings_path: StringsPath) -> bool:
        """Register one file; returns False if the path was already known."""
        if strings_path.path in self._seen_paths:
            return False
        self._seen_paths.add(strings_path.path)
        identity = strings_path.table_identity
        self._templates.setdefault(identity, strings_path)
        self._languages.setdefault(identity, set()).add(strings_path.language)
        self._all_languages.add(strings_path.language)
        self.file_count += 1
        return True

    def add_paths(self, paths: Iterable[str]) -> int:
        """Decompose and register raw paths, returning how many were newly registered."""
        added = 0
        for raw in paths:
            decomposed = decompose_path(raw)
            if decomposed is None:
                continue
            log.debug("Found strings (%s): %s", decomposed.language, raw)
            if self.add(decomposed):
                added += 1
        return added

    def tables(self) -> List[str]:
        return sorted(self._templates)

    def template(self, identity: str) -> StringsPath:
        return self._templates[identity]

    def table_languages(self, identity: str) -> Set[str]:
        return set(self._languages.get(identity, ()))

    def languages(self) -> List[str]:
        """All languages seen, alphabetical, with the base language first."""
        if self.base_language not in self._all_languages:
            raise BaseLanguageMissingError(
                f"No strings file in the base language ({self.base_language}) was found!",
                context={"base_language": self.base_language, "languages": sorted(self._all_languages)},
            )
        others = sorted(lang for lang in self._all_languages if lang != self.base_language)
        return [self.base_language] + others

    def __len__(self) -> int:
        return len(self._templates)
