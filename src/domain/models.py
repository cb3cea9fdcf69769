"""Domain models for the strings consistency check."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config import settings


@dataclass(frozen=True, slots=True)
class StringsPath:
    """A recognised ``<table_root>/<language>.lproj/<filename>`` path."""

    table_root: str
    language: str
    filename: str

    @property
    def table_identity(self) -> str:
        return self.path_for(settings.LANG_WILDCARD)

    @property
    def path(self) -> str:
        return self.path_for(self.language)

    def path_for(self, language: str) -> str:
        return f"{self.table_root}/{language}{settings.LANG_DIR_SUFFIX}/{self.filename}"


@dataclass(slots=True)
class ParsedStrings:
    entries: Dict[str, str]
    encoding: str
    encoding_certain: bool = True

    @property
    def encoding_label(self) -> str:
        """Encoding as shown in reports; a guessed encoding is marked with ``?``."""
        return self.encoding if self.encoding_certain else f"{self.encoding}?"


class FileState(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class DiffResult:
    missing_keys: List[str] = field(default_factory=list)
    unused_keys: List[str] = field(default_factory=list)

    @property
    def discrepancy_count(self) -> int:
        return len(self.missing_keys) + len(self.unused_keys)


@dataclass(frozen=True, slots=True)
class TableLanguageResult:
    """Outcome of reconciling one language of one strings table.

    ``base_values`` holds the base language text of every missing key so the
    report can show translators what is expected.
    """

    table_identity: str
    language: str
    path: str
    state: FileState
    encoding: Optional[str]
    diff: DiffResult
    is_base: bool = False
    base_values: Dict[str, str] = field(default_factory=dict)

    @property
    def file_present(self) -> bool:
        return self.state is FileState.PRESENT

    @property
    def is_consistent(self) -> bool:
        return self.file_present and self.diff.discrepancy_count == 0

    @property
    def display_path(self) -> str:
        if self.encoding:
            return f"{self.path} ({self.encoding})"
        return self.path


class CheckStatus(str, Enum):
    LOOKS_GOOD = "looks good"
    INCOMPLETE = "incomplete"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Run-wide totals. Immutable; ``fold`` returns the updated value."""

    missing_file_count: int = 0
    missing_string_count: int = 0
    unused_string_count: int = 0
    good_paths: Tuple[str, ...] = ()

    def fold(self, result: TableLanguageResult) -> "RunStatistics":
        return RunStatistics(
            missing_file_count=self.missing_file_count + (0 if result.file_present else 1),
            missing_string_count=self.missing_string_count + len(result.diff.missing_keys),
            unused_string_count=self.unused_string_count + len(result.diff.unused_keys),
            good_paths=self.good_paths + ((result.display_path,) if result.is_consistent else ()),
        )


@dataclass(frozen=True, slots=True)
class CheckReport:
    base_language: str
    languages: Tuple[str, ...]
    table_count: int
    file_count: int
    results: Tuple[TableLanguageResult, ...]
    stats: RunStatistics
    status: CheckStatus

    @property
    def problems(self) -> List[TableLanguageResult]:
        return [r for r in self.results if not r.is_consistent]
