"""Human readable and JSON rendering of a ``CheckReport``."""

from __future__ import annotations

from typing import Any, Dict, List

from domain.models import (
    CheckReport,
    CheckStatus,
    FileState,
    RunStatistics,
    TableLanguageResult,
)

__all__ = [
    "status_for",
    "assessment_header",
    "format_good_line",
    "format_problem_block",
    "consistency_listing",
    "summary_sentence",
    "render_text",
    "report_to_dict",
]


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def status_for(stats: RunStatistics) -> CheckStatus:
    """Missing anything (files or strings) wins over unused strings."""
    if stats.missing_string_count > 0 or stats.missing_file_count > 0:
        return CheckStatus.INCOMPLETE
    if stats.unused_string_count > 0:
        return CheckStatus.INCONSISTENT
    return CheckStatus.LOOKS_GOOD


def assessment_header(languages: List[str], table_count: int) -> str:
    return (
        f"Assessing localizations for {_count(len(languages), 'language')} "
        f"({', '.join(languages)}) in {_count(table_count, 'strings table')}..."
    )


def format_good_line(display_path: str) -> str:
    return f"{display_path} is good."


def format_problem_block(result: TableLanguageResult, base_language: str) -> List[str]:
    missing = result.diff.missing_keys
    unused = result.diff.unused_keys
    if result.state is FileState.PRESENT:
        parts = []
        if missing:
            parts.append(f"{len(missing)} missing")
        if unused:
            parts.append(f"{len(unused)} unused")
        noun = "strings" if len(missing) + len(unused) > 1 else "string"
        lines = [f"{result.display_path} has {' and '.join(parts)} {noun}:"]
    else:
        reason = " (failed to open file)" if result.state is FileState.UNREADABLE else ""
        lines = [
            f"{result.path} is missing altogether{reason}; "
            f"expecting {_count(len(missing), 'string')}:"
        ]
    for key in missing:
        lines.append(f'\tMissing: "{key}" ({base_language}: "{result.base_values.get(key, "")}")')
    for key in unused:
        lines.append(f'\tExtra (not used): "{key}"')
    return lines


def consistency_listing(report: CheckReport) -> List[str]:
    good = report.stats.good_paths
    if not good:
        return []
    lines = [f"{len(good)} of {report.file_count} strings files appear to be consistent:"]
    lines.extend(format_good_line(p) for p in good)
    return lines


def summary_sentence(stats: RunStatistics) -> str:
    status = status_for(stats)
    if status is CheckStatus.LOOKS_GOOD:
        return "Localization looks good."

    clauses: List[str] = []
    missing_nouns: List[str] = []
    if stats.missing_file_count:
        missing_nouns.append(_count(stats.missing_file_count, "file"))
    if stats.missing_string_count:
        missing_nouns.append(_count(stats.missing_string_count, "string"))
    if missing_nouns:
        singular = len(missing_nouns) == 1 and (
            stats.missing_file_count + stats.missing_string_count == 1
        )
        clauses.append(" and ".join(missing_nouns) + (" is missing" if singular else " are missing"))
    if stats.unused_string_count:
        verb = "is" if stats.unused_string_count == 1 else "are"
        clauses.append(f"{_count(stats.unused_string_count, 'string')} {verb} unused")
    return f"Localization is {status.value}! " + "; ".join(clauses) + "."


def render_text(report: CheckReport) -> str:
    lines: List[str] = [assessment_header(list(report.languages), report.table_count), ""]
    lines.extend(consistency_listing(report))
    problems = report.problems
    if problems:
        if lines[-1] != "":
            lines.append("")
        for result in problems:
            lines.extend(format_problem_block(result, report.base_language))
    lines.append("")
    lines.append(summary_sentence(report.stats))
    return "\n".join(lines) + "\n"


def _result_to_dict(result: TableLanguageResult) -> Dict[str, Any]:
    return {
        "table": result.table_identity,
        "language": result.language,
        "path": result.path,
        "state": result.state.value,
        "encoding": result.encoding,
        "missing": [
            {"key": k, "base_value": result.base_values.get(k)} for k in result.diff.missing_keys
        ],
        "unused": list(result.diff.unused_keys),
        "consistent": result.is_consistent,
    }


def report_to_dict(report: CheckReport) -> Dict[str, Any]:
    return {
        "base_language": report.base_language,
        "languages": list(report.languages),
        "tables": report.table_count,
        "files": report.file_count,
        "status": report.status.value,
        "summary": summary_sentence(report.stats),
        "stats": {
            "missing_files": report.stats.missing_file_count,
            "missing_strings": report.stats.missing_string_count,
            "unused_strings": report.stats.unused_string_count,
            "consistent_files": len(report.stats.good_paths),
        },
        "results": [_result_to_dict(r) for r in report.results],
    }
