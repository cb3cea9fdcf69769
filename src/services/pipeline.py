"""High-level orchestration: discovered paths -> registry -> reconcile -> report."""

from __future__ import annotations
from typing import Iterable, Optional
import logging
import os

from config import settings
from core import filesystem
from domain.models import CheckReport
from parsing.errors import InvalidSearchRootError
from services import reporter
from services.reconciler import StringsLoader, reconcile
from services.table_registry import TableRegistry

log = logging.getLogger(__name__)


def run_check(
    paths: Iterable[str],
    base_language: str = settings.DEFAULT_BASE_LANG,
    loader: Optional[StringsLoader] = None,
) -> CheckReport:
    """Check the strings files among ``paths``.

    Paths not shaped like ``<root>/<lang>.lproj/<name>.strings`` are ignored.
    Output ordering depends only on the set of paths, not their order.
    """
    registry = TableRegistry(base_language)
    registry.add_paths(paths)
    languages = registry.languages()
    results, stats = reconcile(registry, loader)
    return CheckReport(
        base_language=base_language,
        languages=tuple(languages),
        table_count=len(registry),
        file_count=registry.file_count,
        results=tuple(results),
        stats=stats,
        status=reporter.status_for(stats),
    )


def check_tree(
    search_root: str,
    base_language: str = settings.DEFAULT_BASE_LANG,
    exclude_paths: Iterable[str] = (),
) -> CheckReport:
    """Find every strings file under ``search_root`` (minus exclusions) and check it."""
    if not os.path.isdir(search_root):
        raise InvalidSearchRootError(
            f"Search root {search_root} is not a directory.", context={"search_root": search_root}
        )
    paths = filesystem.find_strings_files(search_root, exclude_paths)
    log.debug("Discovered %d strings files under %s", len(paths), search_root)
    return run_check(paths, base_language)
