"""Strings consistency CLI.

Accumulates all localizable ``.strings`` files below a search root and
verifies their mutual consistency against a base language.

 - Complete localizations are expected for every language that has at least
   one ``<lang>.lproj`` directory anywhere below the search root.
 - Keys of the base language are the required set for each strings table.
 - Keys present in the base language but absent elsewhere are *missing*;
   keys absent from the base language are *unused*.
 - The CocoaPods directory ($PODS_ROOT) and the build products directory
   ($BUILT_PRODUCTS_DIR) are excluded by default when set.

Exit codes: 0 when consistent, 3 when strings or files are missing or unused,
1 on fatal setup errors (invalid search root, no base language files).

Example (Xcode run script build phase):
  check-strings --baselang en --exclude "$SRCROOT/Vendor" -v "$SRCROOT"
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Mapping

from config import settings
from core import filesystem
from parsing.errors import StringsCheckError
from services import pipeline, reporter
from domain.models import CheckStatus

log = logging.getLogger(__name__)


def default_exclude_paths(search_root: str, environ: Mapping[str, str] | None = None) -> list[str]:
    """Exclusions derived from the Xcode build environment."""
    env = os.environ if environ is None else environ
    excludes: list[str] = []

    pods_root = env.get(settings.PODS_ROOT_ENV)
    if pods_root:
        excludes.append(pods_root)
    else:
        log.warning(
            "$%s is not set in the environment. Are you sure Xcode invoked this script?",
            settings.PODS_ROOT_ENV,
        )

    built_products_dir = env.get(settings.BUILT_PRODUCTS_DIR_ENV)
    if built_products_dir:
        # BUILT_PRODUCTS_DIR is target specific (root/build/App/Build/Products/Debug);
        # exclude the first directory beneath the search root (root/build).
        root = os.path.abspath(search_root)
        build = os.path.abspath(built_products_dir)
        root_parts = filesystem.path_components(root)
        build_parts = filesystem.path_components(build)
        common = filesystem.common_path_components(root, build)
        if len(common) == len(root_parts) and len(build_parts) > len(common):
            excludes.append(os.path.join(*build_parts[: len(common) + 1]))
    else:
        log.warning(
            "$%s is not set in the environment. Are you sure Xcode invoked this script?",
            settings.BUILT_PRODUCTS_DIR_ENV,
        )
    return excludes


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="check-strings",
        description="Accumulate all localizable .strings files and verify their mutual consistency.",
    )
    p.add_argument("search_root", metavar="searchRoot", help="Directory to scour recursively for .strings files")
    p.add_argument(
        "--baselang",
        default=settings.DEFAULT_BASE_LANG,
        help=f"Base language used as the canonical reference for required strings (default: {settings.DEFAULT_BASE_LANG})",
    )
    p.add_argument(
        "--exclude",
        nargs="+",
        default=[],
        metavar="PATH",
        help="Additional directory path(s) to exclude (default includes $BUILT_PRODUCTS_DIR and $PODS_ROOT)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    return p.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    exclude_paths = default_exclude_paths(args.search_root) + list(args.exclude)
    if args.verbose:
        log.info("Search root: %s", args.search_root)
        log.info("Excluded paths: %s", ", ".join(exclude_paths))
        log.info("Base language: %s", args.baselang)

    try:
        report = pipeline.check_tree(args.search_root, args.baselang, exclude_paths)
    except StringsCheckError as e:
        print(str(e), file=sys.stderr)
        return settings.EXIT_FATAL

    if args.json:
        print(json.dumps(reporter.report_to_dict(report), ensure_ascii=False, indent=2))
    else:
        print(reporter.render_text(report), end="")

    if report.status is CheckStatus.LOOKS_GOOD:
        return settings.EXIT_OK
    # GCC style so Xcode surfaces the line as a build warning
    print(f"warning: {reporter.summary_sentence(report.stats)}", file=sys.stderr)
    return settings.EXIT_DISCREPANCIES


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
