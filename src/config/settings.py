"""Global configuration and constants for the strings consistency check."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_BASE_LANG: Final = os.environ.get("LOCALIZED_STRINGS_BASE_LANG", "en")

# Localization bundle convention: <root>/<lang>.lproj/<table>.strings
LANG_DIR_SUFFIX: Final = ".lproj"
STRINGS_SUFFIX: Final = ".strings"
LANG_WILDCARD: Final = "*"

# Used only when no BOM is present and the bytes are not valid UTF-8.
FALLBACK_ENCODING: Final = "mac_roman"

# Environment variables Xcode exports to build phase scripts
PODS_ROOT_ENV: Final = "PODS_ROOT"
BUILT_PRODUCTS_DIR_ENV: Final = "BUILT_PRODUCTS_DIR"

EXIT_OK: Final = 0
EXIT_FATAL: Final = 1
EXIT_DISCREPANCIES: Final = 3
