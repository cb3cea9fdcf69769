"""Parsing of ``.strings`` files into key/value entry sets.

The format handled is the flat one produced by genstrings and friends::

    /* Title of the main window */
    "window.title" = "Main Window";

Design decisions / assumptions:
 - One statement per line. Block comments are stripped only when they open
   and close on the same line; a ``/* ... */`` comment spanning several lines
   is not recognised and its inner lines are simply skipped unless they happen
   to look like a statement.
 - Keys never contain double quotes (escaped or not). Values run up to the
   final ``";`` on the line, so escaped quotes inside values are kept verbatim.
 - Duplicate keys are not reported; the last occurrence wins.
 - Encoding is sniffed from the BOM (UTF-8, UTF-16, UTF-32), then from the
   NUL-byte pattern of BOM-less UTF-16, then strict UTF-8. Anything else is
   decoded with a single-byte fallback and flagged as uncertain.
"""

from __future__ import annotations

import codecs
import logging
import re
from typing import Dict, MutableMapping, Optional, Tuple

from config import settings
from core import filesystem
from domain.models import ParsedStrings
from parsing.errors import UnreadableStringsFileError

__all__ = [
    "detect_encoding",
    "decode_strings",
    "strip_comment",
    "parse_line",
    "parse_entries",
    "parse_strings_bytes",
    "load_strings_file",
]

log = logging.getLogger(__name__)

# (bom, codec used on the remaining bytes, label shown in reports)
# UTF-32 LE must precede UTF-16 LE: its BOM starts with the UTF-16 LE BOM.
_BOMS: Tuple[Tuple[bytes, str, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le", "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32-be", "utf-32"),
    (codecs.BOM_UTF8, "utf-8", "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le", "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16-be", "utf-16"),
)

_RE_COMMENT = re.compile(r"/\*.*?\*/")
_RE_STATEMENT = re.compile(r'"([^"]+)"\s*=\s*"(.+)"\s*;\s*$')
_RE_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def detect_encoding(raw: bytes) -> Tuple[str, int, bool]:
    """Guess the codec of ``raw``.

    Returns ``(codec, bom_length, certain)``. ``certain`` is False only for the
    single-byte fallback.
    """
    for bom, codec, _label in _BOMS:
        if raw.startswith(bom):
            return codec, len(bom), True
    if len(raw) >= 2 and len(raw) % 2 == 0:
        if raw[0] == 0 and raw[1] != 0:
            return "utf-16-be", 0, True
        if raw[0] != 0 and raw[1] == 0:
            return "utf-16-le", 0, True
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        return settings.FALLBACK_ENCODING, 0, False
    return "utf-8", 0, True


def _label_for(codec: str) -> str:
    # byte order is not part of the label; "utf-16" with or without a BOM
    for _bom, bom_codec, label in _BOMS:
        if bom_codec == codec:
            return label
    return codec


def decode_strings(raw: bytes, source: Optional[str] = None) -> Tuple[str, str, bool]:
    """Decode raw file bytes into ``(text, encoding_label, certain)``.

    Raises ``UnreadableStringsFileError`` when the bytes carry a Unicode BOM
    but fail to decode under it, or when BOM-less bytes decode to text that
    still contains NUL characters.
    """
    codec, bom_length, certain = detect_encoding(raw)
    label = _label_for(codec)
    try:
        text = raw[bom_length:].decode(codec)
    except UnicodeDecodeError as e:
        if bom_length:
            raise UnreadableStringsFileError(
                f"Failed to decode {source or 'strings data'} as {label}",
                context={"path": source, "encoding": label, "reason": str(e)},
            ) from e
        # BOM-less UTF-16 guess was wrong; retry as UTF-8 before giving up
        try:
            text = raw.decode("utf-8")
            label, certain = "utf-8", True
        except UnicodeDecodeError:
            text = raw.decode(settings.FALLBACK_ENCODING)
            label, certain = settings.FALLBACK_ENCODING, False
    if not bom_length and "\x00" in text:
        # truncated or otherwise damaged BOM-less UTF-16
        raise UnreadableStringsFileError(
            f"Failed to decode {source or 'strings data'}: NUL bytes without a byte order mark",
            context={"path": source, "encoding": label, "reason": "embedded NUL bytes"},
        )
    if not certain:
        log.warning(
            "Encoding of %s is unknown; decoded as %s, results may be inaccurate",
            source or "strings data",
            label,
        )
    return text, label, certain


def strip_comment(line: str) -> str:
    return _RE_COMMENT.sub("", line)


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse one ``"key" = "value";`` statement; comments must already be stripped."""
    m = _RE_STATEMENT.search(line)
    if not m:
        return None
    return m.group(1), m.group(2)


def parse_entries(
    text: str, target: Optional[MutableMapping[str, str]] = None
) -> MutableMapping[str, str]:
    """Collect all statements of ``text`` into ``target`` (a new dict by default)."""
    entries: MutableMapping[str, str] = {} if target is None else target
    for line in _RE_LINE_BREAK.split(text):
        parsed = parse_line(strip_comment(line))
        if parsed is None:
            continue
        key, value = parsed
        entries[key] = value
    return entries


def parse_strings_bytes(raw: bytes, source: Optional[str] = None) -> ParsedStrings:
    text, label, certain = decode_strings(raw, source)
    entries: Dict[str, str] = {}
    parse_entries(text, entries)
    return ParsedStrings(entries=entries, encoding=label, encoding_certain=certain)


def load_strings_file(path: str) -> ParsedStrings:
    """Read and parse ``path``. Callers check existence first; read failures are
    wrapped in ``UnreadableStringsFileError``."""
    try:
        raw = filesystem.read_bytes(path)
    except OSError as e:
        raise UnreadableStringsFileError(
            f"Failed to open {path}", context={"path": path, "reason": str(e)}
        ) from e
    return parse_strings_bytes(raw, source=path)
